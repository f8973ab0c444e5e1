"""Shared domain models used across findcc."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Algorithm(str, Enum):
    MOD10 = "mod10"
    LUHN = "luhn"


@dataclass(frozen=True, slots=True)
class MatchRecord:
    offset: int
    line: int
    number: str


__all__ = ["Algorithm", "MatchRecord"]
