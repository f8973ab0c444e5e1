"""Check digit validation helpers."""
from __future__ import annotations

from typing import List

from ..models import Algorithm

_ASCII_DIGITS = frozenset("0123456789")


def _digits(window: str | bytes) -> List[int]:
    if isinstance(window, (bytes, bytearray)):
        window = window.decode("ascii", errors="replace")
    if not window or not set(window) <= _ASCII_DIGITS:
        raise ValueError(f"Window must be a non-empty run of ASCII digits: {window!r}")
    return [ord(char) - 48 for char in window]


def mod10_valid(window: str | bytes) -> bool:
    """Return True if the last digit equals the mod 10 sum of the others."""
    digits = _digits(window)
    expected = 0
    for digit in digits[:-1]:
        expected = (expected + digit) % 10
    return digits[-1] == expected


def luhn_valid(window: str | bytes) -> bool:
    """Return True if the window, check digit included, passes Luhn."""
    digits = _digits(window)
    checksum = 0
    parity = len(digits) % 2
    for index, digit in enumerate(digits):
        if index % 2 == parity:
            digit *= 2
            if digit > 9:
                digit -= 9
        checksum += digit
    return checksum % 10 == 0


def checksum_valid(window: str | bytes, algorithm: Algorithm) -> bool:
    if algorithm is Algorithm.MOD10:
        return mod10_valid(window)
    if algorithm is Algorithm.LUHN:
        return luhn_valid(window)
    raise ValueError(f"Unknown checksum algorithm: {algorithm!r}")


__all__ = ["mod10_valid", "luhn_valid", "checksum_valid"]
