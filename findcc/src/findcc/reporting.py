"""Rendering of match records for the command line."""
from __future__ import annotations

import json
from dataclasses import asdict

from .models import MatchRecord

HEADER = "OFFSET  LINE  NUMBER"


def format_record(record: MatchRecord) -> str:
    return f"{record.offset:>6}  {record.line:>4}  {record.number}"


def record_to_json(record: MatchRecord) -> str:
    return json.dumps(asdict(record), ensure_ascii=False)


__all__ = ["HEADER", "format_record", "record_to_json"]
