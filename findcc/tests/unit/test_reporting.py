import json

from findcc.models import MatchRecord
from findcc.reporting import HEADER, format_record, record_to_json


def test_header_text() -> None:
    assert HEADER == "OFFSET  LINE  NUMBER"


def test_format_record_is_fixed_width() -> None:
    record = MatchRecord(offset=0, line=0, number="1234567812345670")
    assert format_record(record) == "     0     0  1234567812345670"


def test_format_record_large_values_are_not_truncated() -> None:
    record = MatchRecord(offset=12345678, line=123456, number="0000000000000000")
    assert format_record(record) == "12345678  123456  0000000000000000"


def test_record_to_json() -> None:
    record = MatchRecord(offset=42, line=3, number="4111111111111111")
    assert json.loads(record_to_json(record)) == {"offset": 42, "line": 3, "number": "4111111111111111"}
