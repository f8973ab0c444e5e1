from hypothesis import given, strategies as st

from findcc.models import Algorithm, MatchRecord
from findcc.scanner import ScannerConfig, ScanState, scan_text
from findcc.utils.checks import luhn_valid, mod10_valid

digit_strings = st.text(alphabet="0123456789", min_size=1, max_size=40)


def _reference_luhn(number: str) -> bool:
    total = 0
    for position, char in enumerate(reversed(number)):
        value = int(char)
        if position % 2 == 1:
            value = sum(int(d) for d in str(value * 2))
        total += value
    return total % 10 == 0


def _reference_matches(data: bytes, length: int, algorithm: Algorithm) -> list[MatchRecord]:
    valid = mod10_valid if algorithm is Algorithm.MOD10 else _reference_luhn
    found = []
    for start in range(len(data) - length + 1):
        chunk = data[start : start + length]
        if not all(0x30 <= byte <= 0x39 for byte in chunk):
            continue
        number = chunk.decode("ascii")
        if valid(number):
            line = data[: start + length].count(b"\n")
            found.append(MatchRecord(offset=start, line=line, number=number))
    return found


@given(payload=st.text(alphabet="0123456789", min_size=0, max_size=30), check=st.integers(0, 9))
def test_mod10_valid_iff_check_digit_is_payload_sum(payload: str, check: int) -> None:
    expected = sum(int(d) for d in payload) % 10
    assert mod10_valid(payload + str(check)) is (check == expected)


@given(digit_strings)
def test_luhn_matches_reference(number: str) -> None:
    assert luhn_valid(number) is _reference_luhn(number)


@given(number=digit_strings)
def test_luhn_has_exactly_one_check_digit(number: str) -> None:
    payload = number[:-1]
    valid = [d for d in "0123456789" if luhn_valid(payload + d)]
    assert len(valid) == 1


@given(
    data=st.binary(max_size=200) | st.text(alphabet="0123456789\nab ", max_size=200).map(str.encode),
    length=st.integers(1, 8),
    algorithm=st.sampled_from(list(Algorithm)),
)
def test_scan_matches_brute_force(data: bytes, length: int, algorithm: Algorithm) -> None:
    config = ScannerConfig(window_length=length, algorithm=algorithm, chunk_size=7)
    assert scan_text(data, config=config) == _reference_matches(data, length, algorithm)


@given(data=st.binary(max_size=300), length=st.integers(1, 20))
def test_window_never_exceeds_length(data: bytes, length: int) -> None:
    state = ScanState()
    for byte in data:
        state.push(byte, length)
        assert len(state.window) <= length
        if not 0x30 <= byte <= 0x39:
            assert not state.window
