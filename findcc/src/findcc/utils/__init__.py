"""Utility exports."""
from .checks import checksum_valid, luhn_valid, mod10_valid
from .text import is_ascii_digit, to_bytes

__all__ = [
    "checksum_valid",
    "luhn_valid",
    "mod10_valid",
    "is_ascii_digit",
    "to_bytes",
]
