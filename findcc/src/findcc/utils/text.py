"""Text helpers shared across modules."""
from __future__ import annotations


def to_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", errors="surrogatepass")
    return bytes(data)


def is_ascii_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


__all__ = ["to_bytes", "is_ascii_digit"]
