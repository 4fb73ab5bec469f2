"""Byte-oriented views of strings."""

from __future__ import annotations


def byte_slice(s: str, start: int, end: int) -> str:
    """The text between two UTF-8 byte offsets.

    Raises ValueError when the range is out of bounds or does not fall on
    character boundaries.
    """
    data = s.encode("utf-8")
    if not 0 <= start <= end <= len(data):
        raise ValueError(
            f"byte range {start}..{end} out of bounds for length {len(data)}"
        )
    try:
        return data[start:end].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(
            f"byte range {start}..{end} does not lie on character boundaries"
        ) from exc


def chars_of(s: str) -> list[str]:
    """The characters of the string in order."""
    return list(s)


def bytes_of(s: str) -> list[int]:
    """The UTF-8 bytes of the string in order."""
    return list(s.encode("utf-8"))