"""Small string utilities."""

from __future__ import annotations

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def lowercase(s: str | bytes) -> str | bytes:
    """Return ``s`` with ASCII letters converted to lowercase.

    Only the characters ``A`` to ``Z`` are changed; all other characters,
    including non-ASCII letters, are left as they are. Accepts ``str`` or
    ``bytes`` and returns the same type.
    """
    if isinstance(s, str):
        return s.translate(_ASCII_LOWER)
    if isinstance(s, (bytes, bytearray)):
        return bytes(s).lower()
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")