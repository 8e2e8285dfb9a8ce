from __future__ import annotations

import re
import secrets
import time

from ..errors import ValidationError

_IDENTIFIER_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def new_identifier() -> str:
    """Return a fresh 24 hex character identifier (4 byte timestamp + 8 random bytes)."""

    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def is_identifier(value: str) -> bool:
    return bool(_IDENTIFIER_PATTERN.match(value or ""))


def parse_identifier(value: str) -> str:
    if not is_identifier(value):
        raise ValidationError(f"Invalid identifier: {value!r}. Expected 24 hexadecimal characters.")
    return value.lower()


__all__ = ["is_identifier", "new_identifier", "parse_identifier"]
