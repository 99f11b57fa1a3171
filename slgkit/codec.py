"""JSON message encoding and random identifier generation."""

from __future__ import annotations

import json
import random
from typing import Any

LETTERS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def marshal(value: Any) -> bytes:
    """Encode *value* as compact JSON with sorted keys and HTML-safe escapes."""
    text = json.dumps(
        value, ensure_ascii=False, separators=(",", ":"), sort_keys=True, allow_nan=False
    )
    for char, escape in _ESCAPES:
        text = text.replace(char, escape)
    return text.encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def unmarshal(data: bytes | str) -> Any:
    """Decode JSON *data*; raise ValueError when it is malformed."""
    return json.loads(data, parse_constant=_reject_constant)


def rand_seq(n: int) -> str:
    """Return a random string of *n* alphanumeric characters."""
    if n < 0:
        raise ValueError("length must not be negative")
    return "".join(random.choices(LETTERS, k=n))