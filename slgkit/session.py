"""Encrypted login session tokens."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from slgkit.crypto import Padding, aes_cbc_decrypt, aes_cbc_encrypt

VALID_TIME = timedelta(days=30)
_KEY = b"1234567890123456"
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_TIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")
_ID_RE = re.compile(r"[+-]?\d+")


class SessionError(ValueError):
    """Raised when a session token cannot be parsed."""


@dataclass
class Session:
    """A user id and the moment the session was issued."""

    id: int
    mtime: datetime

    def encode(self) -> str:
        """Return the token: base64 of the hex AES ciphertext of ``id|time``."""
        text = f"{self.id}|{self.mtime.strftime(_TIME_FORMAT)}"
        cipher_hex = aes_cbc_encrypt(text.encode("utf-8"), _KEY, _KEY, Padding.ZEROS)
        return base64.b64encode(cipher_hex).decode("ascii")

    def __str__(self) -> str:
        return self.encode()

    def is_valid(self) -> bool:
        """True while less than thirty days have passed since issue."""
        if self.mtime.tzinfo is not None:
            now = datetime.now(timezone.utc)
        else:
            now = datetime.now()
        return now - self.mtime < VALID_TIME


def parse_session(session: str) -> Session:
    """Decode a token made by :meth:`Session.encode`."""
    if not session:
        raise SessionError("session is empty")
    try:
        raw = base64.b64decode(session, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SessionError(f"session is not base64: {exc}") from exc

    try:
        plain = aes_cbc_decrypt(raw, _KEY, _KEY, Padding.ZEROS)
    except ValueError:
        plain = b""

    parts = plain.decode("utf-8", errors="replace").split("|")
    if len(parts) != 2:
        raise SessionError("session format error")
    id_text, time_text = parts

    if not _ID_RE.fullmatch(id_text):
        raise SessionError(f"invalid session id {id_text!r}")
    if not _TIME_RE.fullmatch(time_text):
        raise SessionError(f"invalid session time {time_text!r}")
    try:
        mtime = datetime.strptime(time_text, _TIME_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError as exc:
        raise SessionError(f"invalid session time {time_text!r}") from exc
    return Session(id=int(id_text), mtime=mtime)