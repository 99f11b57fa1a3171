import base64
import string
from datetime import datetime, timedelta, timezone

import pytest

from slgkit.crypto import Padding, aes_cbc_encrypt
from slgkit.session import Session, SessionError, parse_session

KEY = b"1234567890123456"


def _token(text):
    return base64.b64encode(aes_cbc_encrypt(text.encode(), KEY, KEY, Padding.ZEROS)).decode()


def test_round_trip():
    session = Session(id=42, mtime=datetime(2021, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
    assert parse_session(session.encode()) == session


def test_str_is_encoded_token():
    session = Session(id=1, mtime=datetime(2020, 5, 6, 7, 8, 9, tzinfo=timezone.utc))
    assert str(session) == session.encode()


def test_token_is_base64_of_hex():
    token = Session(id=3, mtime=datetime(2020, 1, 1, tzinfo=timezone.utc)).encode()
    inner = base64.b64decode(token).decode()
    assert set(inner) <= set(string.hexdigits.lower())


def test_parse_hand_built_token():
    parsed = parse_session(_token("17|2022-03-04 05:06:07"))
    assert parsed.id == 17
    assert parsed.mtime == datetime(2022, 3, 4, 5, 6, 7, tzinfo=timezone.utc)


def test_empty_session_raises():
    with pytest.raises(SessionError):
        parse_session("")


def test_invalid_base64_raises():
    with pytest.raises(SessionError):
        parse_session("!!!not base64!!!")


def test_garbage_ciphertext_raises():
    with pytest.raises(SessionError):
        parse_session(base64.b64encode(b"zz").decode())


@pytest.mark.parametrize(
    "text", ["no separator", "a|b|c", "x1|2022-03-04 05:06:07", "5|2022/03/04 05:06:07"]
)
def test_bad_contents_raise(text):
    with pytest.raises(SessionError):
        parse_session(_token(text))


def test_session_error_is_value_error():
    with pytest.raises(ValueError):
        parse_session("")


def test_is_valid_recent_and_expired():
    now = datetime.now(timezone.utc)
    assert Session(id=1, mtime=now - timedelta(days=1)).is_valid() is True
    assert Session(id=1, mtime=now - timedelta(days=31)).is_valid() is False


def test_is_valid_naive_time():
    assert Session(id=1, mtime=datetime.now() - timedelta(hours=1)).is_valid() is True