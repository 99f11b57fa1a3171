import binascii
import string

import pytest

from slgkit.crypto import (
    Padding,
    aes_cbc_decrypt,
    aes_cbc_encrypt,
    gunzip_bytes,
    gzip_bytes,
    md5,
    password,
)

KEY = (b"placeholder" * 2)[:16]


@pytest.mark.parametrize("padding", list(Padding))
@pytest.mark.parametrize("plain", [b"hello", b"x" * 16, b"a longer message spanning blocks"])
def test_aes_round_trip(padding, plain):
    encrypted = aes_cbc_encrypt(plain, KEY, KEY, padding)
    assert aes_cbc_decrypt(encrypted, KEY, KEY, padding) == plain


def test_encrypt_output_is_lowercase_hex_of_whole_blocks():
    encrypted = aes_cbc_encrypt(b"hello", KEY, KEY, Padding.ZEROS)
    assert set(encrypted.decode()) <= set(string.hexdigits.lower())
    raw = binascii.unhexlify(encrypted)
    assert len(raw) % 16 == 0
    assert len(raw) >= len(b"hello")


def test_zero_padding_adds_full_block_to_aligned_input():
    aligned = aes_cbc_encrypt(b"y" * 16, KEY, KEY, Padding.ZEROS)
    short = aes_cbc_encrypt(b"y" * 15, KEY, KEY, Padding.ZEROS)
    assert len(aligned) == 2 * len(short)


def test_padding_accepts_string_name():
    encrypted = aes_cbc_encrypt(b"abc", KEY, KEY, "PKCS7")
    assert aes_cbc_decrypt(encrypted.decode(), KEY, KEY, Padding.PKCS7) == b"abc"


def test_bad_key_size_raises():
    with pytest.raises(ValueError):
        aes_cbc_encrypt(b"abc", b"short", KEY, Padding.PKCS7)


def test_bad_hex_raises():
    with pytest.raises(ValueError):
        aes_cbc_decrypt(b"zz", KEY, KEY, Padding.PKCS7)


def test_ciphertext_not_block_multiple_raises():
    with pytest.raises(ValueError):
        aes_cbc_decrypt(b"abcd", KEY, KEY, Padding.PKCS7)


def test_md5_known_values():
    assert md5("") == "d41d8cd98f00b204e9800998ecf8427e"
    assert md5("abc") == "900150983cd24fb0d6963f7d28e17f72"


def test_password_hashes_concatenation():
    assert password("ab", "c") == md5("abc")
    assert password("ab", "c") != password("ab", "d")


def test_gzip_round_trip_and_magic():
    data = b"some data " * 50
    packed = gzip_bytes(data)
    assert packed[:2] == b"\x1f\x8b"
    assert gunzip_bytes(packed) == data


def test_gzip_is_deterministic_deflate_stream():
    first = gzip_bytes(b"same")
    second = gzip_bytes(b"same")
    assert first == second
    assert first[2] == 8
    assert gunzip_bytes(first) == b"same"


@pytest.mark.parametrize("bad", [b"", b"not gzip at all"])
def test_gunzip_invalid_raises(bad):
    with pytest.raises(ValueError):
        gunzip_bytes(bad)