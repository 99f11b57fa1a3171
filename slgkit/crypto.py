"""AES-CBC encryption with hex output, MD5 hashing and gzip helpers."""

from __future__ import annotations

import binascii
import enum
import gzip
import hashlib
import zlib

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16
_KEY_SIZES = (16, 24, 32)


class Padding(str, enum.Enum):
    """Block padding schemes accepted by the AES helpers."""

    PKCS5 = "PKCS5"
    PKCS7 = "PKCS7"
    ZEROS = "ZEROS"


def _pad(data: bytes, padding: Padding) -> bytes:
    count = BLOCK_SIZE - len(data) % BLOCK_SIZE
    if padding is Padding.ZEROS:
        return data + bytes(count)
    return data + bytes([count]) * count


def _unpad(data: bytes, padding: Padding) -> bytes:
    if padding is Padding.ZEROS:
        return data.rstrip(b"\x00")
    if not data:
        raise ValueError("invalid padding: empty data")
    count = data[-1]
    if count > len(data):
        raise ValueError("invalid padding")
    return data[: len(data) - count]


def _cipher(key: bytes, iv: bytes) -> Cipher:
    if len(key) not in _KEY_SIZES:
        raise ValueError(f"invalid AES key size {len(key)}")
    if len(iv) != BLOCK_SIZE:
        raise ValueError(f"IV length must equal block size {BLOCK_SIZE}")
    return Cipher(algorithms.AES(bytes(key)), modes.CBC(bytes(iv)))


def aes_cbc_encrypt(src: bytes, key: bytes, iv: bytes, padding: Padding | str) -> bytes:
    """Encrypt *src* with AES-CBC and return the ciphertext as lowercase hex bytes."""
    scheme = Padding(padding)
    encryptor = _cipher(key, iv).encryptor()
    ciphertext = encryptor.update(_pad(bytes(src), scheme)) + encryptor.finalize()
    return binascii.hexlify(ciphertext)


def aes_cbc_decrypt(src: bytes | str, key: bytes, iv: bytes, padding: Padding | str) -> bytes:
    """Decrypt hex-encoded AES-CBC ciphertext and strip its padding."""
    scheme = Padding(padding)
    if isinstance(src, str):
        src = src.encode("ascii", errors="strict")
    ciphertext = binascii.unhexlify(src)
    if len(ciphertext) % BLOCK_SIZE:
        raise ValueError("ciphertext is not a multiple of the block size")
    decryptor = _cipher(key, iv).decryptor()
    plain = decryptor.update(ciphertext) + decryptor.finalize()
    return _unpad(plain, scheme)


def md5(text: str) -> str:
    """Return the hex MD5 digest of *text*."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def gzip_bytes(data: bytes) -> bytes:
    """Compress *data* with gzip at the highest level."""
    return gzip.compress(bytes(data), compresslevel=9, mtime=0)


def gunzip_bytes(data: bytes) -> bytes:
    """Decompress gzip *data*; raise ValueError when it is not valid gzip."""
    if not data:
        raise ValueError("empty gzip stream")
    try:
        return gzip.decompress(bytes(data))
    except (OSError, EOFError, zlib.error) as exc:
        raise ValueError(f"invalid gzip data: {exc}") from exc


def password(pwd: str, pwd_code: str) -> str:
    """Hash a password together with its salt code."""
    return md5(pwd + pwd_code)