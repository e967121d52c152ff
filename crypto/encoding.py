import base64
import binascii
from typing import Union

# strkey version bytes (first 5 bits select the letter after base32)
STRKEY_ACCOUNT = 6 << 3   # 'G'
STRKEY_CONTRACT = 2 << 3  # 'C'

def b64url_encode(data: bytes) -> str:
    """Encode bytes to a URL-safe Base64 string without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b'=').decode('ascii')

def b64url_decode(s: Union[str, bytes]) -> bytes:
    if isinstance(s, bytes):
        s = s.decode("ascii")

    pad = "=" * ((4 - len(s) % 4) % 4)
    return base64.urlsafe_b64decode((s + pad).encode("ascii"))

def crc16_xmodem(data: bytes) -> bytes:
    """CRC16-XModem checksum, little endian as strkeys expect."""
    return binascii.crc_hqx(data, 0).to_bytes(2, "little")

def strkey_encode(version: int, payload: bytes) -> str:
    body = bytes([version]) + payload
    return base64.b32encode(body + crc16_xmodem(body)).decode("ascii")

def strkey_decode(s: str) -> tuple[int, bytes]:
    """
    Returns (version byte, payload). Raises ValueError on a bad
    alphabet, length or checksum.
    """
    try:
        raw = base64.b32decode(s.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as e:
        raise ValueError(f"not a strkey: {s!r}") from e
    if len(raw) < 3:
        raise ValueError(f"strkey too short: {s!r}")

    body, checksum = raw[:-2], raw[-2:]
    if crc16_xmodem(body) != checksum:
        raise ValueError(f"strkey checksum mismatch: {s!r}")
    return body[0], body[1:]
