from typing import Protocol

AMOUNT_LEN = 16  # i128

class Identity(Protocol):
    def to_xdr(self) -> bytes: ...

def encode_amount(amount: int) -> bytes:
    """i128 as exactly 16 bytes, big-endian two's complement."""
    return amount.to_bytes(AMOUNT_LEN, "big", signed=True)

def canonicalize(owner: Identity, amount: int, salt: bytes) -> bytes:
    """
        Canonical commitment input: owner XDR || amount (16 bytes BE) || salt.
        -no length prefixes, the owner encoding is fixed length per address kind
        -salt bytes are appended unchanged
        -no validation here, callers check amount and salt first
    """
    buf = bytearray(owner.to_xdr())
    buf += encode_amount(amount)
    buf += salt
    return bytes(buf)
