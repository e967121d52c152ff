import hashlib
import hmac

def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()

def digests_equal(a: bytes, b: bytes) -> bool:
    # full-length comparison, no early exit on the first differing byte
    return hmac.compare_digest(a, b)
