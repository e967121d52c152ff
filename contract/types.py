from typing import Any

from contract.address import Address
from contract.errors import InvalidArgument

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
I128_MIN = -(2**127)
I128_MAX = 2**127 - 1

def _require_int(name: str, value: Any, lo: int, hi: int) -> int:
    # bool is an int subclass but never a valid ledger integer
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    if not lo <= value <= hi:
        raise InvalidArgument(f"{name} out of range [{lo}, {hi}]: {value}")
    return value

def require_u32(name: str, value: Any) -> int:
    return _require_int(name, value, 0, U32_MAX)

def require_u64(name: str, value: Any) -> int:
    return _require_int(name, value, 0, U64_MAX)

def require_i128(name: str, value: Any) -> int:
    return _require_int(name, value, I128_MIN, I128_MAX)

def require_bytes(name: str, value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidArgument(f"{name} must be bytes, got {type(value).__name__}")
    return bytes(value)

def require_address(name: str, value: Any) -> Address:
    if not isinstance(value, Address):
        raise InvalidArgument(f"{name} must be an Address, got {type(value).__name__}")
    return value
