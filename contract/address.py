from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from enum import IntEnum

from crypto.encoding import (
    STRKEY_ACCOUNT,
    STRKEY_CONTRACT,
    strkey_decode,
    strkey_encode,
)

SCV_ADDRESS = 18
PUBLIC_KEY_TYPE_ED25519 = 0
PAYLOAD_LEN = 32

class AddressKind(IntEnum):
    ACCOUNT = 0
    CONTRACT = 1

_STRKEY_VERSIONS = {
    AddressKind.ACCOUNT: STRKEY_ACCOUNT,
    AddressKind.CONTRACT: STRKEY_CONTRACT,
}

@dataclass(frozen=True)
class Address:
    """
    Ledger identity: an account (Ed25519 public key) or a contract (hash).
    Equality and hashing are by kind + payload.
    """
    kind: AddressKind
    payload: bytes

    def __post_init__(self):
        if not isinstance(self.payload, bytes) or len(self.payload) != PAYLOAD_LEN:
            raise ValueError(f"address payload must be {PAYLOAD_LEN} bytes")
        object.__setattr__(self, "kind", AddressKind(self.kind))

    @classmethod
    def account(cls, public_key: bytes) -> Address:
        return cls(AddressKind.ACCOUNT, public_key)

    @classmethod
    def contract(cls, contract_hash: bytes) -> Address:
        return cls(AddressKind.CONTRACT, contract_hash)

    @classmethod
    def generate(cls) -> Address:
        """Random account address, for tests and demos."""
        return cls.account(os.urandom(PAYLOAD_LEN))

    @classmethod
    def from_strkey(cls, s: str) -> Address:
        version, payload = strkey_decode(s)
        for kind, v in _STRKEY_VERSIONS.items():
            if v == version:
                return cls(kind, payload)
        raise ValueError(f"unsupported strkey version byte {version}: {s!r}")

    @property
    def strkey(self) -> str:
        return strkey_encode(_STRKEY_VERSIONS[self.kind], self.payload)

    def to_xdr(self) -> bytes:
        """
        XDR of ScVal::Address:
          u32 SCV_ADDRESS | u32 address kind | account: u32 key type + key
                                              contract: hash
        """
        head = struct.pack(">II", SCV_ADDRESS, self.kind)
        if self.kind is AddressKind.ACCOUNT:
            return head + struct.pack(">I", PUBLIC_KEY_TYPE_ED25519) + self.payload
        return head + self.payload

    def __str__(self) -> str:
        return self.strkey
