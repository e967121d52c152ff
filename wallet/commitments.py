import os

from crypto.encoding import b64url_encode
from contract.address import Address
from contract.commitment import create_amount_commitment

def commit(owner: Address, amount: int, salt: bytes) -> str:
    """
    Same commitment the contract computes, without a round trip, base64url.
    Keep the salt: it is needed to open the commitment later.
    """
    return b64url_encode(create_amount_commitment(owner, amount, salt))

def new_salt(n: int = 16) -> bytes:
    return os.urandom(n)
