"""
Amount commitments.

Placeholder for future zero-knowledge commitments:
    commitment = SHA256(owner XDR || amount (i128, big-endian) || salt)

This is NOT a hiding or binding commitment in the ZK sense. Anyone who knows
owner, amount and salt can recompute it, and short salts can be brute-forced.
It exists to shape APIs before a real scheme (Pedersen, Poseidon) lands.
"""
import logging

from crypto.canonical import canonicalize
from crypto.hashing import digests_equal, sha256
from contract.address import Address
from contract.errors import ContractError, InvalidAmount, SaltTooLong
from contract.types import require_address, require_bytes, require_i128

logger = logging.getLogger(__name__)

MAX_SALT_LENGTH = 256
COMMITMENT_LEN = 32

def create_amount_commitment(owner: Address, amount: int, salt: bytes) -> bytes:
    """
    Returns the 32-byte commitment to (owner, amount, salt).

    Raises InvalidAmount if amount < 0, SaltTooLong if salt is longer than
    MAX_SALT_LENGTH, InvalidArgument if an argument is not of its ledger type.
    """
    owner = require_address("owner", owner)
    amount = require_i128("amount", amount)
    salt = require_bytes("salt", salt)

    if amount < 0:
        raise InvalidAmount()
    if len(salt) > MAX_SALT_LENGTH:
        raise SaltTooLong()

    return sha256(canonicalize(owner, amount, salt))

def verify_amount_commitment(commitment: bytes, owner: Address, amount: int, salt: bytes) -> bool:
    """
    True only if `commitment` equals the recomputed commitment.
    Never raises: tampered values, inputs `create` would reject and
    malformed commitments all report False.
    """
    if not isinstance(commitment, (bytes, bytearray)) or len(commitment) != COMMITMENT_LEN:
        return False
    try:
        recomputed = create_amount_commitment(owner, amount, salt)
    except ContractError as e:
        logger.debug("commitment verification rejected inputs: %s", e)
        return False
    return digests_equal(bytes(commitment), recomputed)
