"""
QuickEx privacy contract.

Entry points for privacy levels, escrow ids and amount commitments. Each
public method is one contract call: calls are serialised, and a call that
raises leaves the storage exactly as it found it.
"""
from __future__ import annotations

import functools
import logging
import threading
from typing import List, Optional, Tuple

from contract import commitment
from contract.address import Address
from contract.errors import ContractError
from contract.escrow import EscrowRegistry
from contract.privacy import AccountPrivacyStore
from contract.storage import MemoryStorage, Storage
from contract.types import require_address, require_u32, require_u64

logger = logging.getLogger(__name__)

def contract_call(fn):
    @functools.wraps(fn)
    def wrapper(self: QuickexContract, *args, **kwargs):
        with self._lock, self.storage.transaction():
            try:
                return fn(self, *args, **kwargs)
            except ContractError as e:
                logger.warning("%s rejected (code %d): %s", fn.__name__, e.code, e)
                raise
    return wrapper

class QuickexContract:
    def __init__(self, storage: Storage | None = None):
        self.storage = storage if storage is not None else MemoryStorage()
        self.privacy = AccountPrivacyStore(self.storage)
        self.escrows = EscrowRegistry(self.storage)
        self._lock = threading.RLock()

    # -- privacy

    @contract_call
    def enable_privacy(self, account: Address, privacy_level: int) -> bool:
        account = require_address("account", account)
        privacy_level = require_u32("privacy_level", privacy_level)
        logger.info("privacy level %d enabled for %s", privacy_level, account)
        return self.privacy.enable(account, privacy_level)

    @contract_call
    def privacy_status(self, account: Address) -> Optional[int]:
        return self.privacy.status(require_address("account", account))

    @contract_call
    def privacy_history(self, account: Address) -> List[int]:
        return self.privacy.history(require_address("account", account))

    # -- escrow

    @contract_call
    def create_escrow(self, sender: Address, recipient: Address, amount: int) -> int:
        sender = require_address("from", sender)
        recipient = require_address("to", recipient)
        require_u64("amount", amount)
        escrow_id = self.escrows.create(sender, recipient, amount)
        logger.info("escrow %d created: %s -> %s", escrow_id, sender, recipient)
        return escrow_id

    @contract_call
    def escrow_details(self, escrow_id: int) -> Optional[Tuple[Address, Address]]:
        return self.escrows.get(require_u64("escrow_id", escrow_id))

    # -- commitments (pure, never touch storage)

    def create_amount_commitment(self, owner: Address, amount: int, salt: bytes) -> bytes:
        return commitment.create_amount_commitment(owner, amount, salt)

    def verify_amount_commitment(self, commitment_bytes: bytes, owner: Address, amount: int, salt: bytes) -> bool:
        return commitment.verify_amount_commitment(commitment_bytes, owner, amount, salt)

    @staticmethod
    def health_check() -> bool:
        return True
