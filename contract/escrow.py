from typing import Optional, Tuple

from contract.address import Address
from contract.storage import Storage

COUNTER_KEY = "escrow_counter"
ESCROW_KEY = "escrow"

class EscrowRegistry:
    """
    Issues escrow ids (1, 2, 3, ...) and records the (from, to) pair per id.
    There are no escrow states yet, and amounts are not stored.
    """

    def __init__(self, storage: Storage):
        self.storage = storage

    def create(self, sender: Address, recipient: Address, amount: int) -> int:
        # amount is accepted but not held anywhere until escrow funding exists
        escrow_id = self.storage.get(COUNTER_KEY, 0) + 1
        self.storage.set(COUNTER_KEY, escrow_id)
        self.storage.set((ESCROW_KEY, escrow_id), {
            "from": sender.strkey,
            "to": recipient.strkey,
        })
        return escrow_id

    def get(self, escrow_id: int) -> Optional[Tuple[Address, Address]]:
        details = self.storage.get((ESCROW_KEY, escrow_id))
        if details is None:
            return None
        return Address.from_strkey(details["from"]), Address.from_strkey(details["to"])
