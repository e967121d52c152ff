from typing import List, Optional

from contract.address import Address
from contract.storage import Storage

LEVEL_KEY = "privacy_level"
HISTORY_KEY = "privacy_history"

class AccountPrivacyStore:
    """Current privacy level per account plus its full history, newest first."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def enable(self, account: Address, level: int) -> bool:
        self.storage.set((LEVEL_KEY, account.strkey), level)

        history = self.history(account)
        history.insert(0, level)
        self.storage.set((HISTORY_KEY, account.strkey), history)
        return True

    def status(self, account: Address) -> Optional[int]:
        return self.storage.get((LEVEL_KEY, account.strkey))

    def history(self, account: Address) -> List[int]:
        return self.storage.get((HISTORY_KEY, account.strkey), [])
