class ContractError(Exception):
    """Aborts the whole contract call. `code` is stable across releases."""
    code = 0

class InvalidAmount(ContractError):
    code = 1

    def __init__(self, message: str = "Amount must be non-negative"):
        super().__init__(message)

class SaltTooLong(ContractError):
    code = 2

    def __init__(self, message: str = "Salt length exceeds maximum allowed"):
        super().__init__(message)

class InvalidArgument(ContractError):
    # argument does not fit its declared ledger type (u32, u64, i128, bytes, address)
    code = 3
