class LedgerError(Exception):
    """Base class for recoverable ledger errors. `reason` is shown to the caller as is."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ValidationError(LedgerError):
    pass


class NotFoundError(LedgerError):
    pass
