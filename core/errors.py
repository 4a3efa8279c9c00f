from __future__ import annotations

from typing import Iterable, Optional


class SwapExtractionError(Exception):
    """Base for per-transaction data faults. Never retried."""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        super().__init__(message)
        self.tx_hash = tx_hash

    def for_tx(self, tx_hash: str) -> "SwapExtractionError":
        if self.tx_hash is None:
            self.tx_hash = tx_hash
        return self


class UnknownToken(SwapExtractionError):
    def __init__(self, address: str, tx_hash: Optional[str] = None):
        super().__init__(f"token {address} is not in the balance catalogue", tx_hash)
        self.address = address


class InconsistentTransferToken(SwapExtractionError):
    def __init__(self, tokens: Iterable[str], tx_hash: Optional[str] = None):
        self.tokens = sorted(set(tokens))
        super().__init__(
            f"outbound transfers span several token contracts: {', '.join(self.tokens)}",
            tx_hash,
        )


class MalformedTransaction(SwapExtractionError):
    """A value the swap depends on could not be read from the indexer data."""

    def __init__(self, reason: str, tx_hash: Optional[str] = None):
        super().__init__(reason, tx_hash)
        self.reason = reason


class MissingCounterpartEvent(SwapExtractionError):
    def __init__(self, expected: str, tx_hash: Optional[str] = None):
        super().__init__(f"eligible swap is missing its {expected} event", tx_hash)
        self.expected = expected
