from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from core.errors import InconsistentTransferToken, MissingCounterpartEvent
from core.models import TransferEvent


@dataclass(frozen=True)
class SentAmount:
    token: str
    amount: int


def aggregate_sent(transfers: Sequence[TransferEvent], tx_hash: Optional[str] = None) -> SentAmount:
    """
    Merge the wallet's outbound Transfer legs into one logical amount.

    Fee-on-transfer and burn tokens emit several Transfer events from the
    wallet through the same contract; the amount sent is their sum.
    """
    if not transfers:
        raise MissingCounterpartEvent("outbound Transfer", tx_hash)

    token = transfers[0].token
    tokens = {t.token for t in transfers}
    if len(tokens) > 1:
        raise InconsistentTransferToken(tokens, tx_hash)

    return SentAmount(token=token, amount=sum(t.amount for t in transfers))
