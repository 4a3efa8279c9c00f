from __future__ import annotations

from enum import Enum

from core.errors import MalformedTransaction
from core.events import has_malformed_sent, received_transfers, sent_transfers
from core.models import DecodedLogs, RawTransaction


class Classification(str, Enum):
    EXCLUDED = "excluded"
    FROM_TOKEN = "eligible-from-token"
    FROM_NATIVE = "eligible-from-native"


def native_amount(tx: RawTransaction) -> int:
    try:
        return int(tx.native_value or 0)
    except (TypeError, ValueError):
        raise MalformedTransaction(f"native value {tx.native_value!r} is not a decimal integer", tx.tx_hash)


def is_native_originated(tx: RawTransaction) -> bool:
    return native_amount(tx) != 0


def classify(tx: RawTransaction, logs: DecodedLogs, wallet: str) -> Classification:
    """
    Decide whether a transaction is a swap made by `wallet`, and from which side.

    A Swap event alone is not enough: pools emit it for swaps other accounts
    routed through, and liquidity adds emit it next to Mint. The wallet's own
    transfer direction anchors the event set to its side of the exchange.
    """
    # liquidity provision, even if a Swap event coexists
    if logs.has_mint:
        return Classification.EXCLUDED

    if not logs.has_swap:
        return Classification.EXCLUDED

    if not is_native_originated(tx):
        # an unreadable outbound leg still counts; the builder reports it
        if not sent_transfers(logs, wallet) and not has_malformed_sent(logs, wallet):
            return Classification.EXCLUDED
        # something must come back: a token transfer or a wrapped-native withdrawal
        if not received_transfers(logs, wallet) and logs.withdrawal is None:
            return Classification.EXCLUDED
        return Classification.FROM_TOKEN

    if not received_transfers(logs, wallet):
        return Classification.EXCLUDED
    return Classification.FROM_NATIVE
