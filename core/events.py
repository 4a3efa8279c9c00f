from __future__ import annotations

import logging
from typing import List, Optional

from core.models import (
    DecodedEvent,
    DecodedLogs,
    RawTransaction,
    TransferEvent,
    WithdrawalEvent,
)

logger = logging.getLogger(__name__)


TRANSFER = "Transfer"
WITHDRAWAL = "Withdrawal"
SWAP = "Swap"
MINT = "Mint"


def _lower(s) -> str:
    return str(s or "").lower()


def _param_value(ev: DecodedEvent, idx: int):
    if idx >= len(ev.params):
        raise ValueError(f"{ev.name} has {len(ev.params)} params, wanted index {idx}")
    return ev.params[idx].value


def _to_transfer(token: str, ev: DecodedEvent) -> TransferEvent:
    # Transfer(from, to, value)
    return TransferEvent(
        token=_lower(token),
        sender=_lower(_param_value(ev, 0)),
        recipient=_lower(_param_value(ev, 1)),
        amount=int(_param_value(ev, 2)),
    )


def _to_withdrawal(token: str, ev: DecodedEvent) -> WithdrawalEvent:
    # Withdrawal(src, wad)
    return WithdrawalEvent(
        token=_lower(token),
        account=_lower(_param_value(ev, 0)),
        amount=int(_param_value(ev, 1)),
    )


def decode_logs(tx: RawTransaction) -> DecodedLogs:
    """
    Partition a transaction's decoded logs by event kind.
    Undecoded entries are ignored; malformed Transfer/Withdrawal params are skipped,
    but the from-address of a malformed Transfer is kept in `malformed_senders`.
    """
    transfers: List[TransferEvent] = []
    malformed_senders: List[str] = []
    withdrawal: Optional[WithdrawalEvent] = None
    has_swap = False
    has_mint = False

    for entry in tx.log_entries:
        ev = entry.decoded
        if ev is None:
            continue

        try:
            if ev.name == TRANSFER:
                transfers.append(_to_transfer(entry.sender_address, ev))
            elif ev.name == WITHDRAWAL:
                if withdrawal is None:
                    withdrawal = _to_withdrawal(entry.sender_address, ev)
            elif ev.name == SWAP:
                has_swap = True
            elif ev.name == MINT:
                has_mint = True
        except (TypeError, ValueError) as e:
            logger.debug("skipping malformed %s log in %s: %s", ev.name, tx.tx_hash, e)
            if ev.name == TRANSFER and ev.params:
                malformed_senders.append(_lower(ev.params[0].value))

    return DecodedLogs(
        transfers=transfers,
        withdrawal=withdrawal,
        has_swap=has_swap,
        has_mint=has_mint,
        malformed_senders=tuple(malformed_senders),
    )


def sent_transfers(logs: DecodedLogs, wallet: str) -> List[TransferEvent]:
    w = _lower(wallet)
    return [t for t in logs.transfers if t.sender == w]


def has_malformed_sent(logs: DecodedLogs, wallet: str) -> bool:
    return _lower(wallet) in logs.malformed_senders


def received_transfers(logs: DecodedLogs, wallet: str) -> List[TransferEvent]:
    w = _lower(wallet)
    return [t for t in logs.transfers if t.recipient == w]
