from __future__ import annotations

from typing import Tuple

from core.aggregator import aggregate_sent
from core.classifier import Classification, native_amount
from core.errors import MalformedTransaction, MissingCounterpartEvent, SwapExtractionError
from core.events import has_malformed_sent, received_transfers, sent_transfers
from core.models import (
    NATIVE_ADDR,
    NATIVE_DECIMALS,
    DecodedLogs,
    RawTransaction,
    SwapRecord,
)
from core.tokens import TokenMetadataIndex


Leg = Tuple[str, str, str, int]  # (token, symbol, amount, decimals)


def _token_leg(tokens: TokenMetadataIndex, token: str, amount: int) -> Leg:
    meta = tokens.lookup(token)
    return token, meta.symbol, str(amount), int(meta.decimals)


def _native_leg(native_symbol: str, amount) -> Leg:
    return NATIVE_ADDR, native_symbol, str(int(amount)), NATIVE_DECIMALS


def _from_token_legs(
    tx: RawTransaction,
    logs: DecodedLogs,
    wallet: str,
    tokens: TokenMetadataIndex,
    native_symbol: str,
) -> Tuple[Leg, Leg]:
    if has_malformed_sent(logs, wallet):
        raise MalformedTransaction("an outbound Transfer from the wallet has an unreadable amount", tx.tx_hash)
    sent = aggregate_sent(sent_transfers(logs, wallet), tx.tx_hash)
    from_leg = _token_leg(tokens, sent.token, sent.amount)

    # an incoming token transfer wins over a withdrawal when both exist
    received = received_transfers(logs, wallet)
    if received:
        first = received[0]
        return from_leg, _token_leg(tokens, first.token, first.amount)

    if logs.withdrawal is not None:
        return from_leg, _native_leg(native_symbol, logs.withdrawal.amount)

    raise MissingCounterpartEvent("incoming Transfer or Withdrawal", tx.tx_hash)


def _from_native_legs(
    tx: RawTransaction,
    logs: DecodedLogs,
    wallet: str,
    tokens: TokenMetadataIndex,
    native_symbol: str,
) -> Tuple[Leg, Leg]:
    received = received_transfers(logs, wallet)
    if not received:
        raise MissingCounterpartEvent("incoming Transfer", tx.tx_hash)
    first = received[0]
    return _native_leg(native_symbol, native_amount(tx)), _token_leg(tokens, first.token, first.amount)


def build_record(
    tx: RawTransaction,
    logs: DecodedLogs,
    classification: Classification,
    wallet: str,
    tokens: TokenMetadataIndex,
    native_symbol: str,
) -> SwapRecord:
    """
    Assemble the swap record for an eligible transaction.
    Amounts stay in undivided units; callers divide by 10**decimals for display.
    """
    try:
        if classification is Classification.FROM_TOKEN:
            src, dst = _from_token_legs(tx, logs, wallet, tokens, native_symbol)
        elif classification is Classification.FROM_NATIVE:
            src, dst = _from_native_legs(tx, logs, wallet, tokens, native_symbol)
        else:
            raise ValueError(f"cannot build a swap record for {classification.value} transaction {tx.tx_hash}")
    except SwapExtractionError as e:
        raise e.for_tx(tx.tx_hash)

    return SwapRecord(
        tx_hash=tx.tx_hash,
        timestamp=tx.timestamp,
        from_token=src[0],
        from_symbol=src[1],
        from_amount=src[2],
        from_decimals=src[3],
        to_token=dst[0],
        to_symbol=dst[1],
        to_amount=dst[2],
        to_decimals=dst[3],
        gas_quote=tx.gas_quote,
    )
