from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from core.builder import build_record
from core.classifier import Classification, classify
from core.errors import SwapExtractionError
from core.events import decode_logs
from core.models import RawTransaction, SwapRecord, TokenMetadata
from core.tokens import TokenMetadataIndex

logger = logging.getLogger(__name__)


class SwapExtractor:
    def __init__(
        self,
        wallet_address: str,
        native_symbol: str,
        tokens: TokenMetadataIndex,
    ):
        self.wallet = (wallet_address or "").lower()
        self.native_symbol = native_symbol
        self.tokens = tokens

        # Summary counters
        self.summary = {
            "received": 0,
            "swaps": 0,
            "excluded": 0,
            "failed": 0,
        }

    def process(self, tx: RawTransaction) -> Optional[SwapRecord]:
        """
        Classify one transaction and build its record.
        Returns None for non-swaps; data faults propagate as SwapExtractionError.
        """
        self.summary["received"] += 1
        try:
            logs = decode_logs(tx)
            kind = classify(tx, logs, self.wallet)
            if kind is Classification.EXCLUDED:
                self.summary["excluded"] += 1
                return None

            record = build_record(tx, logs, kind, self.wallet, self.tokens, self.native_symbol)
            self.summary["swaps"] += 1
            return record

        except SwapExtractionError:
            self.summary["failed"] += 1
            raise

    def extract(self, transactions: Iterable[RawTransaction], skip_errors: bool = False) -> List[SwapRecord]:
        out: List[SwapRecord] = []
        for tx in transactions:
            try:
                record = self.process(tx)
            except SwapExtractionError as e:
                if not skip_errors:
                    raise
                logger.warning("skipping %s: %s", e.tx_hash or tx.tx_hash, e)
                continue
            if record is not None:
                out.append(record)

        logger.info(
            "wallet %s: %d txs, %d swaps, %d excluded, %d failed",
            self.wallet,
            self.summary["received"],
            self.summary["swaps"],
            self.summary["excluded"],
            self.summary["failed"],
        )
        return out


def extract_swaps(
    wallet_address: str,
    native_symbol: str,
    balances: Iterable[TokenMetadata],
    transactions: Iterable[RawTransaction],
    skip_errors: bool = False,
) -> List[SwapRecord]:
    """Swap records for `wallet_address`, in the same order as `transactions`."""
    tokens = TokenMetadataIndex.from_balances(balances)
    return SwapExtractor(wallet_address, native_symbol, tokens).extract(transactions, skip_errors=skip_errors)
