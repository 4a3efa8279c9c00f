from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from core.models import (
    DecodedEvent,
    EventParam,
    RawLogEntry,
    RawTransaction,
    TokenMetadata,
)

logger = logging.getLogger(__name__)


class CovalentError(RuntimeError):
    """The API answered, but with an error payload."""


def _lower(s: Any) -> str:
    return str(s or "").lower()


def _parse_decoded(decoded: Any) -> Optional[DecodedEvent]:
    if not isinstance(decoded, dict) or not decoded.get("name"):
        return None
    params = tuple(
        EventParam(name=p.get("name") or "", type=p.get("type") or "", value=p.get("value"))
        for p in (decoded.get("params") or [])
        if isinstance(p, dict)
    )
    return DecodedEvent(name=decoded["name"], params=params)


def parse_balance_items(items: List[Dict[str, Any]]) -> List[TokenMetadata]:
    out: List[TokenMetadata] = []
    for b in items or []:
        addr = _lower(b.get("contract_address"))
        symbol = b.get("contract_ticker_symbol")
        decimals = b.get("contract_decimals")
        if not addr:
            continue
        if decimals is None or not symbol:
            # left out on purpose: a transfer on this token must fail as unknown
            logger.warning("balance entry %s has no symbol or decimals, skipping", addr)
            continue
        out.append(
            TokenMetadata(
                contract_address=addr,
                symbol=symbol,
                decimals=int(decimals),
            )
        )
    return out


def parse_transaction_items(items: List[Dict[str, Any]]) -> List[RawTransaction]:
    out: List[RawTransaction] = []
    for t in items or []:
        h = t.get("tx_hash")
        if not h:
            continue
        logs = tuple(
            RawLogEntry(sender_address=_lower(e.get("sender_address")), decoded=_parse_decoded(e.get("decoded")))
            for e in (t.get("log_events") or [])
            if isinstance(e, dict)
        )
        out.append(
            RawTransaction(
                tx_hash=h,
                timestamp=t.get("block_signed_at") or "",
                native_value=str(t.get("value") or "0"),
                gas_quote=t.get("gas_quote"),
                log_entries=logs,
            )
        )
    return out


class CovalentClient:
    """
    Endpoints used:
      - GET /{chainId}/address/{address}/balances_v2/
      - GET /{chainId}/address/{address}/transactions_v2/  (decoded log_events, paginated)
    """
    BASE = "https://api.covalenthq.com/v1"

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE,
        page_size: int = 300,
        max_pages: int = 10,
        timeout: int = 45,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key.strip()
        self.base = base_url.rstrip("/")
        self.page_size = int(page_size)
        self.max_pages = int(max_pages)
        self.timeout = timeout
        self.session = session or self._make_session()

    @staticmethod
    def _make_session() -> requests.Session:
        session = requests.Session()
        retries = Retry(
            total=5,
            connect=5,
            read=5,
            backoff_factor=1.0,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retries)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        r = self.session.get(
            f"{self.base}/{path}",
            params=params,
            auth=(self.api_key, ""),
            timeout=self.timeout,
        )
        r.raise_for_status()
        body = r.json() or {}
        if body.get("error"):
            raise CovalentError(body.get("error_message") or f"error from {path}")
        return body.get("data") or {}

    def get_balances(self, chain_id: str, address: str) -> List[TokenMetadata]:
        data = self._get(f"{chain_id}/address/{address}/balances_v2/", {"no-nft-fetch": "true"})
        return parse_balance_items(data.get("items") or [])

    def get_transactions(self, chain_id: str, address: str) -> List[RawTransaction]:
        """Newest first, as the API returns them."""
        out: List[RawTransaction] = []
        for page in range(self.max_pages):
            data = self._get(
                f"{chain_id}/address/{address}/transactions_v2/",
                {"page-size": self.page_size, "page-number": page},
            )
            out.extend(parse_transaction_items(data.get("items") or []))

            pagination = data.get("pagination") or {}
            if not pagination.get("has_more"):
                break
        else:
            logger.warning("stopped after %d pages of transactions for %s", self.max_pages, address)
        return out
