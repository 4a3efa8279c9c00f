from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from core.errors import UnknownToken
from core.models import TokenMetadata


def _lower(s: str) -> str:
    return (s or "").lower()


class TokenMetadataIndex:
    """
    Read-only lookup of token metadata keyed by lower-cased contract address.
    Built once per invocation from the balance catalogue.
    """

    def __init__(self, entries: Mapping[str, TokenMetadata]):
        self._entries: Mapping[str, TokenMetadata] = MappingProxyType(dict(entries))

    @classmethod
    def from_balances(cls, balances: Iterable[TokenMetadata]) -> "TokenMetadataIndex":
        entries: Dict[str, TokenMetadata] = {}
        for b in balances:
            # last write wins on duplicate addresses
            entries[_lower(b.contract_address)] = b
        return cls(entries)

    def lookup(self, address: str) -> TokenMetadata:
        meta = self._entries.get(_lower(address))
        if meta is None:
            raise UnknownToken(_lower(address))
        return meta

    def __contains__(self, address: object) -> bool:
        return isinstance(address, str) and _lower(address) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
