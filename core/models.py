from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


NATIVE_ADDR = "native"  # internal marker for the chain's base asset
NATIVE_DECIMALS = 18


@dataclass(frozen=True)
class TokenMetadata:
    """One token the wallet has ever held, as reported by the balance catalogue."""
    contract_address: str
    symbol: str
    decimals: int


@dataclass(frozen=True)
class EventParam:
    name: str
    type: str
    value: Any


@dataclass(frozen=True)
class DecodedEvent:
    name: str                   # "Transfer" | "Withdrawal" | "Swap" | "Mint" | ...
    params: Tuple[EventParam, ...] = ()


@dataclass(frozen=True)
class RawLogEntry:
    sender_address: str         # contract that emitted the log
    decoded: Optional[DecodedEvent] = None


@dataclass(frozen=True)
class RawTransaction:
    tx_hash: str
    timestamp: str              # block_signed_at, ISO 8601
    native_value: str           # wei as a decimal string
    gas_quote: Optional[float] = None
    log_entries: Tuple[RawLogEntry, ...] = ()


@dataclass(frozen=True)
class TransferEvent:
    token: str                  # emitting contract, lower-cased
    sender: str
    recipient: str
    amount: int


@dataclass(frozen=True)
class WithdrawalEvent:
    token: str
    account: str
    amount: int                 # native units, 18-decimal fixed point


@dataclass(frozen=True)
class DecodedLogs:
    transfers: List[TransferEvent] = field(default_factory=list)
    withdrawal: Optional[WithdrawalEvent] = None
    has_swap: bool = False
    has_mint: bool = False
    malformed_senders: Tuple[str, ...] = ()  # from-address of each unreadable Transfer


@dataclass(frozen=True)
class SwapRecord:
    tx_hash: str
    timestamp: str
    from_token: str             # contract address or NATIVE_ADDR
    from_symbol: str
    from_amount: str            # undivided integer units
    from_decimals: int
    to_token: str
    to_symbol: str
    to_amount: str
    to_decimals: int
    gas_quote: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "txHash": self.tx_hash,
            "timestamp": self.timestamp,
            "gasQuote": self.gas_quote,
            "fromToken": self.from_token,
            "fromSymbol": self.from_symbol,
            "fromAmount": self.from_amount,
            "fromDecimals": self.from_decimals,
            "toToken": self.to_token,
            "toSymbol": self.to_symbol,
            "toAmount": self.to_amount,
            "toDecimals": self.to_decimals,
        }
