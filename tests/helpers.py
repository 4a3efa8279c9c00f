"""Builders for hand-made transactions and Covalent payloads."""

from __future__ import annotations

from core.models import DecodedEvent, EventParam, RawLogEntry, RawTransaction, TokenMetadata

WALLET = "0x632A84DC35A1e43B8196B2d08630dC9e6a1F3692"
WALLET_LC = WALLET.lower()
ROUTER = "0x7a250d5630b4cf539739df2c5dacb4c659f2488d"
POOL = "0xb4e16d0168e52d35cacd2c6185b44281ec28c9dc"

TOKEN_A = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
TOKEN_B = "0x6b175474e89094c44da98b954eedeac495271d0f"
WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
UNKNOWN = "0xdead000000000000000000000000000000000000"

BALANCES = [
    TokenMetadata(contract_address=TOKEN_A, symbol="USDC", decimals=6),
    TokenMetadata(contract_address=TOKEN_B, symbol="DAI", decimals=18),
    TokenMetadata(contract_address=WETH, symbol="WETH", decimals=18),
]


def transfer(token, frm, to, amount) -> RawLogEntry:
    return RawLogEntry(
        sender_address=token,
        decoded=DecodedEvent(
            name="Transfer",
            params=(
                EventParam("from", "address", frm.lower()),
                EventParam("to", "address", to.lower()),
                EventParam("value", "uint256", str(amount)),
            ),
        ),
    )


def withdrawal(account, amount, token=WETH) -> RawLogEntry:
    return RawLogEntry(
        sender_address=token,
        decoded=DecodedEvent(
            name="Withdrawal",
            params=(
                EventParam("src", "address", account.lower()),
                EventParam("wad", "uint256", str(amount)),
            ),
        ),
    )


def event(name, emitter=POOL) -> RawLogEntry:
    return RawLogEntry(sender_address=emitter, decoded=DecodedEvent(name=name))


def undecoded(emitter=POOL) -> RawLogEntry:
    return RawLogEntry(sender_address=emitter, decoded=None)


def make_tx(*logs, tx_hash="0xabc", native_value="0", timestamp="2021-06-01T12:00:00Z", gas_quote=3.5) -> RawTransaction:
    return RawTransaction(
        tx_hash=tx_hash,
        timestamp=timestamp,
        native_value=native_value,
        gas_quote=gas_quote,
        log_entries=tuple(logs),
    )


def token_to_token_tx(tx_hash="0xt2t", sent=100, got=250) -> RawTransaction:
    return make_tx(
        transfer(TOKEN_A, WALLET, POOL, sent),
        transfer(TOKEN_B, POOL, WALLET, got),
        event("Swap"),
        tx_hash=tx_hash,
    )


def broken_transfer(token, frm, to, value=None) -> RawLogEntry:
    """A Transfer the indexer decoded without a usable amount."""
    return RawLogEntry(
        sender_address=token,
        decoded=DecodedEvent(
            name="Transfer",
            params=(
                EventParam("from", "address", frm.lower()),
                EventParam("to", "address", to.lower()),
                EventParam("value", "uint256", value),
            ),
        ),
    )
