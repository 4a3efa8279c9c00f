from __future__ import annotations

from decimal import Decimal

from core.models import SwapRecord


def to_display_amount(amount: str, decimals: int) -> Decimal:
    # built from a string so the context precision never rounds it
    return Decimal(f"{int(amount)}E-{int(decimals)}")


def _fmt(amount: Decimal) -> str:
    s = f"{amount:f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def format_record(r: SwapRecord) -> str:
    sent = _fmt(to_display_amount(r.from_amount, r.from_decimals))
    got = _fmt(to_display_amount(r.to_amount, r.to_decimals))
    return f"{r.timestamp} {r.tx_hash}: {sent} {r.from_symbol} -> {got} {r.to_symbol}"
