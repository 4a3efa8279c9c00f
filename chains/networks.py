from __future__ import annotations


GENERIC_NATIVE_SYMBOL = "NATIVE"

NATIVE_SYMBOLS = {
    "1": "ETH",
    "56": "BNB",
    "137": "MATIC",
    "43114": "AVAX",
    "250": "FTM",
}

EXPLORERS = {
    "1": "https://etherscan.io",
    "56": "https://bscscan.com",
    "137": "https://polygonscan.com",
    "43114": "https://snowtrace.io",
    "250": "https://ftmscan.com",
}


def native_symbol(chain_id) -> str:
    return NATIVE_SYMBOLS.get(str(chain_id).strip(), GENERIC_NATIVE_SYMBOL)


def explorer_tx_link(chain_id, tx_hash: str) -> str:
    base = EXPLORERS.get(str(chain_id).strip())
    if not base:
        return ""
    return f"{base}/tx/{tx_hash}"
