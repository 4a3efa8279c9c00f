# app.py
import logging

import requests
import uvicorn
from fastapi import Depends, FastAPI, HTTPException

import config
from chains.covalent import CovalentClient, CovalentError
from chains.networks import explorer_tx_link, native_symbol
from core.engine import SwapExtractor
from core.errors import SwapExtractionError
from core.tokens import TokenMetadataIndex

logger = logging.getLogger(__name__)

# ============================================================
# DEPENDENCIES
# ============================================================

def get_client() -> CovalentClient:
    return CovalentClient(
        api_key=config.require_api_key(),
        base_url=config.COVALENT_BASE_URL,
        page_size=config.COVALENT_PAGE_SIZE,
        max_pages=config.COVALENT_MAX_PAGES,
        timeout=config.REQUEST_TIMEOUT,
    )

# ============================================================
# FASTAPI APP
# ============================================================

app = FastAPI()

@app.get("/health")
def health():
    return {"ok": True}

@app.get("/swaps/{chain_id}/{address}")
def wallet_swaps(
    chain_id: str,
    address: str,
    skip_errors: bool = False,
    client: CovalentClient = Depends(get_client),
):
    try:
        balances = client.get_balances(chain_id, address)
        transactions = client.get_transactions(chain_id, address)
    except (requests.RequestException, CovalentError) as e:
        logger.error("indexer request failed for %s on chain %s: %s", address, chain_id, e)
        raise HTTPException(status_code=502, detail=f"Indexer request failed: {e}")

    symbol = native_symbol(chain_id)
    extractor = SwapExtractor(address, symbol, TokenMetadataIndex.from_balances(balances))
    try:
        records = extractor.extract(transactions, skip_errors=skip_errors)
    except SwapExtractionError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": type(e).__name__, "tx_hash": e.tx_hash, "message": str(e)},
        )

    swaps = []
    for r in records:
        d = r.to_dict()
        d["explorer"] = explorer_tx_link(chain_id, r.tx_hash)
        swaps.append(d)

    return {
        "ok": True,
        "chain_id": chain_id,
        "address": address.lower(),
        "native_symbol": symbol,
        "summary": extractor.summary,
        "swaps": swaps,
    }


if __name__ == "__main__":
    config.configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
