# config.py
import logging
import os

# ============================================================
# ENV / CONFIG
# ============================================================

COVALENT_API_KEY = os.getenv("COVALENT_API_KEY", "").strip()
COVALENT_BASE_URL = os.getenv("COVALENT_BASE_URL", "https://api.covalenthq.com/v1").strip()

# transactions_v2 paging (300 per page, same as the original fetcher)
COVALENT_PAGE_SIZE = int(os.getenv("COVALENT_PAGE_SIZE", "300").strip() or "300")
COVALENT_MAX_PAGES = int(os.getenv("COVALENT_MAX_PAGES", "10").strip() or "10")

REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "45").strip() or "45")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
PORT = int(os.getenv("PORT", "8000").strip() or "8000")


def require_api_key() -> str:
    if not COVALENT_API_KEY:
        raise RuntimeError("Missing COVALENT_API_KEY in environment.")
    return COVALENT_API_KEY


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
