"""
Print the swap history of a wallet.

    python swap_finder.py 1 0x632A84DC35A1e43B8196B2d08630dC9e6a1F3692
    python swap_finder.py 56 0x... --json --skip-errors
"""
import argparse
import json
import logging
import sys

import requests

import config
from app import get_client
from chains.networks import native_symbol
from core.engine import extract_swaps
from core.errors import SwapExtractionError
from display import format_record

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="List token swaps made by a wallet, using Covalent decoded logs"
    )
    parser.add_argument("chain_id", help="Chain id (1, 56, 137, 43114, 250, ...)")
    parser.add_argument("address", help="Wallet address")
    parser.add_argument("--skip-errors", action="store_true", help="Skip transactions with inconsistent data")
    parser.add_argument("--json", action="store_true", help="Print raw records as JSON")
    args = parser.parse_args(argv)

    config.configure_logging()
    try:
        client = get_client()
        balances = client.get_balances(args.chain_id, args.address)
        transactions = client.get_transactions(args.chain_id, args.address)
    except (requests.RequestException, RuntimeError) as e:
        # RuntimeError covers a missing API key and CovalentError payloads
        logger.error("could not fetch wallet history for %s on chain %s: %s", args.address, args.chain_id, e)
        return 1
    logger.info("fetched %d balances, %d transactions", len(balances), len(transactions))

    try:
        records = extract_swaps(
            args.address,
            native_symbol(args.chain_id),
            balances,
            transactions,
            skip_errors=args.skip_errors,
        )
    except SwapExtractionError as e:
        logger.error("%s in %s: %s", type(e).__name__, e.tx_hash, e)
        return 1

    if args.json:
        print(json.dumps([r.to_dict() for r in records], indent=2))
    else:
        for r in records:
            print(format_record(r))
    return 0


if __name__ == "__main__":
    sys.exit(main())
