import json
import logging

import requests

import config
import swap_finder
from chains.covalent import CovalentError, parse_balance_items, parse_transaction_items

from covalent_payloads import BALANCES_RESPONSE, PLAIN_TX, SWAP_TX
from helpers import WALLET


class StubClient:
    def __init__(self, transactions, error=None):
        self.transactions = transactions
        self.error = error

    def get_balances(self, chain_id, address):
        if self.error:
            raise self.error
        return parse_balance_items(BALANCES_RESPONSE["data"]["items"])

    def get_transactions(self, chain_id, address):
        return parse_transaction_items(self.transactions)


def test_prints_swaps_as_json(monkeypatch, capsys):
    monkeypatch.setattr(swap_finder, "get_client", lambda: StubClient([SWAP_TX, PLAIN_TX]))

    assert swap_finder.main(["1", WALLET, "--json"]) == 0

    [swap] = json.loads(capsys.readouterr().out)
    assert swap["txHash"] == "0xswap"
    assert swap["fromAmount"] == "100"


def test_prints_swaps_as_text(monkeypatch, capsys):
    monkeypatch.setattr(swap_finder, "get_client", lambda: StubClient([SWAP_TX]))

    assert swap_finder.main(["1", WALLET]) == 0
    assert "0.0001 USDC -> 0.00000000000000025 DAI" in capsys.readouterr().out


def test_indexer_failures_exit_with_1(monkeypatch, caplog):
    for error in (requests.ConnectionError("boom"), CovalentError("Invalid API key")):
        monkeypatch.setattr(swap_finder, "get_client", lambda error=error: StubClient([], error=error))
        with caplog.at_level(logging.ERROR, logger="swap_finder"):
            assert swap_finder.main(["56", WALLET]) == 1
    assert "Invalid API key" in caplog.text


def test_missing_api_key_exits_with_1(monkeypatch, capsys):
    monkeypatch.setattr(config, "COVALENT_API_KEY", "")
    assert swap_finder.main(["1", WALLET]) == 1
    assert capsys.readouterr().out == ""
