import pytest
import requests
from fastapi.testclient import TestClient

from app import app, get_client
from chains.covalent import parse_balance_items, parse_transaction_items

from covalent_payloads import BALANCES_RESPONSE, PLAIN_TX, SWAP_TX, transfer_event, log_event
from helpers import POOL, TOKEN_B, UNKNOWN, WALLET, WALLET_LC


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


BAD_TX = {
    "tx_hash": "0xbad",
    "block_signed_at": "2021-05-29T08:00:00Z",
    "value": "0",
    "gas_quote": 1.0,
    "log_events": [
        transfer_event(UNKNOWN, WALLET_LC, POOL, 5),
        transfer_event(TOKEN_B, POOL, WALLET_LC, 7),
        log_event(POOL, "Swap"),
    ],
}


@pytest.fixture
def client_for():
    def _make(stub):
        app.dependency_overrides[get_client] = lambda: stub
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def test_health(client_for):
    assert client_for(StubClient([])).get("/health").json() == {"ok": True}


def test_swaps_endpoint(client_for):
    resp = client_for(StubClient([SWAP_TX, PLAIN_TX])).get(f"/swaps/1/{WALLET}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["native_symbol"] == "ETH"
    assert body["address"] == WALLET_LC
    assert body["summary"] == {"received": 2, "swaps": 1, "excluded": 1, "failed": 0}
    [swap] = body["swaps"]
    assert swap["txHash"] == "0xswap"
    assert swap["fromSymbol"] == "USDC"
    assert swap["toAmount"] == "250"
    assert swap["explorer"] == "https://etherscan.io/tx/0xswap"


def test_unknown_token_maps_to_422(client_for):
    resp = client_for(StubClient([SWAP_TX, BAD_TX])).get(f"/swaps/1/{WALLET}")
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["error"] == "UnknownToken"
    assert detail["tx_hash"] == "0xbad"


def test_skip_errors_query(client_for):
    resp = client_for(StubClient([SWAP_TX, BAD_TX])).get(f"/swaps/1/{WALLET}", params={"skip_errors": "true"})
    assert resp.status_code == 200
    assert [s["txHash"] for s in resp.json()["swaps"]] == ["0xswap"]
    assert resp.json()["summary"]["failed"] == 1


def test_indexer_failure_maps_to_502(client_for):
    stub = StubClient([], error=requests.ConnectionError("boom"))
    resp = client_for(stub).get(f"/swaps/56/{WALLET}")
    assert resp.status_code == 502


def test_missing_api_key(monkeypatch):
    import config

    monkeypatch.setattr(config, "COVALENT_API_KEY", "")
    with pytest.raises(RuntimeError):
        get_client()
