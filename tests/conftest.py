import json
from typing import Any, Optional

import httpx
import pytest

from bundle_sim.logging import LogLevel, logger

RPC_URL = "http://127.0.0.1:8545"
SENDER = "0x3718ecd4e97f4332f9652d0ba224f222b55ec543"


@pytest.fixture
def sender() -> str:
    return SENDER


@pytest.fixture
def rpc_url() -> str:
    return RPC_URL


@pytest.fixture
def unreachable_url(monkeypatch) -> str:
    # A proxy would answer on the node's behalf.
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)

    # Nothing listens on port 1, so the connection is refused.
    return "http://127.0.0.1:1"


@pytest.fixture
def call_request() -> dict:
    return {
        "accessList": [],
        "from": SENDER,
        "gasLimit": "0x092a1b00000000",
        "maxFeePerGas": None,
        "maxPriorityFeePerGas": None,
        "to": None,
        "value": "0x0",
        "data": "",
    }


@pytest.fixture
def simulation_result() -> dict:
    return {
        "totalGasUsed": 53_000,
        "txLogs": [
            {
                "address": "0x5fbdb2315678afecb367f032d93f642f64180aa3",
                "topics": [
                    "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef",
                ],
                "data": "0x00000000000000000000000000000000000000000000000000000000000186a0",
                "logIndex": "0x0",
                "removed": False,
            }
        ],
        "txReceipts": [
            {
                "status": "0x1",
                "cumulativeGasUsed": "0xcf08",
                "gasUsed": "0xcf08",
                "logs": [],
                "contractAddress": "0x5fbdb2315678afecb367f032d93f642f64180aa3",
            }
        ],
    }


@pytest.fixture
def make_body():
    def fn(result: Optional[Any] = None, request_id: int = 0, **extra) -> str:
        payload: dict[str, Any] = {"jsonrpc": "2.0", "id": request_id, **extra}
        if result is not None:
            payload["result"] = result

        return json.dumps(payload)

    return fn


@pytest.fixture
def mock_node(make_body):
    """
    A fake node for the async transport: records every request and
    answers with ``node.body`` / ``node.status``.
    """

    class Node:
        def __init__(self):
            self.requests: list[httpx.Request] = []
            self.body = make_body({"totalGasUsed": 21000, "txLogs": [], "txReceipts": []})
            self.status = 200

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(self.status, text=self.body)

        @property
        def last_payload(self) -> dict:
            return json.loads(self.requests[-1].content)

        def client(self) -> httpx.AsyncClient:
            return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    return Node()


@pytest.fixture
def mock_session(mocker, make_body):
    """
    A ``requests.Session`` stand-in for the sync transport.
    """
    session = mocker.MagicMock()
    response = mocker.MagicMock()
    response.status_code = 200
    response.text = make_body({"totalGasUsed": 21000, "txLogs": [], "txReceipts": []})
    session.post.return_value = response
    return session


@pytest.fixture
def bundle_sim_caplog(caplog):
    with logger.at_level(LogLevel.DEBUG):
        yield caplog
