from typing import Any, Callable, List, Tuple

import pytest


class FakeTransport:
    """Records requests and answers each one with ``reply(request)``."""

    def __init__(self, reply: Callable[[dict], Any]):
        self.reply = reply
        self.calls: List[Tuple[str, dict, Any]] = []

    def __call__(self, url, payload, options):
        self.calls.append((url, payload, options))
        return self.reply(payload)

    @property
    def requests(self) -> List[dict]:
        return [payload for _, payload, _ in self.calls]


def echo(request: dict) -> dict:
    return {"jsonrpc": "2.0", "id": request["id"], "result": request["params"]}


@pytest.fixture
def echo_transport() -> FakeTransport:
    return FakeTransport(echo)


@pytest.fixture
def make_transport() -> Callable[[Callable[[dict], Any]], FakeTransport]:
    return FakeTransport
