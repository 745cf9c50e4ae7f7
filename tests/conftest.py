"""Shared fixtures: a recording fake transport and a client wired to it."""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from inwx_client import INWXClient
from inwx_client.models import RPCResponse


class FakeConnection:
    """Stands in for RPCConnection; records calls and replays queued responses."""

    def __init__(self):
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self._responses: List[RPCResponse] = []
        self.closed = False

    def queue(
        self,
        data: Optional[Dict[str, Any]] = None,
        code: int = 1000,
        message: str = "Command completed successfully",
        reason_code: str = "",
        reason: str = "",
    ) -> None:
        self._responses.append(RPCResponse(
            code=code,
            message=message,
            reason_code=reason_code,
            reason=reason,
            data=data or {},
        ))

    def call(self, method: str, args: Dict[str, Any]) -> RPCResponse:
        self.calls.append((method, dict(args)))
        if self._responses:
            return self._responses.pop(0)
        return RPCResponse(code=1000, message="Command completed successfully")

    def close(self) -> None:
        self.closed = True

    @property
    def last_method(self) -> str:
        return self.calls[-1][0]

    @property
    def last_args(self) -> Dict[str, Any]:
        return self.calls[-1][1]


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def client(connection) -> INWXClient:
    return INWXClient("testuser", "testpass", connection=connection)
