"""
payrex test configuration.

No test talks to the network: a scripted ``FakeSession`` stands in for
``requests.Session`` and replays canned responses or raises ``requests``
exceptions, and retry sleeps are recorded instead of waited out.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest
import requests

from payrex import ClientConfig, PayrexClient
from payrex.core.client import HttpClient

API_KEY = "sk_test_123"
BASE_URL = "https://api.payrexhq.com/v1"


def make_response(
    status: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Build a real ``requests.Response`` without a network round trip."""
    response = requests.Response()
    response.status_code = status
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


@dataclass
class RecordedCall:
    method: str
    url: str
    kwargs: Dict[str, Any]

    @property
    def headers(self) -> Dict[str, str]:
        return self.kwargs["headers"]

    @property
    def data(self) -> Any:
        return self.kwargs.get("data")

    @property
    def params(self) -> Any:
        return self.kwargs.get("params")


@dataclass
class FakeSession:
    """
    Replays ``outcomes`` in order. An outcome is a response, an exception to
    raise, or a zero-argument callable returning either.
    """

    outcomes: List[Any] = field(default_factory=list)
    calls: List[RecordedCall] = field(default_factory=list)

    def queue(self, *outcomes: Any) -> "FakeSession":
        self.outcomes.extend(outcomes)
        return self

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append(RecordedCall(method, url, kwargs))
        if not self.outcomes:
            raise AssertionError(f"unexpected request: {method} {url}")
        outcome = self.outcomes.pop(0)
        if callable(outcome) and not isinstance(outcome, BaseException):
            outcome = outcome()
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture
def respond():
    """The :func:`make_response` factory."""
    return make_response


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key=API_KEY, retry_delay=0.1)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def sleeps() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def http(config, session, sleeps) -> HttpClient:
    return HttpClient(config, session=session, sleep=sleeps)


@pytest.fixture
def client(config, session, sleeps) -> PayrexClient:
    return PayrexClient(config, session=session, sleep=sleeps)


# ── Payload factories ─────────────────────────────────────────────────────

@pytest.fixture
def payment_intent_payload() -> Dict[str, Any]:
    return {
        "id": "pi_123",
        "resource": "payment_intent",
        "amount": 10000,
        "amount_received": 0,
        "amount_capturable": 0,
        "client_secret": "pi_123_secret_abc",
        "currency": "PHP",
        "description": "Order #12345",
        "livemode": False,
        "metadata": {"order_id": "12345"},
        "payment_methods": ["card", "gcash"],
        "statement_descriptor": "TEST MERCHANT",
        "status": "awaiting_payment_method",
        "next_action": None,
        "return_url": None,
        "capture_before_at": None,
        "created_at": 1700000000,
        "updated_at": 1700000100,
    }


@pytest.fixture
def customer_payload() -> Dict[str, Any]:
    return {
        "id": "cus_123",
        "resource": "customer",
        "currency": "PHP",
        "email": "juan@example.com",
        "livemode": False,
        "name": "Juan Dela Cruz",
        "metadata": None,
        "created_at": 1700000000,
        "updated_at": 1700000000,
    }
