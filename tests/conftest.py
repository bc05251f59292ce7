"""Pytest configuration and fixtures."""
import json
from typing import Callable, List

import httpx
import pytest
import structlog

from mundipagg.config import Settings
from mundipagg.infrastructure.http_client import HttpxClientUtil


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        api_url="https://api.test/core/v1/",
        secret_key="sk_test_123",
        account_management_key="amk_test_456",
        mp_token="mp_token_789",
        request_key="req-0001",
        merchant_id="merch-42",
        timeout=5.0,
    )


@pytest.fixture
def captured_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def make_client(
    test_settings: Settings, captured_requests: List[httpx.Request]
) -> Callable[..., HttpxClientUtil]:
    """Build a dispatcher whose transport is answered by ``handler``."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxClientUtil:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            return handler(request)

        return HttpxClientUtil(
            configuration=test_settings,
            transport=httpx.MockTransport(recording_handler),
        )

    return factory


@pytest.fixture
def json_response() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Handler factory returning a fixed JSON response."""

    def factory(status_code: int, payload=None):
        def handler(request: httpx.Request) -> httpx.Response:
            if payload is None:
                return httpx.Response(status_code)
            return httpx.Response(
                status_code,
                content=json.dumps(payload).encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )

        return handler

    return factory


@pytest.fixture
def card_payload() -> dict:
    """Order body carrying card data at several depths."""
    return {
        "customer": {"name": "Tony Stark", "email": "tonystark@avengers.com"},
        "items": [{"amount": 2990, "description": "Chaveiro do Tesseract", "quantity": 1}],
        "payments": [
            {
                "payment_method": "credit_card",
                "credit_card": {
                    "card": {
                        "number": "4000000000000010",
                        "holder_name": "Tony Stark",
                        "exp_month": 1,
                        "exp_year": 2030,
                        "cvv": "351",
                    },
                    "token": "tok_abcdef123456",
                },
            }
        ],
    }


@pytest.fixture(autouse=True)
def reset_structlog():
    """Leave structlog unconfigured between tests."""
    yield
    structlog.reset_defaults()
