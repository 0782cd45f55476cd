"""
Pytest Configuration and Fixtures
"""
import json

import httpx
import pytest

from daraja import DarajaClient, Credentials, TokenCache, TransactionRequest

AUTH_PATH = "/oauth/v1/generate"
STK_PUSH_PATH = "/mpesa/stkpush/v1/processrequest"

SANDBOX_PASSKEY = "bfb279f9aa9bdbcf158e97dd71a467cd2e0c893059b10f78e6b72ada1ed2c919"


class FakeClock:
    """Manually advanced time source, in seconds."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeDaraja:
    """
    In-process stand-in for the Daraja API, served through httpx.MockTransport.

    Records every request and counts calls per endpoint.
    """

    def __init__(self):
        self.requests = []
        self.token_counter = 0
        self.auth_response = None
        self.stk_response = None
        self.auth_error = None
        self.stk_error = None

    @property
    def auth_calls(self) -> int:
        return sum(1 for r in self.requests if r.url.path == AUTH_PATH)

    @property
    def stk_calls(self) -> int:
        return sum(1 for r in self.requests if r.url.path == STK_PUSH_PATH)

    def stk_payloads(self):
        return [json.loads(r.content) for r in self.requests if r.url.path == STK_PUSH_PATH]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.path == AUTH_PATH:
            if self.auth_error:
                raise self.auth_error
            if self.auth_response is not None:
                return self.auth_response
            self.token_counter += 1
            return httpx.Response(
                200, json={"access_token": f"token-{self.token_counter}", "expires_in": "3599"}
            )

        if request.url.path == STK_PUSH_PATH:
            if self.stk_error:
                raise self.stk_error
            if self.stk_response is not None:
                return self.stk_response
            return httpx.Response(200, json={
                "MerchantRequestID": "29115-34620561-1",
                "CheckoutRequestID": "ws_CO_191220191020363925",
                "ResponseCode": "0",
                "ResponseDescription": "Success. Request accepted for processing",
                "CustomerMessage": "Success. Request accepted for processing",
            })

        return httpx.Response(404, json={"errorMessage": "Not found"})


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_daraja():
    return FakeDaraja()


@pytest.fixture
def http_client(fake_daraja):
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_daraja.handler))


@pytest.fixture
def credentials():
    return Credentials(
        consumer_key="test_key",
        consumer_secret="test_secret",
        business_shortcode="174379",
        passkey=SANDBOX_PASSKEY,
    )


@pytest.fixture
def token_cache(http_client, clock):
    return TokenCache(
        http_client,
        auth_url=f"https://daraja.test{AUTH_PATH}",
        timeout=1.0,
        clock=clock,
    )


@pytest.fixture
def client(credentials, http_client, clock):
    return DarajaClient.from_credentials(
        credentials,
        environment="testing",
        http_client=http_client,
        clock=clock,
    )


@pytest.fixture
def transaction():
    return TransactionRequest(
        phone_number="254700000000",
        amount=10,
        account_reference="X",
        callback_url="https://example.com/cb",
    )
