from uuid import UUID

import httpx
import pytest

from hormuud_courier.domain.entities import CONFIG_PASSWORD, CONFIG_USERNAME, Channel, OutboundMessage
from hormuud_courier.infrastructure.token_cache import InMemoryTokenCache

CHANNEL_UUID = UUID("8eb23e93-5ecb-45ba-b726-3b064e0c56ab")


class FakeProvider:
    """
    Scripted stand-in for the Hormuud API, used as an httpx.MockTransport handler.

    Queue an httpx.Response or an exception per expected call.
    """

    def __init__(self) -> None:
        self.token_outcomes: list = []
        self.send_outcomes: list = []
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/token":
            outcome = self.token_outcomes.pop(0)
        else:
            outcome = self.send_outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/token"]

    @property
    def send_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path != "/token"]


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def channel() -> Channel:
    return Channel(
        uuid=CHANNEL_UUID,
        country="SO",
        address="2222",
        config={CONFIG_USERNAME: "foo@bar.com", CONFIG_PASSWORD: "sesame"},
    )


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def http_client(provider) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(provider))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_cache(clock) -> InMemoryTokenCache:
    return InMemoryTokenCache(clock=clock)


@pytest.fixture
def make_message(channel):
    def _make(text: str = "Simple Message", urn: str = "tel:+252791234567", attachments=()) -> OutboundMessage:
        return OutboundMessage(
            channel=channel,
            urn=urn,
            text=text,
            attachments=tuple(attachments),
        )

    return _make
