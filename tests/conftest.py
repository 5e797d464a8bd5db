import sys
from pathlib import Path

import pytest

# Make the flat top-level packages importable without installing the project.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app import create_app  # noqa: E402
from config import Settings  # noqa: E402
from services.errors import UpstreamTransportError  # noqa: E402
from services.ltp import LTPService  # noqa: E402
from utils.cache import QuoteCache  # noqa: E402

PRICES = {
    "XXBTZUSD": 45000.0,
    "XBTCHF": 41000.0,
    "XXBTZEUR": 42000.0,
}


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubKraken:
    """Answers from a fixed price table and records every call."""

    def __init__(self, prices=None):
        self.prices = dict(PRICES if prices is None else prices)
        self.calls = []

    def fetch_last_close(self, vendor_pair: str, pair=None) -> float:
        self.calls.append(vendor_pair)
        if vendor_pair not in self.prices:
            raise UpstreamTransportError(f"connection refused for {vendor_pair}")
        return self.prices[vendor_pair]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def kraken():
    return StubKraken()


@pytest.fixture
def service(kraken, clock):
    return LTPService(kraken, QuoteCache(ttl_seconds=30, clock=clock))


@pytest.fixture
def client(service):
    app = create_app(Settings(), service=service)
    app.config['TESTING'] = True
    return app.test_client()
