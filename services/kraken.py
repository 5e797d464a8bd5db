from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from services.errors import UpstreamProtocolError, UpstreamTransportError

logger = logging.getLogger(__name__)

TICKER_PATH = "/0/public/Ticker"


class KrakenClient:
    """
    Thin client for Kraken's public Ticker endpoint.
    Only the last trade close price ('c'[0]) is read from the payload.
    """
    def __init__(self, base_url: str = "https://api.kraken.com", timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._session = session or requests.Session()

    def _get_ticker(self, vendor_pair: str) -> Dict[str, Any]:
        url = f"{self.base_url}{TICKER_PATH}"
        try:
            resp = self._session.get(url, params={"pair": vendor_pair}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise UpstreamTransportError(f"failed to fetch from Kraken: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise UpstreamProtocolError(f"Kraken returned HTTP {resp.status_code}")
        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamProtocolError(f"failed to parse response: {e}") from e
        if not isinstance(payload, dict):
            raise UpstreamProtocolError("failed to parse response: expected a JSON object")
        return payload

    def fetch_last_close(self, vendor_pair: str, pair: Optional[str] = None) -> float:
        """Last trade close for vendor_pair; pair is the caller's name for it, used in errors."""
        name = pair or vendor_pair
        payload = self._get_ticker(vendor_pair)

        errors = payload.get("error")
        if errors is None:
            errors = []
        if not isinstance(errors, list):
            raise UpstreamProtocolError("failed to parse response: 'error' is not a list")
        if errors:
            raise UpstreamProtocolError(f"Kraken API error: {errors}")

        result = payload.get("result")
        if result is None:
            result = {}
        if not isinstance(result, dict):
            raise UpstreamProtocolError("failed to parse response: 'result' is not an object")

        tick = result.get(vendor_pair)
        if tick is None:
            raise UpstreamProtocolError(f"no data for pair {name}")
        if not isinstance(tick, dict):
            raise UpstreamProtocolError(f"failed to parse response: ticker for {name} is not an object")

        close = tick.get("c")
        if close is None:
            close = []
        if not isinstance(close, list):
            raise UpstreamProtocolError(f"failed to parse response: close for {name} is not a list")
        if not close:
            raise UpstreamProtocolError(f"no close price for pair {name}")
        if not isinstance(close[0], str):
            raise UpstreamProtocolError(f"failed to parse price: {close[0]!r} is not a string")

        try:
            price = float(close[0])
        except ValueError as e:
            raise UpstreamProtocolError(f"failed to parse price: {e}") from e

        logger.debug("Kraken %s last close %s", vendor_pair, price)
        return price
