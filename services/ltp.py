from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Protocol

from services.errors import LTPError, NoDataError, UnsupportedPairError
from services.pairs import kraken_pair, normalize_pair
from utils.cache import QuoteCache

logger = logging.getLogger(__name__)


class PriceSource(Protocol):
    def fetch_last_close(self, vendor_pair: str, pair: Optional[str] = None) -> float: ...


class LTPService:
    def __init__(self, client: PriceSource, cache: QuoteCache):
        self.client = client
        self.cache = cache

    def fetch_ltp(self, pair: str) -> float:
        """Uncached lookup of one normalized pair."""
        vendor_pair = kraken_pair(pair)
        if not vendor_pair:
            raise UnsupportedPairError(pair)
        return self.client.fetch_last_close(vendor_pair, pair)

    def resolve(self, pairs: Iterable[str]) -> List[Dict[str, object]]:
        """
        Resolve pairs in input order through the cache.
        Failed pairs are logged and skipped; raises NoDataError if none resolve.
        Duplicates are kept.
        """
        out: List[Dict[str, object]] = []
        for raw in pairs:
            pair = normalize_pair(raw)
            try:
                if not pair:
                    raise UnsupportedPairError(pair)
                amount = self.cache.get_or_fetch(pair, lambda: self.fetch_ltp(pair))
            except LTPError as e:
                logger.warning("Error fetching LTP for %s: %s", pair, e)
                continue
            out.append({"pair": pair, "amount": amount})

        if not out:
            raise NoDataError("failed to fetch any LTP data")
        return out
