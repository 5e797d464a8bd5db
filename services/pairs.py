from __future__ import annotations
from typing import Dict, List, Optional

# normalized pair -> Kraken pair name
KRAKEN_PAIRS: Dict[str, str] = {
    "BTC/USD": "XXBTZUSD",
    "BTC/CHF": "XBTCHF",
    "BTC/EUR": "XXBTZEUR",
}

DEFAULT_PAIRS: List[str] = list(KRAKEN_PAIRS)


def normalize_pair(pair: str) -> str:
    return (pair or '').strip().upper()


def kraken_pair(pair: str) -> Optional[str]:
    """Map a pair like 'btc/usd' to its Kraken name, or None if unsupported."""
    return KRAKEN_PAIRS.get(normalize_pair(pair))
