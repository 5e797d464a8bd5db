class LTPError(Exception):
    """Base class for failures while resolving a last traded price."""


class UnsupportedPairError(LTPError, ValueError):
    def __init__(self, pair: str):
        super().__init__(f"unsupported pair: {pair}")
        self.pair = pair


class UpstreamError(LTPError):
    pass


class UpstreamTransportError(UpstreamError):
    """Connection failure or timeout talking to the vendor API."""


class UpstreamProtocolError(UpstreamError):
    """Vendor answered, but the answer is unusable."""


class NoDataError(LTPError):
    """Every requested pair failed."""
