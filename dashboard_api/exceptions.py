class StockDataError(Exception):
    """Base class for errors raised while retrieving market data."""


class ProviderError(StockDataError):
    """The market-data provider failed or had nothing for the request.

    Unknown symbols and genuine outages are reported the same way; the
    message is whatever the provider said.
    """

    @classmethod
    def from_exception(cls, exc: Exception) -> "ProviderError":
        return cls(str(exc) or exc.__class__.__name__)
