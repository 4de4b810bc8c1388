import os
from unittest.mock import patch

import pandas as pd
import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")


AAPL_INFO = {
    "quoteType": "EQUITY",
    "symbol": "AAPL",
    "regularMarketPrice": 189.84,
    "regularMarketChange": -1.26,
    "regularMarketChangePercent": -0.659,
    "regularMarketPreviousClose": 191.1,
    "regularMarketOpen": 190.5,
    "regularMarketDayHigh": 191.95,
    "regularMarketDayLow": 188.82,
    "regularMarketVolume": 51234567,
    "marketCap": 2950000000000,
    "shortName": "Apple Inc.",
    "longName": "Apple Inc.",
    "currency": "USD",
    "exchange": "NMS",
    "fullExchangeName": "NasdaqGS",
}


def make_history(days: int, start: str = "2024-03-04") -> pd.DataFrame:
    """Daily bars shaped like yfinance's Ticker.history() output."""
    index = pd.date_range(start, periods=days, freq="B", tz="America/New_York", name="Date")
    closes = [100.0 + i for i in range(days)]
    return pd.DataFrame(
        {
            "Open": [c - 0.5 for c in closes],
            "High": [c + 1.0 for c in closes],
            "Low": [c - 1.0 for c in closes],
            "Close": closes,
            "Volume": [1_000_000 + i for i in range(days)],
            "Dividends": [0.0] * days,
            "Stock Splits": [0.0] * days,
        },
        index=index,
    )


def make_search_quotes(count: int) -> list:
    return [
        {
            "symbol": f"AP{i}",
            "shortname": f"Apple Candidate {i}",
            "longname": f"Apple Candidate {i} Holdings",
            "exchange": "NMS",
            "quoteType": "EQUITY",
            "score": 1000 - i,
        }
        for i in range(count)
    ]


@pytest.fixture(scope="function")
def mock_yf():
    """Replace the yfinance module used by the fetchers."""
    with patch("dashboard_api.services.stock_price_service.yf") as mock:
        yield mock


@pytest.fixture(scope="function")
def mock_provider(mock_yf):
    """yfinance mock answering quote, history and search like a healthy provider."""
    ticker = mock_yf.Ticker.return_value
    ticker.info = dict(AAPL_INFO)
    ticker.history.return_value = make_history(7)
    mock_yf.Search.return_value.quotes = make_search_quotes(15)
    return mock_yf


@pytest.fixture(scope="function")
def client():
    """Create a test client for the API."""
    from dashboard_api.main import app
    with TestClient(app) as test_client:
        yield test_client
