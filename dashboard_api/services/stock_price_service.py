import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

import yfinance as yf

from dashboard_api.exceptions import ProviderError

logger = logging.getLogger(__name__)


def fetch_quote(symbol: str) -> Dict[str, Any]:
    """Get the raw Yahoo Finance quote mapping for a single ticker."""
    try:
        info = yf.Ticker(symbol).info
    except Exception as e:
        raise ProviderError.from_exception(e) from e

    # yfinance hands back a near-empty mapping for symbols Yahoo doesn't know
    if not info or "quoteType" not in info:
        raise ProviderError(f"Quote not found for symbol: {symbol.upper()}")
    return info


def fetch_history(symbol: str, days: int = 5) -> List[Dict[str, Any]]:
    """
    Get daily OHLCV bars covering the last `days` days, oldest first.

    The window can hold more or fewer trading days than `days` depending on
    weekends and holidays; callers trim to what they need.

    yfinance logs and swallows history failures unless asked to raise, which
    would turn an outage into an empty result.
    """
    end = datetime.now(timezone.utc)
    start = end - timedelta(days=days)

    try:
        history = yf.Ticker(symbol).history(start=start, end=end, interval="1d", raise_errors=True)
    except Exception as e:
        raise ProviderError.from_exception(e) from e

    if history.empty:
        logger.info(f"No daily bars for {symbol} between {start.date()} and {end.date()}")
        return []

    return [
        {
            "date": index,
            "open": row["Open"],
            "high": row["High"],
            "low": row["Low"],
            "close": row["Close"],
            "volume": row["Volume"],
        }
        for index, row in history.sort_index().iterrows()
    ]


def search_symbols(query: str, max_results: int = 25) -> List[Dict[str, Any]]:
    """Get every ticker/company candidate Yahoo Finance returns for `query`."""
    try:
        search = yf.Search(query, max_results=max_results, news_count=0)
        return list(search.quotes)
    except Exception as e:
        raise ProviderError.from_exception(e) from e
