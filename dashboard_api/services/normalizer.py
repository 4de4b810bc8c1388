"""
Reshape raw provider data into the response contract.

Everything here is pure: no I/O, no clock, no logging. Numeric values the
provider omits stay None (rendered as null) and are never defaulted to zero,
so the dashboard can show a placeholder instead of a misleading 0.
"""
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

from dashboard_api.schemas.stock import HistoricalDay, Quote, SearchResult


def to_optional_float(value: Any) -> Optional[float]:
    """Plain float for numpy scalars and friends; None for missing or NaN."""
    if value is None or isinstance(value, bool):
        return None
    try:
        casted = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(casted) or math.isinf(casted):
        return None
    return casted


def to_optional_int(value: Any) -> Optional[int]:
    casted = to_optional_float(value)
    if casted is None:
        return None
    return int(casted)


def to_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def normalize_quote(info: Dict[str, Any]) -> Quote:
    return Quote(
        regular_market_price=to_optional_float(info.get("regularMarketPrice")),
        regular_market_change=to_optional_float(info.get("regularMarketChange")),
        regular_market_change_percent=to_optional_float(info.get("regularMarketChangePercent")),
        regular_market_previous_close=to_optional_float(info.get("regularMarketPreviousClose")),
        regular_market_open=to_optional_float(info.get("regularMarketOpen")),
        regular_market_day_high=to_optional_float(info.get("regularMarketDayHigh")),
        regular_market_day_low=to_optional_float(info.get("regularMarketDayLow")),
        regular_market_volume=to_optional_int(info.get("regularMarketVolume")),
        market_cap=to_optional_int(info.get("marketCap")),
        short_name=to_optional_str(info.get("shortName")),
        long_name=to_optional_str(info.get("longName")),
        currency=to_optional_str(info.get("currency")),
        exchange=to_optional_str(info.get("fullExchangeName")),
    )


def iso_date(value: Any) -> str:
    """The YYYY-MM-DD part of a datetime or ISO 8601 string."""
    text = value.isoformat() if hasattr(value, "isoformat") else str(value)
    return text.split("T")[0]


def normalize_history(bars: Sequence[Dict[str, Any]], limit: int = 5) -> List[HistoricalDay]:
    """Keep the last `limit` bars, still oldest first."""
    if limit <= 0:
        return []
    return [
        HistoricalDay(
            date=iso_date(bar["date"]),
            open=to_optional_float(bar.get("open")),
            high=to_optional_float(bar.get("high")),
            low=to_optional_float(bar.get("low")),
            close=to_optional_float(bar.get("close")),
            volume=to_optional_int(bar.get("volume")),
        )
        for bar in list(bars)[-limit:]
    ]


def normalize_search(quotes: Sequence[Dict[str, Any]], limit: int = 10) -> Tuple[List[SearchResult], int]:
    """
    Map the first `limit` candidates to SearchResult.

    Returns the mapped results together with the untruncated provider count.
    Candidates without a symbol cannot be selected in the dashboard and are
    skipped, without pulling later candidates into the window.
    """
    candidates = [quote for quote in list(quotes)[:limit] if quote.get("symbol")]
    results = [
        SearchResult(
            symbol=str(quote["symbol"]),
            shortname=to_optional_str(quote.get("shortname")),
            longname=to_optional_str(quote.get("longname")),
            exchange=to_optional_str(quote.get("exchange")),
            quote_type=to_optional_str(quote.get("quoteType")),
            market=to_optional_str(quote.get("market")),
        )
        for quote in candidates
    ]
    return results, len(quotes)
