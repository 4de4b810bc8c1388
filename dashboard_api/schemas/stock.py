from typing import Optional, List
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields under the camelCase names the dashboard reads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Quote(CamelModel):
    regular_market_price: Optional[float] = None
    regular_market_change: Optional[float] = None
    regular_market_change_percent: Optional[float] = None
    regular_market_previous_close: Optional[float] = None
    regular_market_open: Optional[float] = None
    regular_market_day_high: Optional[float] = None
    regular_market_day_low: Optional[float] = None
    regular_market_volume: Optional[int] = None
    market_cap: Optional[int] = None
    short_name: Optional[str] = None
    long_name: Optional[str] = None
    currency: Optional[str] = None
    exchange: Optional[str] = None


class HistoricalDay(CamelModel):
    date: str
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    volume: Optional[int] = None


class StockDataResponse(CamelModel):
    symbol: str
    timestamp: str
    quote: Quote
    historical: List[HistoricalDay]
    data_source: str = "yfinance"
    function_name: str = "stockData"


class SearchResult(CamelModel):
    symbol: str
    shortname: Optional[str] = None
    longname: Optional[str] = None
    exchange: Optional[str] = None
    quote_type: Optional[str] = None
    market: Optional[str] = None


class StockSearchResponse(CamelModel):
    query: str
    timestamp: str
    results: List[SearchResult]
    total_results: int
    data_source: str = "yfinance"
    function_name: str = "stockSearch"


class ErrorResponse(CamelModel):
    error: str
    message: str
    timestamp: str
    function_name: str
