import logging
from typing import Optional
from fastapi import APIRouter, Response
from fastapi.concurrency import run_in_threadpool

from dashboard_api.config import get_settings
from dashboard_api.exceptions import ProviderError
from dashboard_api.responses import error_response, utc_timestamp
from dashboard_api.schemas.stock import StockDataResponse, StockSearchResponse
from dashboard_api.services import stock_price_service
from dashboard_api.services.normalizer import normalize_history, normalize_quote, normalize_search

logger = logging.getLogger(__name__)

router = APIRouter()


# Search routes come first so "/stock/search" is not taken for a symbol
@router.get("/stock/search", response_model=StockSearchResponse)
@router.get("/stock/search/{query}", response_model=StockSearchResponse)
async def search_stocks(response: Response, query: Optional[str] = None, q: Optional[str] = None):
    """Search tickers and company names, returning at most ten candidates."""
    logger.info("Stock search function called")
    settings = get_settings()
    query = query or q or settings.default_search_query

    logger.info(f"Searching for: {query}")
    try:
        quotes = await run_in_threadpool(
            stock_price_service.search_symbols, query, settings.search_fetch_count
        )
    except ProviderError as e:
        logger.error(f"Error searching stocks: {e}", exc_info=True)
        return error_response("Failed to search stocks", e, "stockSearch")

    results, total_results = normalize_search(quotes, settings.search_result_limit)
    response.headers["Cache-Control"] = f"max-age={settings.search_cache_seconds}"
    return StockSearchResponse(
        query=query,
        timestamp=utc_timestamp(),
        results=results,
        total_results=total_results,
    )


@router.get("/stock", response_model=StockDataResponse)
@router.get("/stock/{symbol}", response_model=StockDataResponse)
async def get_stock_data(response: Response, symbol: Optional[str] = None):
    """
    Current quote plus the last five daily bars for a symbol.

    Quote and history are fetched one after the other; if either fails the
    whole request fails, there is no quote-only fallback.
    """
    logger.info("Stock data function called")
    settings = get_settings()
    symbol = (symbol or settings.default_symbol).upper()

    logger.info(f"Fetching data for symbol: {symbol}")
    try:
        info = await run_in_threadpool(stock_price_service.fetch_quote, symbol)
        bars = await run_in_threadpool(
            stock_price_service.fetch_history, symbol, settings.history_days
        )
    except ProviderError as e:
        logger.error(f"Error fetching stock data for {symbol}: {e}", exc_info=True)
        return error_response("Failed to fetch stock data", e, "stockData")

    response.headers["Cache-Control"] = f"max-age={settings.quote_cache_seconds}"
    return StockDataResponse(
        symbol=symbol,
        timestamp=utc_timestamp(),
        quote=normalize_quote(info),
        historical=normalize_history(bars, settings.history_days),
    )
