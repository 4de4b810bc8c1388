import logging
import platform
import time
from fastapi import APIRouter, Request

from dashboard_api.config import get_settings
from dashboard_api.responses import utc_timestamp
from dashboard_api.schemas.system import GreetingResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Cold start of the container or local server, not interpreter start
_started_at = time.monotonic()


def uptime_seconds() -> float:
    return time.monotonic() - _started_at


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint; uptime is seconds since the API was loaded."""
    logger.info("Health check endpoint called")
    settings = get_settings()
    return HealthResponse(
        timestamp=utc_timestamp(),
        version=settings.app_version,
        environment=settings.environment,
        python_version=platform.python_version(),
        uptime=uptime_seconds(),
    )


@router.api_route("/httpTrigger", methods=["GET", "POST"], response_model=GreetingResponse)
async def http_trigger(request: Request):
    """Greet `name` from the query string, else the raw request body, else World."""
    logger.info("HTTP trigger function processed a request.")
    body = (await request.body()).decode("utf-8", errors="replace")
    name = request.query_params.get("name") or body or "World"

    return GreetingResponse(
        message=f"Hello, {name}! This function executed successfully.",
        timestamp=utc_timestamp(),
        method=request.method,
        url=str(request.url),
    )
