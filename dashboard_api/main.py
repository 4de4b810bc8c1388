import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dashboard_api.config import configure_logging, get_settings
from dashboard_api.responses import PrettyJSONResponse
from dashboard_api.routers import demo, stocks, system

settings = get_settings()
configure_logging(settings)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Serverless API behind the stock market dashboard",
    version=settings.app_version,
    default_response_class=PrettyJSONResponse,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url, "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers; the demo catch-all "/api/{item_id}" must be registered last
app.include_router(system.router, prefix="/api", tags=["system"])
app.include_router(stocks.router, prefix="/api", tags=["stocks"])
app.include_router(demo.router, prefix="/api", tags=["demo"])


def main():
    """Run the API locally."""
    logger.info(f"Starting {settings.app_name} ({settings.environment})")
    uvicorn.run(app, host="0.0.0.0", port=7071, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
