from typing import Any
from pydantic import BaseModel

from dashboard_api.schemas.stock import CamelModel


class HealthResponse(CamelModel):
    status: str = "healthy"
    timestamp: str
    version: str
    environment: str
    python_version: str
    uptime: float


class GreetingResponse(CamelModel):
    message: str
    timestamp: str
    method: str
    url: str
    function_name: str = "httpTrigger"


class DemoResponse(BaseModel):
    method: str
    timestamp: str
    endpoint: str = "/api"
    message: str
    data: Any
