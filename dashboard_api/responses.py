import json
from datetime import datetime, timezone
from typing import Any

from fastapi.responses import JSONResponse

from dashboard_api.schemas.stock import ErrorResponse


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class PrettyJSONResponse(JSONResponse):
    """JSON rendered with a 2-space indent, as the dashboard and curl users expect."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def error_response(error: str, exc: Exception, function_name: str, status_code: int = 500) -> PrettyJSONResponse:
    payload = ErrorResponse(
        error=error,
        message=str(exc),
        timestamp=utc_timestamp(),
        function_name=function_name,
    )
    return PrettyJSONResponse(payload.model_dump(by_alias=True), status_code=status_code)
