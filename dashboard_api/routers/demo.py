import logging
from typing import Optional
from fastapi import APIRouter, Request

from dashboard_api.responses import utc_timestamp
from dashboard_api.schemas.system import DemoResponse
from dashboard_api.services import demo_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _respond(request: Request, message: str, data) -> DemoResponse:
    logger.info(f"API endpoint called with method: {request.method}")
    return DemoResponse(
        method=request.method,
        timestamp=utc_timestamp(),
        message=message,
        data=data,
    )


@router.get("", response_model=DemoResponse)
@router.get("/{item_id}", response_model=DemoResponse)
async def get_items(request: Request, item_id: Optional[str] = None):
    """Get one synthesized item, or the fixed three-item list."""
    if item_id:
        return _respond(request, f"Retrieved item with ID: {item_id}", demo_service.get_item(item_id))
    return _respond(request, "Retrieved all items", demo_service.list_items())


@router.post("", response_model=DemoResponse)
@router.post("/{item_id}", response_model=DemoResponse)
async def create_item(request: Request, item_id: Optional[str] = None):
    """Echo the body back as a new item with a time-based id."""
    body = demo_service.parse_json_object(await request.body())
    return _respond(request, "Created new item", demo_service.create_item(body))


@router.put("", response_model=DemoResponse)
@router.put("/{item_id}", response_model=DemoResponse)
async def update_item(request: Request, item_id: Optional[str] = None):
    body = demo_service.parse_json_object(await request.body())
    message = f"Updated item with ID: {item_id}" if item_id else "Updated item"
    return _respond(request, message, demo_service.update_item(item_id, body))


@router.delete("", response_model=DemoResponse)
@router.delete("/{item_id}", response_model=DemoResponse)
async def delete_item(request: Request, item_id: Optional[str] = None):
    """Acknowledge a delete; nothing is actually removed."""
    message = f"Deleted item with ID: {item_id}" if item_id else "Delete operation"
    return _respond(request, message, demo_service.delete_item(item_id))
