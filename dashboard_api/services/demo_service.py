"""
Demo CRUD item synthesis.

There is no backing store: every function builds its result from its
arguments and the clock, so nothing is shared between requests and nothing
is ever created, updated or deleted for real.
"""
import json
import time
from typing import Any, Dict, List, Optional


def new_item_id() -> int:
    """Numeric id derived from the request time (microseconds since the epoch)."""
    return time.time_ns() // 1000


def parse_json_object(raw: bytes) -> Dict[str, Any]:
    """Decode a request body, treating anything but a JSON object as empty."""
    try:
        data = json.loads(raw) if raw else {}
    except (ValueError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def get_item(item_id: str) -> Dict[str, Any]:
    return {"id": item_id, "name": f"Item {item_id}"}


def list_items() -> List[Dict[str, Any]]:
    return [{"id": n, "name": f"Item {n}"} for n in (1, 2, 3)]


def create_item(body: Dict[str, Any]) -> Dict[str, Any]:
    # Body fields win, including a client-supplied id
    return {"id": new_item_id(), **body}


def update_item(item_id: Optional[str], body: Dict[str, Any]) -> Dict[str, Any]:
    return {"id": item_id or new_item_id(), **body}


def delete_item(item_id: Optional[str]) -> Dict[str, Any]:
    return {"deleted": True, "id": item_id}
