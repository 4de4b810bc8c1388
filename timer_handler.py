"""
AWS Lambda handler for the scheduled heartbeat.

Triggered by an EventBridge schedule (every 5 minutes in production).
"""
import json
import logging
from datetime import datetime, timezone

from dashboard_api.config import configure_logging, get_settings

configure_logging(get_settings())
logger = logging.getLogger(__name__)

LATE_AFTER_SECONDS = 60


def handler(event, context):
    """
    Log the run and whether it started late.

    EventBridge events carry the scheduled time:
    {
        "time": "2024-01-01T00:05:00Z"
    }
    """
    now = datetime.now(timezone.utc)
    logger.info(f"Timer trigger function ran at: {now.isoformat()}")

    scheduled = event.get("time") if isinstance(event, dict) else None
    is_past_due = False
    if scheduled:
        try:
            scheduled_at = datetime.fromisoformat(scheduled.replace("Z", "+00:00"))
            if scheduled_at.tzinfo is None:
                scheduled_at = scheduled_at.replace(tzinfo=timezone.utc)
            is_past_due = (now - scheduled_at).total_seconds() > LATE_AFTER_SECONDS
        except ValueError:
            logger.warning(f"Unparseable schedule time in event: {scheduled}")

    if is_past_due:
        logger.warning("Timer function is running late!")

    return {
        'statusCode': 200,
        'body': json.dumps({
            'message': 'Timer function executed successfully',
            'timestamp': now.isoformat(),
            'scheduledTime': scheduled,
            'isPastDue': is_past_due,
        })
    }
