"""Audit logging for authentication events"""
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger("audit")


def log_auth_event(
    event_type: str,
    user: str,
    status: str,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """Log an authentication event

    Args:
        event_type: Type of the event (e.g., 'login', 'register', 'logout')
        user: Registration number associated with the event
        status: Status of the event (e.g., 'success', 'failure')
        details: Additional details about the event, never credentials
    """
    message = f"Auth event: {event_type} - User: {user or '-'} - Status: {status}"
    if details:
        message += f" - Details: {details}"
    logger.info(message)
