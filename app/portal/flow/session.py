"""Session helpers"""
import logging

from portal.utils.audit_logging import log_auth_event

from .context import PortalContext

logger = logging.getLogger(__name__)


def is_authenticated(context: PortalContext) -> bool:
    return context.tokens.is_authenticated()


def logout(context: PortalContext) -> bool:
    """Drop the session token

    Returns:
        bool: Whether a session was active
    """
    was_active = context.tokens.is_authenticated()
    context.tokens.clear_token()
    log_auth_event("logout", "", "success" if was_active else "no_session")
    return was_active
