"""Authentication endpoints"""
import logging
from typing import Any, Dict

from portal.config.constants import LOGIN_ENDPOINT, REGISTER_ENDPOINT

from .api_response import ApiResponse
from .client import ApiClient

logger = logging.getLogger(__name__)


def login(client: ApiClient, payload: Dict[str, Any]) -> ApiResponse:
    """POST credentials to the login endpoint"""
    logger.info("Attempting to login")
    return client.call(LOGIN_ENDPOINT, "POST", payload)


def register(client: ApiClient, payload: Dict[str, Any]) -> ApiResponse:
    """POST a signup payload (without confirmPassword) to the register endpoint"""
    if "confirmPassword" in payload:
        raise ValueError("confirmPassword must not be sent to the backend")
    logger.info("Attempting to register member")
    return client.call(REGISTER_ENDPOINT, "POST", payload)
