"""Composite signup validation

Checks run in a fixed order and stop at the first failure; a submission
attempt reports one reason only.
"""
import logging

from portal.api.payloads import SignupPayload
from portal.config.constants import MESSAGES
from portal.error.exceptions import SystemException
from portal.error.types import ValidationResult
from portal.state.known_users import KnownUsersCache

from .validators import (is_valid_passing_year, is_valid_password,
                         is_valid_registration_number)

logger = logging.getLogger(__name__)


def validate_signup_data(payload: SignupPayload, known_users: KnownUsersCache) -> ValidationResult:
    """Validate a signup payload before it is sent

    Args:
        payload: Values read from the signup form
        known_users: Cache used for the best-effort duplicate check

    Returns:
        ValidationResult carrying the first failing reason
    """
    missing = payload.missing_fields()
    if missing:
        return ValidationResult.failure(MESSAGES["required_fields"], field=missing[0])

    if not is_valid_registration_number(payload.registration_number):
        return ValidationResult.failure(MESSAGES["invalid_registration"], field="registration_number")

    try:
        known = known_users.contains(payload.registration_number)
    except SystemException as e:
        # The backend enforces uniqueness; an unreadable cache only skips the hint
        logger.warning(f"Known users cache unavailable, skipping duplicate check: {e.message}")
        known = False
    if known:
        logger.debug("Registration number found in local cache")
        return ValidationResult.failure(MESSAGES["duplicate_registration"], field="registration_number")

    if not is_valid_passing_year(payload.passing_year):
        return ValidationResult.failure(MESSAGES["invalid_year"], field="passing_year")

    if not is_valid_password(payload.password):
        return ValidationResult.failure(MESSAGES["weak_password"], field="password")

    if payload.password != payload.confirm_password:
        return ValidationResult.failure(MESSAGES["password_mismatch"], field="confirm_password")

    return ValidationResult.success()
