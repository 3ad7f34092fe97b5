"""Signup sequence"""
import logging
from typing import Tuple

from portal.api import auth
from portal.api.api_response import ApiResponse
from portal.api.payloads import SignupPayload
from portal.config.constants import MESSAGES, SIGNUP_MODE
from portal.config.timing import SIGNUP_SWITCH_DELAY
from portal.error.exceptions import LocalValidationError, SystemException
from portal.validation.signup import validate_signup_data

from .base import SubmissionFlow

logger = logging.getLogger(__name__)


class SignupFlow(SubmissionFlow):
    """Registers a new alumnus; never stores a token"""

    form_name = SIGNUP_MODE
    event_type = "register"
    failure_message = MESSAGES["signup_failed"]
    retry_message = MESSAGES["signup_retry"]

    def collect(self) -> SignupPayload:
        form = self.form
        return SignupPayload(
            name=form.value("name", strip=True),
            father_name=form.value("fatherName", strip=True),
            course=form.value("course"),
            department=form.value("department"),
            registration_number=form.value("registrationNumber", strip=True),
            passing_year=form.value("passingYear", strip=True),
            password=form.value("password"),
            confirm_password=form.value("confirmPassword"),
            current_position=form.value("currentPosition", strip=True),
            current_company=form.value("currentCompany", strip=True)
        )

    def validate(self, payload: SignupPayload) -> None:
        result = validate_signup_data(payload, self.context.known_users)
        if not result:
            raise LocalValidationError(result.message, field=result.field)

    def send(self, payload: SignupPayload) -> ApiResponse:
        return auth.register(self.context.api, payload.to_json())

    def on_success(self, payload: SignupPayload, response: ApiResponse) -> Tuple[bool, str]:
        try:
            self.context.known_users.remember(payload.registration_number, name=payload.name)
        except SystemException as e:
            logger.warning(f"Could not cache registration number: {e.message}")

        message = MESSAGES["account_created"]
        self.context.messages.success(message)
        self.context.scheduler.call_later(SIGNUP_SWITCH_DELAY, self.context.forms.switch_to_login)
        return True, message
