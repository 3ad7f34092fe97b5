"""Login sequence"""
import logging
from typing import Tuple

from portal.api import auth
from portal.api.api_response import ApiResponse
from portal.api.payloads import LoginPayload
from portal.config.constants import (DEFAULT_DISPLAY_NAME,
                                     DEFAULT_REDIRECT_URL, LOGIN_MODE,
                                     MESSAGES)
from portal.config.timing import LOGIN_REDIRECT_DELAY
from portal.error.exceptions import LocalValidationError
from portal.validation.validators import is_valid_registration_number

from .base import SubmissionFlow

logger = logging.getLogger(__name__)


class LoginFlow(SubmissionFlow):
    """Authenticates, stores the token and redirects"""

    form_name = LOGIN_MODE
    event_type = "login"
    failure_message = MESSAGES["login_failed"]
    retry_message = MESSAGES["login_retry"]
    storage_message = MESSAGES["session_store_failed"]

    def collect(self) -> LoginPayload:
        return LoginPayload(
            registration_number=self.form.value("registrationNumber", strip=True),
            password=self.form.value("password")
        )

    def validate(self, payload: LoginPayload) -> None:
        if not payload.registration_number or not payload.password:
            raise LocalValidationError(MESSAGES["required_fields"])
        if not is_valid_registration_number(payload.registration_number):
            raise LocalValidationError(MESSAGES["invalid_registration"], field="registrationNumber")

    def send(self, payload: LoginPayload) -> ApiResponse:
        return auth.login(self.context.api, payload.to_json())

    def on_success(self, payload: LoginPayload, response: ApiResponse) -> Tuple[bool, str]:
        if response.token:
            self.context.tokens.save_token(response.token)
        else:
            logger.warning("Login succeeded without a token")

        message = MESSAGES["welcome"].format(name=response.display_name or DEFAULT_DISPLAY_NAME)
        self.context.messages.success(message)

        target = response.redirect_url or DEFAULT_REDIRECT_URL
        self.context.scheduler.call_later(
            LOGIN_REDIRECT_DELAY,
            self.context.navigator.navigate,
            target
        )
        return True, message
