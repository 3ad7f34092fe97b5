"""Submission flow skeleton

A submission reads the form, validates locally, sends one request with the
submit control in its loading state, and reports the outcome. Every failure
path shows exactly one message and restores the submit control.
"""
import logging
from typing import Any, Tuple

from portal.api.api_response import ApiResponse
from portal.config.constants import MESSAGES
from portal.error.exceptions import (ApplicationError, LocalValidationError,
                                     SystemException, TransportError)
from portal.error.types import ErrorType
from portal.ui.widgets import FormView
from portal.utils.audit_logging import log_auth_event

from .context import PortalContext

logger = logging.getLogger(__name__)


class SubmissionFlow:
    """Base class for the login and signup sequences"""

    form_name = ""
    event_type = ""
    failure_message = ""  # Backend said no without explaining
    retry_message = ""  # Request failed without a usable message
    storage_message = MESSAGES["storage_failed"]  # Local store unavailable after success

    def __init__(self, context: PortalContext):
        self.context = context

    @property
    def form(self) -> FormView:
        return self.context.view.form(self.form_name)

    def collect(self) -> Any:
        raise NotImplementedError

    def validate(self, payload: Any) -> None:
        """Raise LocalValidationError on the first failing check"""
        raise NotImplementedError

    def send(self, payload: Any) -> ApiResponse:
        raise NotImplementedError

    def on_success(self, payload: Any, response: ApiResponse) -> Tuple[bool, str]:
        raise NotImplementedError

    def submit(self) -> Tuple[bool, str]:
        """Run the full sequence

        Returns:
            Tuple[bool, str]: Success flag and the message that was shown
        """
        button = self.form.submit
        if button.disabled:
            logger.debug(f"{self.form_name} submission already in progress, ignoring")
            return False, ""

        payload = self.collect()
        try:
            self.validate(payload)
        except LocalValidationError as e:
            logger.debug(f"{self.form_name} rejected locally: {e.message}")
            self.context.messages.error(e.message)
            return False, e.message
        except SystemException as e:
            logger.error(f"{self.form_name} validation could not complete: {e.message}")
            return self._fail(payload, ErrorType.STORAGE, MESSAGES["storage_failed"])

        button.set_loading(True)
        try:
            response = self.send(payload)
        except TransportError as e:
            logger.error(f"{self.form_name} transport failure: {e.message}")
            return self._fail(payload, ErrorType.TRANSPORT, MESSAGES["connection_failed"])
        except ApplicationError as e:
            return self._fail(payload, ErrorType.APPLICATION, e.message or self.retry_message)
        finally:
            button.set_loading(False)

        if not response.success:
            return self._fail(payload, ErrorType.APPLICATION, response.message or self.failure_message)

        try:
            result = self.on_success(payload, response)
        except SystemException as e:
            logger.error(f"{self.form_name} succeeded but local state failed: {e.message}")
            return self._fail(payload, ErrorType.STORAGE, self.storage_message)

        log_auth_event(self.event_type, payload.registration_number, "success")
        return result

    def _fail(self, payload: Any, error_type: ErrorType, message: str) -> Tuple[bool, str]:
        log_auth_event(
            self.event_type,
            payload.registration_number,
            "failure",
            {"error_type": error_type.name, "message": message}
        )
        self.context.messages.error(message)
        return False, message
