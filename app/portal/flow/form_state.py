"""Login / signup form state

The two forms are mutually exclusive. Switching marks the requested form
active, hides any message and resets the form being hidden. The department
dropdown always mirrors the current course selection.
"""
import logging
from typing import List, Mapping, Sequence

from portal.config.constants import (DEPARTMENT_CATALOG, FORM_MODES,
                                     LOGIN_MODE, SIGNUP_MODE)
from portal.error.exceptions import ConfigurationException
from portal.messaging.service import MessageService
from portal.ui.widgets import PLACEHOLDER_OPTION, Option, PortalView

logger = logging.getLogger(__name__)


class FormStateController:
    """Toggles between the login and signup forms"""

    def __init__(
        self,
        view: PortalView,
        messages: MessageService,
        catalog: Mapping[str, Sequence[str]] = DEPARTMENT_CATALOG
    ):
        self.view = view
        self.messages = messages
        self.catalog = catalog

    @property
    def mode(self) -> str:
        return SIGNUP_MODE if self.view.signup_form.active else LOGIN_MODE

    def switch_to(self, mode: str) -> None:
        """Activate a form; calling it again for the same mode changes nothing"""
        if mode not in FORM_MODES:
            raise ConfigurationException(
                message=f"Unknown form mode: {mode}",
                code="INVALID_MODE",
                service="form_state",
                action="switch_to"
            )

        showing = self.view.form(mode)
        hiding = self.view.signup_form if mode == LOGIN_MODE else self.view.login_form

        showing.active = True
        hiding.active = False
        self.messages.hide()
        hiding.reset()

        if hiding is self.view.signup_form:
            self.reset_departments()

        logger.debug(f"Switched to {mode} form")

    def switch_to_login(self) -> None:
        self.switch_to(LOGIN_MODE)

    def switch_to_signup(self) -> None:
        self.switch_to(SIGNUP_MODE)

    def department_options(self, course: str) -> List[Option]:
        return [PLACEHOLDER_OPTION] + [
            (department, department) for department in self.catalog.get(course or "", ())
        ]

    def on_course_change(self, course: str) -> List[Option]:
        """Recompute the department dropdown from the selected course

        Returns:
            The new option list, placeholder first
        """
        course_field = self.view.signup_form["course"]
        department = self.view.signup_form["department"]
        if course and course in self.catalog:
            course_field.value = course
            department.set_options(self.department_options(course), disabled=False)
        else:
            course_field.value = ""
            department.set_options([PLACEHOLDER_OPTION], disabled=True)

        logger.debug(f"Course changed to {course!r}, departments enabled: {not department.disabled}")
        return department.options

    def reset_departments(self) -> None:
        self.view.signup_form["department"].set_options([PLACEHOLDER_OPTION], disabled=True)
