"""Typed UI events and their named handlers

Front-ends translate whatever their toolkit emits into these events and
hand them to an EventDispatcher; the handlers never see a widget toolkit.
"""
import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from portal.config.constants import LOGIN_MODE, SIGNUP_MODE
from portal.error.exceptions import ConfigurationException
from portal.ui.widgets import InputField, toggle_password
from portal.validation.feedback import validate_on_blur

from .context import PortalContext
from .login import LoginFlow
from .signup import SignupFlow

logger = logging.getLogger(__name__)

# Dropdowns where Enter must not submit the form
ENTER_SUPPRESSED_FIELDS = ("course", "department")


@dataclass(frozen=True)
class FormSubmitted:
    form: str


@dataclass(frozen=True)
class FieldBlurred:
    form: str
    field: str


@dataclass(frozen=True)
class CourseChanged:
    course: str


@dataclass(frozen=True)
class KeyPressed:
    field: str
    key: str


@dataclass(frozen=True)
class SwitchRequested:
    mode: str


@dataclass(frozen=True)
class PasswordToggled:
    form: str
    field: str


class EventDispatcher:
    """Routes each event type to one handler"""

    def __init__(self):
        self._handlers: Dict[Type, Callable[[Any], Any]] = {}

    def register(self, event_type: Type, handler: Callable[[Any], Any]) -> None:
        if event_type in self._handlers:
            raise ConfigurationException(
                message=f"Handler already registered for {event_type.__name__}",
                code="DUPLICATE_HANDLER",
                service="event_dispatcher",
                action="register"
            )
        self._handlers[event_type] = handler

    def registered(self) -> List[Type]:
        return list(self._handlers)

    def dispatch(self, event: Any) -> Any:
        handler = self._handlers.get(type(event))
        if handler is None:
            raise ConfigurationException(
                message=f"No handler for {type(event).__name__}",
                code="UNHANDLED_EVENT",
                service="event_dispatcher",
                action="dispatch"
            )
        logger.debug(f"Dispatching {event}")
        return handler(event)


FLOWS = {
    LOGIN_MODE: LoginFlow,
    SIGNUP_MODE: SignupFlow,
}


def handle_form_submitted(context: PortalContext, event: FormSubmitted) -> Tuple[bool, str]:
    flow_class = FLOWS.get(event.form)
    if flow_class is None:
        raise ConfigurationException(
            message=f"Unknown form: {event.form}",
            code="INVALID_FORM",
            service="event_dispatcher",
            action="form_submitted"
        )
    return flow_class(context).submit()


def handle_field_blurred(context: PortalContext, event: FieldBlurred) -> Optional[bool]:
    return validate_on_blur(context.view.form(event.form), event.field)


def handle_course_changed(context: PortalContext, event: CourseChanged):
    return context.forms.on_course_change(event.course)


def handle_key_pressed(context: PortalContext, event: KeyPressed) -> bool:
    """Returns True when the key press is swallowed"""
    return event.key == "Enter" and event.field in ENTER_SUPPRESSED_FIELDS


def handle_switch_requested(context: PortalContext, event: SwitchRequested) -> None:
    context.forms.switch_to(event.mode)


def handle_password_toggled(context: PortalContext, event: PasswordToggled) -> bool:
    field = context.view.form(event.form).fields.get(event.field)
    if not isinstance(field, InputField):
        raise ConfigurationException(
            message=f"{event.form}.{event.field} is not an input",
            code="INVALID_FIELD",
            service="event_dispatcher",
            action="password_toggled"
        )
    return toggle_password(field)


HANDLERS = {
    FormSubmitted: handle_form_submitted,
    FieldBlurred: handle_field_blurred,
    CourseChanged: handle_course_changed,
    KeyPressed: handle_key_pressed,
    SwitchRequested: handle_switch_requested,
    PasswordToggled: handle_password_toggled,
}


def create_dispatcher(context: PortalContext) -> EventDispatcher:
    """Dispatcher with every handler bound to the context"""
    dispatcher = EventDispatcher()
    for event_type, handler in HANDLERS.items():
        dispatcher.register(event_type, partial(handler, context))
    return dispatcher
