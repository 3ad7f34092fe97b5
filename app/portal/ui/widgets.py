"""In-process widget models

These stand in for the page the controller drives: a form is a set of named
fields plus a submit control, and the message area is a single banner.
Front-ends render from these objects; tests inspect them directly.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from portal.config.constants import (DEPARTMENT_PLACEHOLDER,
                                     LOADING_BUTTON_LABEL, LOGIN_BUTTON_LABEL,
                                     LOGIN_MODE, SIGNUP_BUTTON_LABEL,
                                     SIGNUP_MODE)

SUCCESS_STATE = "success"
ERROR_STATE = "error"

Option = Tuple[str, str]
PLACEHOLDER_OPTION: Option = ("", DEPARTMENT_PLACEHOLDER)


@dataclass
class InputField:
    """Text input with blur feedback state"""
    name: str
    value: str = ""
    masked: bool = False
    state: Optional[str] = None
    error_message: Optional[str] = None

    def clear_feedback(self) -> None:
        self.state = None
        self.error_message = None

    def mark_success(self) -> None:
        self.state = SUCCESS_STATE
        self.error_message = None

    def mark_error(self, message: str) -> None:
        # A single slot keeps at most one inline error per field
        self.state = ERROR_STATE
        self.error_message = message

    def reset(self) -> None:
        self.value = ""
        self.clear_feedback()


@dataclass
class SelectField:
    """Dropdown with a replaceable option set"""
    name: str
    options: List[Option] = field(default_factory=lambda: [PLACEHOLDER_OPTION])
    value: str = ""
    disabled: bool = False

    def set_options(self, options: List[Option], disabled: bool = False) -> None:
        self.options = list(options)
        self.value = ""
        self.disabled = disabled

    def select(self, value: str) -> None:
        """Select a value from the current option set"""
        if self.disabled:
            raise ValueError(f"{self.name} is disabled")
        if value not in {option[0] for option in self.options}:
            raise ValueError(f"{value!r} is not an option of {self.name}")
        self.value = value

    def reset(self) -> None:
        self.value = ""


@dataclass
class SubmitButton:
    """Submit control with a loading state"""
    default_label: str
    label: str = ""
    disabled: bool = False
    loading: bool = False

    def __post_init__(self):
        if not self.label:
            self.label = self.default_label

    def set_loading(self, is_loading: bool) -> None:
        self.loading = is_loading
        self.disabled = is_loading
        self.label = LOADING_BUTTON_LABEL if is_loading else self.default_label


@dataclass
class FormView:
    """A named form: fields, a submit control and an active flag"""
    name: str
    fields: Dict[str, object]
    submit: SubmitButton
    active: bool = False

    def __getitem__(self, name: str):
        return self.fields[name]

    def value(self, name: str, strip: bool = False) -> str:
        """Read a field value; missing optional fields read as empty"""
        widget = self.fields.get(name)
        if widget is None:
            return ""
        value = widget.value or ""
        return value.strip() if strip else value

    def fill(self, **values: str) -> None:
        for name, value in values.items():
            widget = self.fields[name]
            if isinstance(widget, SelectField):
                widget.select(value)
            else:
                widget.value = value

    def reset(self) -> None:
        """Clear inputs and feedback; option sets are left to the owner"""
        for widget in self.fields.values():
            widget.reset()


@dataclass
class MessageArea:
    """Transient notification banner"""
    text: str = ""
    kind: Optional[str] = None
    icon: Optional[str] = None
    visible: bool = False


@dataclass
class PortalView:
    """Everything the controller renders into"""
    login_form: FormView
    signup_form: FormView
    message_area: MessageArea

    def form(self, name: str) -> FormView:
        if name == self.login_form.name:
            return self.login_form
        if name == self.signup_form.name:
            return self.signup_form
        raise KeyError(name)


def build_view() -> PortalView:
    """Create the login and signup forms with their named fields"""
    login_form = FormView(
        name=LOGIN_MODE,
        fields={
            "registrationNumber": InputField("registrationNumber"),
            "password": InputField("password", masked=True),
        },
        submit=SubmitButton(LOGIN_BUTTON_LABEL),
        active=True
    )
    signup_form = FormView(
        name=SIGNUP_MODE,
        fields={
            "name": InputField("name"),
            "fatherName": InputField("fatherName"),
            "course": SelectField(
                "course",
                options=[("", "Select Course"), ("UG", "UG"), ("PG", "PG")]
            ),
            "department": SelectField("department", disabled=True),
            "registrationNumber": InputField("registrationNumber"),
            "passingYear": InputField("passingYear"),
            "password": InputField("password", masked=True),
            "confirmPassword": InputField("confirmPassword", masked=True),
            "currentPosition": InputField("currentPosition"),
            "currentCompany": InputField("currentCompany"),
        },
        submit=SubmitButton(SIGNUP_BUTTON_LABEL)
    )
    return PortalView(
        login_form=login_form,
        signup_form=signup_form,
        message_area=MessageArea()
    )


def toggle_password(input_field: InputField) -> bool:
    """Flip password visibility; returns True when the value is now shown"""
    input_field.masked = not input_field.masked
    return not input_field.masked
