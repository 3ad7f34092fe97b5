"""Field-level feedback for blur validation"""
import logging
from typing import Callable, Dict, Optional, Tuple

from portal.config.constants import MESSAGES, SIGNUP_MODE
from portal.ui.widgets import FormView, InputField

from .validators import (is_valid_passing_year, is_valid_password,
                         is_valid_registration_number)

logger = logging.getLogger(__name__)

Rule = Tuple[Callable[[str], bool], str]

# Field name -> (predicate, error text), per form
LOGIN_FIELD_RULES: Dict[str, Rule] = {
    "registrationNumber": (is_valid_registration_number, MESSAGES["invalid_registration"]),
}

SIGNUP_FIELD_RULES: Dict[str, Rule] = {
    "registrationNumber": (is_valid_registration_number, MESSAGES["invalid_registration"]),
    "passingYear": (is_valid_passing_year, MESSAGES["invalid_year"]),
    "password": (is_valid_password, MESSAGES["weak_password"]),
}


def apply_field_feedback(field: InputField, is_valid: bool, error_text: str) -> None:
    """Render the outcome of a field predicate onto the field

    Any previous feedback is cleared first. Empty fields get no feedback at
    all; otherwise the field is marked success, or error with one inline
    message.
    """
    field.clear_feedback()

    if field.value.strip() == "":
        return

    if is_valid:
        field.mark_success()
    else:
        field.mark_error(error_text)


def validate_on_blur(form: FormView, field_name: str) -> Optional[bool]:
    """Run the blur rule for a field of the login or signup form

    Returns:
        The predicate result, or None when the field has no rule
    """
    field = form.fields.get(field_name)
    if not isinstance(field, InputField):
        return None

    if form.name == SIGNUP_MODE and field_name == "confirmPassword":
        is_valid = field.value == form.value("password")
        error_text = MESSAGES["password_mismatch"]
    else:
        rules = SIGNUP_FIELD_RULES if form.name == SIGNUP_MODE else LOGIN_FIELD_RULES
        rule = rules.get(field_name)
        if rule is None:
            return None
        predicate, error_text = rule
        is_valid = predicate(field.value)

    apply_field_feedback(field, is_valid, error_text)
    logger.debug(f"Blur validation {form.name}.{field_name}: {is_valid}")
    return is_valid
