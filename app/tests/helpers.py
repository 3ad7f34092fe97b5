"""Shared fakes for controller tests"""
from unittest.mock import MagicMock

from portal.api.client import ApiClient
from portal.flow.context import build_context
from portal.flow.scheduler import ManualClock, Scheduler
from portal.state.persistence.memory import MemoryStore

BASE_URL = "http://backend.test"


def make_context(store=None):
    """Context with in-memory storage and a manual clock"""
    return build_context(
        store=store if store is not None else MemoryStore(),
        api=ApiClient(BASE_URL),
        scheduler=Scheduler(ManualClock())
    )


def fake_response(status_code=200, json_data=None, json_error=None):
    """Stand-in for requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


def fill_signup(context, **overrides):
    """Fill the signup form with a valid registration"""
    values = {
        "name": "Asha Kumari",
        "fatherName": "Ramesh Kumar",
        "course": "UG",
        "department": "HISTORY",
        "registrationNumber": "AB123456",
        "passingYear": "2019",
        "password": "abc12345",
        "confirmPassword": "abc12345",
        "currentPosition": "",
        "currentCompany": "",
    }
    values.update(overrides)

    context.forms.switch_to_signup()
    context.forms.on_course_change(values.pop("course"))
    department = values.pop("department")
    form = context.view.signup_form
    if department:
        form.fill(department=department)
    form.fill(**values)
    return form
