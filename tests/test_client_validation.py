"""Form validation rules of the browser client, run in an embedded V8."""

import json

import pytest
from py_mini_racer import MiniRacer

from fest_registration.main import STATIC_DIR


@pytest.fixture(scope="module")
def js():
    ctx = MiniRacer()
    # app.js wires its handlers on DOMContentLoaded; nothing else touches the DOM at load time
    ctx.eval("var document = { addEventListener: function () {} };")
    ctx.eval((STATIC_DIR / "app.js").read_text(encoding="utf-8"))
    return ctx


def _call(ctx, name, *args):
    return ctx.eval(f"{name}({', '.join(json.dumps(arg) for arg in args)})")


def _form(**overrides):
    data = {
        "name": "Asha Verma",
        "rollNumber": "21CS042",
        "email": "asha@example.edu",
        "phone": "9876543210",
        "event": "Dance",
    }
    data.update(overrides)
    return data


def test_phone_counts_digits_only(js):
    assert _call(js, "digitsOnly", "12-34-567-890") == "1234567890"
    assert _call(js, "isValidPhone", "12-34-567-890") is True
    assert _call(js, "isValidPhone", "12345") is False


def test_email_pattern(js):
    assert _call(js, "isValidEmail", "local@domain.tld") is True
    assert _call(js, "isValidEmail", "local@domain") is False
    assert _call(js, "isValidEmail", "no at sign.com") is False


def test_form_validation(js):
    assert js.eval(f"validateFormData({json.dumps(_form(phone='12-34-567-890'))}) === null") is True
    assert _call(js, "validateFormData", _form(phone="12345")) == (
        "Please enter a valid phone number with at least 10 digits."
    )
    assert _call(js, "validateFormData", _form(email="asha@example")) == "Please enter a valid email address."
    assert _call(js, "validateFormData", _form(rollNumber="   ")) == "Roll number is required."
    assert _call(js, "validateFormData", _form(event="")) == "Event is required."
