from __future__ import annotations

import pytest

from conftest import FakeClient
from form_controller import (
    REQUEST_FAILED_MESSAGE,
    VALIDATION_MESSAGE,
    FormController,
    leading_int,
)
from prediction_client import PredictionError, PredictionResult
from reference_data import FIELD_NAMES


def _filled(controller: FormController, form: dict[str, str]) -> FormController:
    for name, value in form.items():
        controller.update_field(name, value)
    return controller


def test_starts_empty(fake_client):
    controller = FormController(client=fake_client)
    assert set(controller.form) == set(FIELD_NAMES)
    assert all(v == "" for v in controller.form.values())
    assert controller.prediction is None
    assert controller.error == ""


@pytest.mark.parametrize("name", FIELD_NAMES)
def test_update_field_touches_only_that_field(fake_client, complete_form, name):
    controller = _filled(FormController(client=fake_client), complete_form)
    before = dict(controller.form)

    controller.update_field(name, "changed")

    assert controller.form[name] == "changed"
    for other in FIELD_NAMES:
        if other != name:
            assert controller.form[other] == before[other]


def test_update_field_clears_error(fake_client):
    controller = FormController(client=fake_client)
    controller.submit()
    assert controller.error == VALIDATION_MESSAGE

    controller.update_field("Age", 50)

    assert controller.error == ""
    assert controller.form["Age"] == "50"


def test_update_unknown_field_raises(fake_client):
    controller = FormController(client=fake_client)
    with pytest.raises(KeyError):
        controller.update_field("Blood_Type", "A")


@pytest.mark.parametrize("missing", ["Country", "Age", "Jaundice", "Economic_Status"])
def test_submit_with_empty_field_never_calls_client(fake_client, complete_form, missing):
    controller = _filled(FormController(client=fake_client), complete_form)
    controller.update_field(missing, "")

    assert controller.submit() is False
    assert controller.error == VALIDATION_MESSAGE
    assert fake_client.calls == []
    assert controller.missing_fields() == [missing]


def test_submit_complete_form_posts_once_with_all_fields(fake_client, complete_form):
    controller = _filled(FormController(client=fake_client), complete_form)

    assert controller.submit() is True

    assert len(fake_client.calls) == 1
    assert set(fake_client.calls[0]) == set(FIELD_NAMES)
    assert fake_client.calls[0] == complete_form
    assert controller.prediction == PredictionResult(prediction=1, probability=0.73)
    assert controller.error == ""


def test_validation_failure_clears_stale_prediction(fake_client, complete_form):
    controller = _filled(FormController(client=fake_client), complete_form)
    controller.submit()
    assert controller.prediction is not None

    controller.update_field("Gender", "")
    controller.submit()

    assert controller.prediction is None
    assert controller.error == VALIDATION_MESSAGE
    assert len(fake_client.calls) == 1


def test_request_failure_keeps_previous_prediction(complete_form):
    client = FakeClient(result=PredictionResult(prediction=0, probability=0.1))
    controller = _filled(FormController(client=client), complete_form)
    controller.submit()

    client.error = PredictionError("503 Service Unavailable")
    assert controller.submit() is False

    assert controller.error == REQUEST_FAILED_MESSAGE
    assert controller.prediction == PredictionResult(prediction=0, probability=0.1)
    assert controller.in_flight is False


def test_request_failure_detail_is_logged_not_shown(failing_client, complete_form, caplog):
    controller = _filled(FormController(client=failing_client), complete_form)

    with caplog.at_level("ERROR"):
        controller.submit()

    assert "connection refused" in caplog.text
    assert "connection refused" not in controller.error


def test_submit_ignored_while_in_flight(fake_client, complete_form):
    controller = _filled(FormController(client=fake_client), complete_form)
    controller.in_flight = True

    assert controller.submit() is False
    assert fake_client.calls == []


def test_later_response_wins(complete_form):
    client = FakeClient(result=PredictionResult(prediction=1, probability=0.9))
    controller = _filled(FormController(client=client), complete_form)
    controller.submit()
    client.result = PredictionResult(prediction=0, probability=0.2)
    controller.submit()

    assert controller.prediction.prediction == 0
    assert len(client.calls) == 2


def test_reset(fake_client, complete_form):
    controller = _filled(FormController(client=fake_client), complete_form)
    controller.submit()

    controller.reset()

    assert controller.prediction is None
    assert controller.error == ""
    assert not controller.is_complete()


def test_bar_chart_values(fake_client):
    controller = FormController(client=fake_client)
    controller.update_field("Age", "64")
    controller.update_field("Obesity", "1")
    controller.update_field("Diabetes", "0")

    assert controller.bar_chart_values() == [
        ("Age", 64),
        ("Survival Time", 0),
        ("Obesity", 1),
        ("Diabetes", 0),
    ]


@pytest.mark.parametrize(
    "raw, expected",
    [("", 0), ("42", 42), ("  7", 7), ("12.9", 12), ("-3", -3), ("abc", 0), ("5kg", 5)],
)
def test_leading_int(raw, expected):
    assert leading_int(raw) == expected
