"""Form state, validation and submission for the prediction page."""

from __future__ import annotations

import logging
import re

from prediction_client import PredictionClient, PredictionError, PredictionResult
from reference_data import FIELD_NAMES, empty_form

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "⚠️ Please fill out all fields before submitting the form."
REQUEST_FAILED_MESSAGE = "An error occurred while predicting. Please try again."

# (chart label, form field) pairs shown in the input summary bar chart
SUMMARY_FIELDS: tuple[tuple[str, str], ...] = (
    ("Age", "Age"),
    ("Survival Time", "Survival_Time_Months"),
    ("Obesity", "Obesity"),
    ("Diabetes", "Diabetes"),
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def leading_int(value: str) -> int:
    """Integer prefix of `value`; 0 when there is none."""
    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else 0


class FormController:
    """Owns the form values and the latest prediction for one browser session."""

    def __init__(self, client: PredictionClient | None = None) -> None:
        self.client = client if client is not None else PredictionClient()
        self.form: dict[str, str] = empty_form()
        self.prediction: PredictionResult | None = None
        self.error: str = ""
        self.in_flight = False

    def update_field(self, name: str, value) -> None:
        if name not in self.form:
            raise KeyError(f"Unknown form field: {name}")
        self.form[name] = "" if value is None else str(value)
        self.error = ""

    def missing_fields(self) -> list[str]:
        return [name for name in FIELD_NAMES if self.form[name] == ""]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def submit(self) -> bool:
        """Validate and send the form. Returns True when a new prediction was stored."""
        if self.in_flight:
            logger.info("Submission ignored: a request is already in flight")
            return False

        missing = self.missing_fields()
        if missing:
            logger.debug("Validation failed, missing: %s", ", ".join(missing))
            self.error = VALIDATION_MESSAGE
            self.prediction = None
            return False

        self.in_flight = True
        try:
            result = self.client.predict(self.form)
        except PredictionError as exc:
            logger.error("Prediction error: %s", exc)
            self.error = REQUEST_FAILED_MESSAGE
            return False
        finally:
            self.in_flight = False

        self.prediction = result
        self.error = ""
        return True

    def reset(self) -> None:
        self.form = empty_form()
        self.prediction = None
        self.error = ""

    def bar_chart_values(self) -> list[tuple[str, int]]:
        return [(label, leading_int(self.form[field])) for label, field in SUMMARY_FIELDS]
