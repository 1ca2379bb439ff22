from __future__ import annotations

import pytest

from prediction_client import PredictionError, PredictionResult
from reference_data import FIELD_NAMES, field_spec


class FakeClient:
    """Stands in for PredictionClient; records every form it is asked to send."""

    def __init__(self, result: PredictionResult | None = None, error: Exception | None = None) -> None:
        self.result = result or PredictionResult(prediction=1, probability=0.73)
        self.error = error
        self.calls: list[dict[str, str]] = []

    def predict(self, form):
        self.calls.append(dict(form))
        if self.error is not None:
            raise self.error
        return self.result


def _sample_value(name: str) -> str:
    spec = field_spec(name)
    if name == "Age":
        return "64"
    if name == "Survival_Time_Months":
        return "18"
    return spec.options[0]


@pytest.fixture
def complete_form() -> dict[str, str]:
    return {name: _sample_value(name) for name in FIELD_NAMES}


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def failing_client() -> FakeClient:
    return FakeClient(error=PredictionError("connection refused"))
