"""HTTP client for the remote survival prediction service."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping

import requests

from config import SETTINGS

logger = logging.getLogger(__name__)

PROBABILITY_KEY = "probability_of_survival_status_1"


class PredictionError(Exception):
    """The service could not be reached or returned an unusable response."""


@dataclass(frozen=True)
class PredictionResult:
    prediction: int  # 0 = low likelihood, 1 = favorable likelihood
    probability: float

    @property
    def favorable(self) -> bool:
        return self.prediction == 1


def _label(value: Any) -> int:
    """Exact integer label; fractional numbers and booleans are rejected."""
    if isinstance(value, bool):
        raise PredictionError(f"Unexpected prediction label: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise PredictionError(f"Unexpected prediction label: {value!r}")
        return int(value)
    if isinstance(value, (int, str)):
        return int(value)
    raise TypeError(f"unsupported label type {type(value).__name__}")


def parse_prediction(payload: Any) -> PredictionResult:
    """Decode the service response body into a PredictionResult."""
    if not isinstance(payload, dict):
        raise PredictionError(f"Expected a JSON object, got {type(payload).__name__}")

    try:
        prediction = _label(payload["prediction"])
        if isinstance(payload[PROBABILITY_KEY], bool):
            raise TypeError("boolean probability")
        probability = float(payload[PROBABILITY_KEY])
    except KeyError as exc:
        raise PredictionError(f"Response is missing field {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise PredictionError(f"Response has a malformed field: {exc}") from exc

    if prediction not in (0, 1):
        raise PredictionError(f"Unexpected prediction label: {prediction}")
    if math.isnan(probability) or not 0.0 <= probability <= 1.0:
        raise PredictionError(f"Probability out of range: {probability}")

    return PredictionResult(prediction=prediction, probability=probability)


class PredictionClient:
    """Sends one patient form per call; no retries."""

    def __init__(
        self,
        url: str = SETTINGS.prediction_url,
        timeout: float | None = SETTINGS.request_timeout,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session

    def _post(self, body: dict[str, str]) -> requests.Response:
        poster = self.session.post if self.session is not None else requests.post
        return poster(
            self.url,
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )

    def predict(self, form: Mapping[str, str]) -> PredictionResult:
        body = dict(form)
        logger.debug("POST %s with %d fields", self.url, len(body))
        try:
            response = self._post(body)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise PredictionError(f"Request to {self.url} failed: {exc}") from exc
        except ValueError as exc:
            raise PredictionError("The service did not return valid JSON.") from exc

        result = parse_prediction(payload)
        logger.info(
            "Prediction received: label=%s probability=%.4f", result.prediction, result.probability
        )
        return result
