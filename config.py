"""Runtime configuration for the survival predictor.

• PREDICTION_API_URL      – endpoint that receives the patient form.
• PREDICTION_TIMEOUT_SEC  – optional request timeout; unset means no timeout.
• LOG_LEVEL               – root logging level.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_PREDICTION_URL = "https://pancreatic-cancer-prediction-backend.onrender.com/predict"


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", name, raw)
        return None


@dataclass(frozen=True)
class AppSettings:
    """Immutable container for runtime parameters."""

    prediction_url: str = os.getenv("PREDICTION_API_URL", DEFAULT_PREDICTION_URL)
    request_timeout: float | None = _optional_float("PREDICTION_TIMEOUT_SEC")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton used by most callers
SETTINGS = AppSettings()

logging.basicConfig(
    level=getattr(logging, SETTINGS.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def update_from_kwargs(**overrides) -> AppSettings:
    """Return a new AppSettings with supplied overrides."""

    return AppSettings(
        prediction_url=overrides.get("prediction_url", SETTINGS.prediction_url),
        request_timeout=overrides.get("request_timeout", SETTINGS.request_timeout),
        log_level=overrides.get("log_level", SETTINGS.log_level),
    )
