from __future__ import annotations

import pytest

import config
from config import SETTINGS, _optional_float, update_from_kwargs


def test_update_from_kwargs_overrides_only_given_fields():
    settings = update_from_kwargs(prediction_url="http://localhost:8000/predict", request_timeout=3.0)

    assert settings.prediction_url == "http://localhost:8000/predict"
    assert settings.request_timeout == 3.0
    assert settings.log_level == SETTINGS.log_level


def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        SETTINGS.prediction_url = "http://elsewhere"


@pytest.mark.parametrize("raw, expected", [("", None), ("  ", None), ("2.5", 2.5), ("10", 10.0)])
def test_optional_float(monkeypatch, raw, expected):
    monkeypatch.setenv("PREDICTION_TIMEOUT_SEC", raw)
    assert _optional_float("PREDICTION_TIMEOUT_SEC") == expected


def test_optional_float_unset(monkeypatch):
    monkeypatch.delenv("PREDICTION_TIMEOUT_SEC", raising=False)
    assert _optional_float("PREDICTION_TIMEOUT_SEC") is None


def test_default_url():
    assert config.DEFAULT_PREDICTION_URL.endswith("/predict")


def test_optional_float_non_numeric_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("PREDICTION_TIMEOUT_SEC", "soon")
    with caplog.at_level("WARNING", logger="config"):
        assert _optional_float("PREDICTION_TIMEOUT_SEC") is None
    assert "PREDICTION_TIMEOUT_SEC" in caplog.text
