"""Static reference tables: form field catalogue, historical rates and offline model metrics."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

COUNTRIES: tuple[str, ...] = ("USA", "India", "UK", "Germany", "Canada", "Australia")

FIELD_NAMES: tuple[str, ...] = (
    "Country",
    "Age",
    "Gender",
    "Smoking_History",
    "Obesity",
    "Diabetes",
    "Chronic_Pancreatitis",
    "Family_History",
    "Hereditary_Condition",
    "Jaundice",
    "Abdominal_Discomfort",
    "Back_Pain",
    "Weight_Loss",
    "Development_of_Type2_Diabetes",
    "Stage_at_Diagnosis",
    "Survival_Time_Months",
    "Treatment_Type",
    "Alcohol_Consumption",
    "Physical_Activity_Level",
    "Diet_Processed_Food",
    "Access_to_Healthcare",
    "Urban_vs_Rural",
    "Economic_Status",
)

BOOLEAN_FIELDS: tuple[str, ...] = (
    "Smoking_History",
    "Obesity",
    "Diabetes",
    "Chronic_Pancreatitis",
    "Family_History",
    "Hereditary_Condition",
    "Jaundice",
    "Abdominal_Discomfort",
    "Back_Pain",
    "Weight_Loss",
    "Development_of_Type2_Diabetes",
    "Alcohol_Consumption",
)

BOOLEAN_CHOICES: dict[str, str] = {"1": "Yes", "0": "No"}

LEVELS: tuple[str, str, str] = ("Low", "Medium", "High")


@dataclass(frozen=True)
class FieldSpec:
    """Widget description for one form field."""

    name: str
    kind: str  # "number", "boolean" or "select"
    label: str
    options: tuple[str, ...] = ()


_SELECT_FIELDS: dict[str, tuple[str, tuple[str, ...]]] = {
    "Country": ("Select Country", COUNTRIES),
    "Gender": ("Select Gender", ("Male", "Female", "Other")),
    "Stage_at_Diagnosis": ("Select Stage", ("Stage I", "Stage II", "Stage III", "Stage IV")),
    "Treatment_Type": (
        "Select Treatment",
        ("Surgery", "Chemotherapy", "Radiation Therapy", "Immunotherapy"),
    ),
    "Physical_Activity_Level": ("Physical Activity", LEVELS),
    "Diet_Processed_Food": ("Diet (Processed Food)", LEVELS),
    "Access_to_Healthcare": ("Access to Healthcare", LEVELS),
    "Urban_vs_Rural": ("Urban or Rural", ("Urban", "Rural")),
    "Economic_Status": ("Economic Status", LEVELS),
}

_NUMBER_FIELDS: dict[str, str] = {
    "Age": "Age",
    "Survival_Time_Months": "Survival Time (months)",
}


def field_spec(name: str) -> FieldSpec:
    if name in _NUMBER_FIELDS:
        return FieldSpec(name=name, kind="number", label=_NUMBER_FIELDS[name])
    if name in BOOLEAN_FIELDS:
        return FieldSpec(
            name=name,
            kind="boolean",
            label=name.replace("_", " "),
            options=tuple(BOOLEAN_CHOICES),
        )
    if name in _SELECT_FIELDS:
        label, options = _SELECT_FIELDS[name]
        return FieldSpec(name=name, kind="select", label=label, options=options)
    raise KeyError(f"Unknown form field: {name}")


def form_fields() -> list[FieldSpec]:
    """All field specs in form order."""
    return [field_spec(name) for name in FIELD_NAMES]


def empty_form() -> dict[str, str]:
    return {name: "" for name in FIELD_NAMES}


# --- Historical rates (illustrative only, per 100K) ------------------------

CANCER_RATES_BY_COUNTRY: dict[str, list[tuple[int, float | None]]] = {
    "India": [(2019, 3.4), (2020, 3.7), (2021, 4.0), (2022, 4.2), (2023, 4.5)],
    "USA": [
        (2019, 8.9),
        (2020, 9.1),
        (2021, 10.0),
        (2022, 11.0),
        (2023, 12.0),
        (2024, 12.8),
        (2025, 13.0),
    ],
    "UK": [(2019, 7.0), (2020, 8.3), (2021, None), (2022, None), (2023, None)],
    "Canada": [(2019 + i, 10.0) for i in range(7)],
    "Germany": [(2019 + i, 11.0) for i in range(7)],
}


def historical_rates(country: str) -> pd.DataFrame | None:
    """Rate history for `country` with NaN for missing years, or None when unknown."""
    rows = CANCER_RATES_BY_COUNTRY.get(country)
    if rows is None:
        return None
    return pd.DataFrame(
        {
            "year": [year for year, _ in rows],
            "rate": [np.nan if rate is None else rate for _, rate in rows],
        }
    )


# --- Offline evaluation of the deployed model ------------------------------

CLASSIFICATION_REPORT: list[dict[str, float | str]] = [
    {"cls": "0", "precision": 0.87, "recall": 0.94, "f1": 0.90},
    {"cls": "1", "precision": 0.12, "recall": 0.06, "f1": 0.08},
]

OVERALL_METRICS: dict[str, float] = {
    "Accuracy": 0.8241,
    "F1 Score": 0.07954,
    "ROC AUC": 0.47549,
}

CONFUSION_COUNTS: dict[str, int] = {
    "True Negative": 8165,
    "False Positive": 551,
    "False Negative": 1208,
    "True Positive": 76,
}


def classification_report_frame() -> pd.DataFrame:
    return pd.DataFrame(CLASSIFICATION_REPORT)


def overall_metrics_frame() -> pd.DataFrame:
    return pd.DataFrame({"metric": list(OVERALL_METRICS), "value": list(OVERALL_METRICS.values())})


def confusion_matrix_frame() -> pd.DataFrame:
    df = pd.DataFrame({"name": list(CONFUSION_COUNTS), "value": list(CONFUSION_COUNTS.values())})
    df["share"] = df["value"] / df["value"].sum()
    return df
