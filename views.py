"""Streamlit render helpers shared by the main page and the extra pages."""

from __future__ import annotations

import streamlit as st

from form_controller import FormController
from reference_data import (
    classification_report_frame,
    confusion_matrix_frame,
    historical_rates,
    overall_metrics_frame,
)
from streamlit_utils import (
    classification_report_bar,
    confusion_matrix_donut,
    historical_rates_line,
    input_summary_bar,
    overall_metrics_bar,
    probability_pie,
)

LOW_LIKELIHOOD_TEXT = (
    "⚠️ Based on the data provided, the prognosis indicates a **low likelihood of survival**. "
    "Please consult a medical professional for further evaluation and support."
)
FAVORABLE_LIKELIHOOD_TEXT = (
    "✅ Based on the data provided, the prognosis indicates a **favorable likelihood of survival**. "
    "Please continue regular health checkups and follow medical advice."
)


def render_performance_dashboard() -> None:
    st.subheader("Model Performance Overview")
    c1, c2, c3 = st.columns(3)
    c1.plotly_chart(classification_report_bar(classification_report_frame()), width="stretch")
    c2.plotly_chart(overall_metrics_bar(overall_metrics_frame()), width="stretch")
    c3.plotly_chart(confusion_matrix_donut(confusion_matrix_frame()), width="stretch")


def render_results(controller: FormController) -> None:
    result = controller.prediction
    if result is None:
        return

    if result.favorable:
        st.success(FAVORABLE_LIKELIHOOD_TEXT)
    else:
        st.error(LOW_LIKELIHOOD_TEXT)

    country = controller.form["Country"]
    rates = historical_rates(country) if country else None
    if rates is not None:
        with st.container(border=True):
            st.plotly_chart(historical_rates_line(country, rates), width="stretch")
            st.caption("⚠️ This data is for illustrative purposes only and is based on general internet sources.")

    col1, col2 = st.columns(2)
    col1.markdown("#### Survival Probability")
    col1.plotly_chart(probability_pie(result.probability), width="stretch")
    col2.markdown("#### Input Summary")
    col2.plotly_chart(
        input_summary_bar(controller.bar_chart_values(), favorable=result.favorable),
        width="stretch",
    )
