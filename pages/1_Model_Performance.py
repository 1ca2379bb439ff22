from __future__ import annotations

import streamlit as st

from reference_data import (
    CONFUSION_COUNTS,
    OVERALL_METRICS,
    classification_report_frame,
    confusion_matrix_frame,
)
from views import render_performance_dashboard


def _pretty_report(report):
    out = report.rename(columns={"cls": "Class", "precision": "Precision", "recall": "Recall", "f1": "F1-Score"})
    out["Class"] = out["Class"].map({"0": "0 (Not surviving)", "1": "1 (Surviving)"})
    return out


st.title("Model Performance")
st.caption("Offline evaluation of the deployed survival classifier. These figures do not change with your inputs.")

st.markdown(
    """
<style>
.metric-card {
    background: #FFFFFF;
    border: 1px solid #D7E8EE;
    border-left: 6px solid #1976d2;
    border-radius: 12px;
    padding: 14px 18px;
    box-shadow: 0 4px 14px rgba(16, 53, 68, 0.06);
}
</style>
""",
    unsafe_allow_html=True,
)

cards = st.columns(len(OVERALL_METRICS) + 1)
for col, (name, value) in zip(cards, OVERALL_METRICS.items()):
    col.markdown(
        f"<div class='metric-card'><b>{name}</b><br><span style='font-size:1.35rem'>{value:.3f}</span></div>",
        unsafe_allow_html=True,
    )
cards[-1].markdown(
    f"<div class='metric-card'><b>Test Samples</b><br>"
    f"<span style='font-size:1.35rem'>{sum(CONFUSION_COUNTS.values()):,}</span></div>",
    unsafe_allow_html=True,
)

render_performance_dashboard()

st.subheader("Classification Report")
st.dataframe(_pretty_report(classification_report_frame()), width="stretch", hide_index=True)

st.subheader("Confusion Matrix Counts")
counts = confusion_matrix_frame().rename(columns={"name": "Outcome", "value": "Count", "share": "Share"})
counts["Share"] = (counts["Share"] * 100).round(2).astype(str) + "%"
st.dataframe(counts, width="stretch", hide_index=True)
