from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from config import SETTINGS

st.title("About")

st.markdown("""
### What this tool does
The predictor collects 23 attributes of a pancreatic cancer patient and sends them to a
remote survival classifier. The returned label and survival probability are charted next
to a summary of the inputs.
""")

st.markdown("""
### Limitations
- The model was trained on a public dataset and is heavily imbalanced (see **Model Performance**).
- Historical rate charts are illustrative and not derived from your inputs.
- **This is not medical advice.** Always consult a healthcare professional.
""")

st.markdown(f"Prediction service: `{SETTINGS.prediction_url}`")

st.subheader("Request Flow")

fig = go.Figure()
nodes = {
    "Patient Form": (0, 0),
    "Validation": (1, 1),
    "Prediction API": (2, 1),
    "Result Charts": (3, 0),
}

edges = [
    ("Patient Form", "Validation"),
    ("Validation", "Prediction API"),
    ("Prediction API", "Result Charts"),
]

for a, b in edges:
    xa, ya = nodes[a]
    xb, yb = nodes[b]
    fig.add_shape(type="line", x0=xa, y0=ya, x1=xb, y1=yb, line=dict(color="#1976d2", width=3))

for name, (x, y) in nodes.items():
    fig.add_trace(go.Scatter(x=[x], y=[y], mode="markers+text", marker=dict(size=32, color="#4caf50"), text=[name], textposition="bottom center", showlegend=False))

fig.update_xaxes(visible=False)
fig.update_yaxes(visible=False)
fig.update_layout(template="plotly_white", height=360, margin=dict(l=10, r=10, t=10, b=10))
st.plotly_chart(fig, width="stretch")
