from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

SURVIVAL_COLOR = "#4caf50"
NON_SURVIVAL_COLOR = "#f44336"
HISTORY_COLOR = "#1976d2"
REPORT_COLORS = {"precision": "#ffa726", "recall": "#66bb6a", "f1": "#ef5350"}
OVERALL_COLOR = "#42a5f5"
CONFUSION_COLORS = ["#4caf50", "#ff9800", "#f44336", "#2196f3"]


def _message_figure(message: str, title: str, height: int = 300) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        x=0.5,
        y=0.5,
        xref="paper",
        yref="paper",
        showarrow=False,
        font=dict(size=16),
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(template="plotly_white", title=title, height=height)
    return fig


def probability_pie(probability: float) -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=["Survival Probability", "Non-Survival Probability"],
            values=[probability, 1 - probability],
            marker=dict(colors=[SURVIVAL_COLOR, NON_SURVIVAL_COLOR]),
            sort=False,
            texttemplate="%{value:.2f}",
        )
    )
    fig.update_layout(template="plotly_white", height=300, margin=dict(l=10, r=10, t=10, b=10))
    return fig


def input_summary_bar(values: Sequence[tuple[str, int]], favorable: bool) -> go.Figure:
    """Bar chart of the numeric inputs, filled with the outcome color."""
    fig = go.Figure(
        go.Bar(
            x=[name for name, _ in values],
            y=[value for _, value in values],
            marker_color=SURVIVAL_COLOR if favorable else NON_SURVIVAL_COLOR,
            width=0.4,
        )
    )
    fig.update_yaxes(gridcolor="#e0e0e0", griddash="dash")
    fig.update_layout(template="plotly_white", height=300, margin=dict(l=10, r=10, t=10, b=10))
    return fig


def historical_rates_line(country: str, rates: pd.DataFrame | None) -> go.Figure:
    title = f"{country} - Pancreatic Cancer Rates (Last 5 Years)"
    if rates is None or rates["rate"].dropna().empty:
        return _message_figure(f"No historical data for {country}", title)

    fig = go.Figure(
        go.Scatter(
            x=rates["year"],
            y=rates["rate"],
            mode="lines+markers",
            name="rate",
            connectgaps=False,
            line=dict(color=HISTORY_COLOR, width=3, shape="spline"),
            marker=dict(size=8),
        )
    )
    fig.update_layout(
        template="plotly_white",
        title=title,
        xaxis_title="Year",
        yaxis_title="Rate per 100K",
        height=300,
    )
    fig.update_xaxes(dtick=1)
    return fig


def classification_report_bar(report: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    for metric, name in [("precision", "Precision"), ("recall", "Recall"), ("f1", "F1-Score")]:
        fig.add_trace(go.Bar(x=report["cls"], y=report[metric], name=name, marker_color=REPORT_COLORS[metric]))
    fig.update_layout(
        template="plotly_white",
        title="Classification Report",
        barmode="stack",
        xaxis_title="Class",
        height=350,
    )
    return fig


def overall_metrics_bar(metrics: pd.DataFrame) -> go.Figure:
    fig = px.bar(metrics, x="metric", y="value", title="Overall Metrics")
    fig.update_traces(marker_color=OVERALL_COLOR, name="Value")
    fig.update_layout(template="plotly_white", height=350, xaxis_title=None, yaxis_title=None)
    fig.update_yaxes(range=[0, 1])
    return fig


def confusion_matrix_donut(counts: pd.DataFrame) -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=counts["name"],
            values=counts["value"],
            hole=0.6,
            sort=False,
            marker=dict(colors=CONFUSION_COLORS),
            texttemplate="%{percent:.1%}",
            textfont=dict(color="#fff", size=12),
            hovertemplate="%{label}: %{value:,}<extra></extra>",
        )
    )
    fig.update_layout(
        template="plotly_white",
        title="Confusion Matrix",
        height=350,
        legend=dict(orientation="h", yanchor="top", y=-0.05),
    )
    return fig
