from __future__ import annotations

import streamlit as st

from form_controller import FormController, leading_int
from reference_data import BOOLEAN_CHOICES, FIELD_NAMES, FieldSpec, form_fields
from views import render_performance_dashboard, render_results

st.set_page_config(
    page_title="Pancreatic Cancer Predictor",
    page_icon="🩺",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(
    """
    <style>
    :root {
        --primary:#1976d2;
        --secondary:#4caf50;
        --bg:#F5F8FB;
        --card:#FFFFFF;
        --text:#1d2b36;
    }
    .stApp {background: var(--bg); color: var(--text);}
    .disclaimer {
        font-size: 0.85rem;
        color: #666;
        text-align: center;
        margin-top: -10px;
    }
    div[data-testid="stHorizontalBlock"] div[data-testid="stSelectbox"],
    div[data-testid="stHorizontalBlock"] div[data-testid="stNumberInput"] {
        background: var(--card);
        border-radius: 8px;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


def _widget_key(name: str) -> str:
    return f"field_{name}"


def _controller() -> FormController:
    if "controller" not in st.session_state:
        st.session_state["controller"] = FormController()
    return st.session_state["controller"]


def _on_field_change(name: str) -> None:
    value = st.session_state[_widget_key(name)]
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    _controller().update_field(name, value)


def _on_reset() -> None:
    _controller().reset()
    for name in FIELD_NAMES:
        st.session_state.pop(_widget_key(name), None)


def _restore_widget(spec: FieldSpec, key: str) -> None:
    # Widget state is dropped while another page is shown; the controller is the source of truth.
    stored = _controller().form[spec.name]
    if key in st.session_state or stored == "":
        return
    st.session_state[key] = leading_int(stored) if spec.kind == "number" else stored


def _render_field(container, spec: FieldSpec) -> None:
    key = _widget_key(spec.name)
    _restore_widget(spec, key)
    if spec.kind == "number":
        container.number_input(
            spec.label,
            min_value=0,
            step=1,
            value=None,
            placeholder=spec.label,
            key=key,
            label_visibility="collapsed",
            on_change=_on_field_change,
            args=(spec.name,),
        )
        return

    if spec.kind == "boolean":
        def fmt(v: str, label: str = spec.label) -> str:
            return label if v == "" else BOOLEAN_CHOICES[v]
    else:
        def fmt(v: str, label: str = spec.label) -> str:
            return label if v == "" else v

    container.selectbox(
        spec.label,
        ["", *spec.options],
        format_func=fmt,
        key=key,
        on_change=_on_field_change,
        args=(spec.name,),
        label_visibility="collapsed",
    )


controller = _controller()

st.sidebar.title("🩺 Survival Predictor")
st.sidebar.caption("Pancreatic cancer • survival prognosis")
st.sidebar.info(
    "Fill out every field and press **Predict**.\n\n"
    "Before a prediction exists, the page shows how the model performed offline."
)
st.sidebar.button("Reset form", key="reset", on_click=_on_reset)

st.title("Pancreatic Cancer Predictor")
st.markdown(
    "<p class='disclaimer'><span style='color:red'>&#9888;</span> This prediction is based on "
    "pre-trained datasets and may not reflect individual medical cases. "
    "Always consult a healthcare professional.</p>",
    unsafe_allow_html=True,
)

columns = st.columns(3)
for i, spec in enumerate(form_fields()):
    _render_field(columns[i % 3], spec)

if st.button("Predict", type="primary", key="predict"):
    with st.spinner("Requesting prediction..."):
        controller.submit()

if controller.error:
    st.warning(controller.error)

if controller.prediction is None:
    render_performance_dashboard()
else:
    render_results(controller)
