"""Streamlit page for the AI content generator.

Streamlit re-runs this script whenever a widget value is committed (Enter or
blur for text inputs), so the form state and the submit button's enabled flag
are recomputed per field edit.
"""

from __future__ import annotations

import asyncio
import logging

import streamlit as st

from content_generator.api.schemas import FIELD_ORDER
from content_generator.config import get_settings
from content_generator.ui.state import (
    EMPTY_STATE_MESSAGE,
    FIELD_LABELS,
    FIELD_PLACEHOLDERS,
    Error,
    FormController,
    FormState,
    Idle,
    Loading,
    Result,
    can_submit,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="AI Content Generator", layout="wide")


def _init_session_state() -> None:
    if "controller" not in st.session_state:
        st.session_state.controller = FormController(settings.relay_url)
    if "form" not in st.session_state:
        st.session_state.form = FormState()


def _on_field_change(name: str) -> None:
    st.session_state.form = st.session_state.form.with_field(name, st.session_state[f"field_{name}"])


def _on_submit() -> None:
    logger.info("ui.submit relay_url=%s", settings.relay_url)
    st.session_state.controller.view = Loading()


def _render_form(form: FormState, controller: FormController) -> None:
    st.subheader("Content Requirements")
    st.caption("Provide details about the content you want to generate")
    for name in FIELD_ORDER:
        st.text_input(
            FIELD_LABELS[name],
            value=getattr(form, name),
            placeholder=FIELD_PLACEHOLDERS[name],
            key=f"field_{name}",
            on_change=_on_field_change,
            args=(name,),
        )
    loading = isinstance(controller.view, Loading)
    st.button(
        "Generating..." if loading else "Generate Content",
        type="primary",
        width="stretch",
        disabled=not can_submit(form, controller.view),
        on_click=_on_submit,
    )


def _render_output(form: FormState, controller: FormController) -> None:
    st.subheader("Generated Content")
    st.caption("AI-generated content will appear here")
    view = controller.view
    if isinstance(view, Error):
        st.error(view.message)
    elif isinstance(view, Loading):
        with st.spinner("Generating content..."):
            asyncio.run(controller.submit(form))
        st.rerun()
    elif isinstance(view, Result):
        st.text_area("Generated content", value=view.text, height=300, disabled=True, label_visibility="collapsed")
    elif isinstance(view, Idle):
        st.info(EMPTY_STATE_MESSAGE)


_init_session_state()

st.title("AI Content Generator")
st.write("Fill out the form below to generate content using Google Gemini AI")

form_col, output_col = st.columns(2)
with form_col:
    _render_form(st.session_state.form, st.session_state.controller)
with output_col:
    _render_output(st.session_state.form, st.session_state.controller)
