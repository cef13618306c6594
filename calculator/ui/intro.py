"""Intro splash shown once per session."""

from __future__ import annotations
import time
import streamlit as st

INTRO_TEXT = "Your FBA Profit Calculator is loading..."
TYPE_DELAY_S = 0.05
HOLD_S = 1.0


def render_intro() -> None:
    """
    Show the typewriter intro on the first run of a session.

    st.rerun() ends the current run, so nothing after the call renders
    until the intro has been shown.
    """
    if st.session_state.get("intro_done"):
        return

    st.markdown("<h1 style='text-align:center'>📦 Amazon FBA</h1>", unsafe_allow_html=True)
    placeholder = st.empty()
    for i in range(len(INTRO_TEXT) + 1):
        placeholder.markdown(
            f"<p style='text-align:center;font-family:monospace'>{INTRO_TEXT[:i]}</p>",
            unsafe_allow_html=True,
        )
        time.sleep(TYPE_DELAY_S)
    time.sleep(HOLD_S)

    st.session_state.intro_done = True
    st.rerun()
