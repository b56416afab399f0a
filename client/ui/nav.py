# client/ui/nav.py

import streamlit as st
from client.core.navigation import UIState, Event, Prompt, transition, visible_panels
from client.core.session import ClientContext


def get_context() -> ClientContext:
    if "ctx" not in st.session_state:
        st.session_state["ctx"] = ClientContext()
    return st.session_state["ctx"]


def get_ui_state() -> UIState:
    if "ui" not in st.session_state:
        st.session_state["ui"] = UIState()
    return st.session_state["ui"]


def dispatch(event: Event, achievement_id: int | None = None):
    """
    Applies an event to the stored UI state and reruns the script so the
    page for the new screen is drawn.
    """
    st.session_state["ui"] = transition(get_ui_state(), event, achievement_id)
    st.rerun()


def back_button(ui: UIState):
    if "back-button" not in visible_panels(ui) or ui.prompt is not None:
        return
    if st.button("← Back", key="js-back-button"):
        dispatch(Event.BACK)


def leave_prompt(ui: UIState):
    if ui.prompt != Prompt.LEAVE:
        return
    st.warning("Are you sure you want to go back? Your changes will not be saved.")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Leave without saving", key="confirm-leave"):
            dispatch(Event.CONFIRM)
    with col2:
        if st.button("Keep editing", key="cancel-leave"):
            dispatch(Event.CANCEL)
