# client/ui/visuals.py

import streamlit as st
from client.core.navigation import Event
from client.core.render import (
    DATE_FORMATS,
    timeline_item_html,
    what_html,
    why_html,
    trait_counts,
    traits_html,
    trait_cloud_css,
)
from client.services.api import list_achievements
from client.ui.nav import dispatch, back_button

EMPTY_MESSAGE = "Oops, nothing here yet! Add an accomplishment to get started."


def load_achievements(ctx):
    achievements = list_achievements(ctx)
    if isinstance(achievements, dict) and achievements.get("error"):
        st.error(achievements["error"])
        return None
    if not achievements:
        st.info(EMPTY_MESSAGE)
        return None
    return achievements


def timeline_page(ctx, ui):
    back_button(ui)
    st.title("🗓️ When")

    label = st.selectbox("Date format", options=list(DATE_FORMATS), key="date-format")

    achievements = load_achievements(ctx)
    if achievements is None:
        return

    for achievement in achievements:
        col1, col2 = st.columns([6, 1])
        with col1:
            st.markdown(timeline_item_html(achievement, DATE_FORMATS[label]), unsafe_allow_html=True)
        with col2:
            if st.button("✏️", key=f"js-get-achievement-{achievement['id']}"):
                dispatch(Event.SELECT, achievement["id"])


def what_page(ctx, ui):
    back_button(ui)
    st.title("🏅 What you've done")
    achievements = load_achievements(ctx)
    if achievements is not None:
        st.markdown(what_html(achievements), unsafe_allow_html=True)


def how_page(ctx, ui):
    back_button(ui)
    st.title("🧰 How you did it")
    achievements = load_achievements(ctx)
    if achievements is not None:
        st.markdown(trait_cloud_css() + traits_html(trait_counts(achievements)), unsafe_allow_html=True)


def why_page(ctx, ui):
    back_button(ui)
    st.title("💡 Why it mattered")
    achievements = load_achievements(ctx)
    if achievements is not None:
        st.markdown(why_html(achievements), unsafe_allow_html=True)
