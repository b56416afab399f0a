# client/ui/home.py

import streamlit as st
from client.core.navigation import Event
from client.ui.nav import dispatch


def home_page(ctx, ui):
    st.title(f"Welcome back, {ctx.username}!")

    if st.button("➕ Add an accomplishment", key="js-add-accomplishment", type="primary"):
        dispatch(Event.ADD)

    st.markdown("### Look back at your accomplishments")
    cols = st.columns(4)
    links = [
        ("the-what", "🏅 What", Event.SHOW_WHAT),
        ("the-how", "🧰 How", Event.SHOW_HOW),
        ("the-when", "🗓️ When", Event.SHOW_TIMELINE),
        ("the-why", "💡 Why", Event.SHOW_WHY),
    ]
    for col, (key, label, event) in zip(cols, links):
        with col:
            if st.button(label, key=key, use_container_width=True):
                dispatch(event)
