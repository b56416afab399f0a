# client/main.py

import streamlit as st
from dotenv import load_dotenv
from client.core.navigation import Screen, Event, visible_panels
from client.ui.nav import get_context, get_ui_state, dispatch
from client.ui.login import landing_page, signin_page, restore_session, logout
from client.ui.home import home_page
from client.ui.achievement import achievement_page
from client.ui.visuals import timeline_page, what_page, how_page, why_page


load_dotenv()


PAGES = {
    Screen.LANDING: landing_page,
    Screen.SIGNIN: signin_page,
    Screen.HOME: home_page,
    Screen.ADD: achievement_page,
    Screen.EDIT: achievement_page,
    Screen.TIMELINE: timeline_page,
    Screen.WHAT: what_page,
    Screen.HOW: how_page,
    Screen.WHY: why_page,
}


def sidebar(ctx, ui):
    if "signout-link" not in visible_panels(ui):
        return
    st.sidebar.markdown(f"Signed in as **{ctx.username}**")
    if st.sidebar.button("🔓 Sign out", key="js-signout-link"):
        logout(ctx)
        st.session_state.clear()
        st.rerun()


def main():
    ctx = get_context()
    ui = get_ui_state()

    if ui.screen in (Screen.LANDING, Screen.SIGNIN) and restore_session(ctx):
        dispatch(Event.RESTORED)

    if not ctx.signed_in and ui.screen not in (Screen.LANDING, Screen.SIGNIN):
        dispatch(Event.SIGN_OUT)

    sidebar(ctx, ui)
    PAGES[ui.screen](ctx, ui)


main()
