# client/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from client.core.forms import validate_credentials, validate_signup
from client.core.navigation import Event
from client.services.api import create_user, sign_in, get_user_info
from client.ui.nav import dispatch, back_button

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD") or "dev-cookie-password-change-me"

cookies = EncryptedCookieManager(prefix="not-just-luck/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def logout(ctx):
    ctx.clear()
    for key in ("access_token", "username"):
        if key in cookies:
            del cookies[key]
    cookies.save()


def restore_session(ctx):
    """
    Signs the context back in from cookies after a browser refresh.
    Returns True when a stored token is still accepted by the server.
    """
    if ctx.signed_in or not cookies.get("access_token"):
        return False
    if not ctx.restore(cookies.get("access_token"), get_user_info):
        logout(ctx)
        return False
    cookies["username"] = ctx.username
    cookies.save()
    return True


def landing_page(ctx, ui):
    st.title("🏆 Not Just Luck")
    st.markdown("Keep track of what you achieved, how you did it, and why it mattered.")

    if st.button("Already have an account? Sign in", key="js-signin-link"):
        dispatch(Event.SHOW_SIGNIN)

    st.subheader("📝 Create an account")
    with st.form("new-account-form"):
        username = st.text_input("Username", key="uname")
        password = st.text_input("Password", type="password", key="pw")
        confirm = st.text_input("Confirm password", type="password", key="confirm-pw")
        submitted = st.form_submit_button("Sign up")

    if submitted:
        error = validate_signup(username, password, confirm)
        if error:
            st.error(error)
            return
        with st.spinner("Creating your account..."):
            result = create_user(username, password)
        if isinstance(result, dict) and result.get("error"):
            st.error(f"❌ {result['error']}")
            return
        st.toast("Thanks for signing up! You may now sign in with your username and password.")
        dispatch(Event.SIGNED_UP)


def signin_page(ctx, ui):
    back_button(ui)
    st.title("🔐 Sign in")

    if ui.new_user:
        st.success("🎉 Thanks for signing up! You may now sign in with your username and password.")

    with st.form("signin-form"):
        username = st.text_input("Username", key="signin-uname")
        password = st.text_input("Password", type="password", key="signin-pw")
        submitted = st.form_submit_button("Sign in")

    if submitted:
        error = validate_credentials(username, password)
        if error:
            st.error(error)
            return
        with st.spinner("Signing in..."):
            result = sign_in(username, password)
        if isinstance(result, dict) and result.get("error"):
            st.error("❌ Invalid username and password combination. "
                     "Please check your username and password and try again.")
            return

        ctx.sign_in(result["username"], result["access_token"])
        cookies["access_token"] = result["access_token"]
        cookies["username"] = result["username"]
        cookies.save()
        dispatch(Event.SIGNED_IN)
