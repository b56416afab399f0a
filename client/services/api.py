# client/services/api.py

import os
import logging
import requests
from dotenv import load_dotenv

load_dotenv()

# Base URL of the FastAPI backend
API_URL = os.getenv("API_URL", "http://localhost:8000")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

logger = logging.getLogger(__name__)


def _error(res, action):
    """
    Logs a failed response and turns it into an {"error": ...} dict.
    """
    try:
        detail = res.json().get("detail", res.text)
    except ValueError:
        detail = res.text
    if isinstance(detail, list):
        detail = "; ".join(d.get("msg", str(d)) for d in detail if isinstance(d, dict)) or str(detail)
    logger.warning("%s failed: %s %s", action, res.status_code, detail)
    return {"error": f"{action} failed ({res.status_code}): {detail}"}


def _transport_error(e, action):
    logger.warning("%s failed: %s", action, e)
    return {"error": f"{action} failed: {e}"}


# -------------------------------
# Authentication-related functions
# -------------------------------

def create_user(username, password):
    """
    Creates a new account.
    """
    try:
        res = requests.post(
            f"{API_URL}/users/create",
            json={"username": username, "password": password},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e, "Sign up")
    if res.status_code == 201:
        return res.json()
    return _error(res, "Sign up")


def sign_in(username, password):
    """
    Checks the credentials and returns the access token payload.
    """
    try:
        res = requests.post(
            f"{API_URL}/signin",
            json={"username": username, "password": password},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e, "Sign in")
    if res.status_code == 200:
        return res.json()
    return _error(res, "Sign in")


def get_user_info(ctx):
    """
    Retrieves user information using the access token.
    """
    try:
        res = requests.get(f"{API_URL}/users/me", headers=ctx.auth_headers(), timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        return _transport_error(e, "Load user")
    return res.json() if res.status_code == 200 else _error(res, "Load user")


# -------------------------
# Achievements
# -------------------------

def list_achievements(ctx, order="when"):
    """
    Lists the signed-in user's achievements.
    """
    try:
        res = requests.get(
            f"{API_URL}/achievements",
            params={"order": order},
            headers=ctx.auth_headers(),
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e, "Load achievements")
    if res.status_code == 200:
        return res.json().get("achievements", [])
    return _error(res, "Load achievements")


def get_achievement(ctx, achievement_id):
    try:
        res = requests.get(
            f"{API_URL}/achievements/{achievement_id}",
            headers=ctx.auth_headers(),
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e, "Load achievement")
    return res.json() if res.status_code == 200 else _error(res, "Load achievement")


def create_achievement(ctx, payload):
    """
    Records a new achievement for the signed-in user.
    """
    body = dict(payload, user=ctx.username)
    try:
        res = requests.post(
            f"{API_URL}/achievements/create",
            json=body,
            headers=ctx.auth_headers(),
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e, "Save achievement")
    return res.json() if res.status_code == 201 else _error(res, "Save achievement")


def update_achievement(ctx, achievement_id, payload):
    """
    Overwrites the given fields of an existing achievement.
    """
    body = dict(payload, user=ctx.username)
    try:
        res = requests.put(
            f"{API_URL}/achievements/{achievement_id}",
            json=body,
            headers=ctx.auth_headers(),
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e, "Update achievement")
    return True if res.status_code == 204 else _error(res, "Update achievement")


def delete_achievement(ctx, achievement_id):
    try:
        res = requests.delete(
            f"{API_URL}/achievements/{achievement_id}",
            headers=ctx.auth_headers(),
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        return _transport_error(e, "Delete achievement")
    return True if res.status_code == 204 else _error(res, "Delete achievement")
