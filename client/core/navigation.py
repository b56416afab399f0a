# client/core/navigation.py

from dataclasses import dataclass, replace
from enum import Enum


class Screen(str, Enum):
    LANDING = "landing"
    SIGNIN = "signin"
    HOME = "home"
    ADD = "add"
    EDIT = "edit"
    TIMELINE = "when"
    WHAT = "what"
    HOW = "how"
    WHY = "why"


class Event(str, Enum):
    SHOW_SIGNIN = "show_signin"
    SIGNED_UP = "signed_up"
    SIGNED_IN = "signed_in"
    RESTORED = "restored"
    SIGN_OUT = "sign_out"
    ADD = "add"
    SHOW_TIMELINE = "show_timeline"
    SHOW_WHAT = "show_what"
    SHOW_HOW = "show_how"
    SHOW_WHY = "show_why"
    SELECT = "select"
    SUBMITTED = "submitted"
    BACK = "back"
    REQUEST_DELETE = "request_delete"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    DELETED = "deleted"


class Prompt(str, Enum):
    LEAVE = "leave"
    DELETE = "delete"


class BackMode(str, Enum):
    RELOAD = "reload"
    WARN = "warn"
    HOME = "home"


class InvalidTransition(ValueError):
    pass


@dataclass(frozen=True)
class UIState:
    screen: Screen = Screen.LANDING
    prompt: Prompt | None = None
    edit_id: int | None = None
    new_user: bool = False

    @property
    def editing(self) -> bool:
        return self.screen == Screen.EDIT and self.edit_id is not None


VISUALS = {
    Screen.TIMELINE: "visual-when",
    Screen.WHAT: "visual-what",
    Screen.HOW: "visual-how",
    Screen.WHY: "visual-why",
}

_SHOW_EVENTS = {
    Event.SHOW_TIMELINE: Screen.TIMELINE,
    Event.SHOW_WHAT: Screen.WHAT,
    Event.SHOW_HOW: Screen.HOW,
    Event.SHOW_WHY: Screen.WHY,
}

_PANELS = {
    Screen.LANDING: {"landing-page", "account-signup-page", "signin-link"},
    Screen.SIGNIN: {"signin-page", "back-button"},
    Screen.HOME: {"user-home-page", "signout-link"},
    Screen.ADD: {"account-setup-page", "back-button", "signout-link"},
    Screen.EDIT: {"account-setup-page", "back-button", "delete-button", "signout-link"},
}


def back_mode(state: UIState) -> BackMode:
    if state.screen == Screen.SIGNIN:
        return BackMode.RELOAD
    if state.screen in (Screen.ADD, Screen.EDIT):
        return BackMode.WARN
    return BackMode.HOME


def visible_panels(state: UIState) -> frozenset:
    """
    Returns the ids of the page panels shown for a state.
    Every screen shows a fixed set; only the add page varies, showing the
    first-time setup blurb to a newly signed-up user.
    """
    if state.screen in VISUALS:
        return frozenset({"visuals", VISUALS[state.screen], "back-button", "signout-link"})

    panels = set(_PANELS[state.screen])
    if state.screen == Screen.ADD:
        panels.add("account-setup-blurb" if state.new_user else "add-new-blurb")
    return frozenset(panels)


def transition(state: UIState, event: Event, achievement_id: int | None = None) -> UIState:
    """
    Computes the next UI state.
    Raises InvalidTransition when the event has no meaning on the current screen.
    """
    screen = state.screen

    if event == Event.SIGN_OUT:
        return UIState()

    if state.prompt is not None:
        if event == Event.CANCEL:
            return replace(state, prompt=None)
        if event == Event.CONFIRM and state.prompt == Prompt.LEAVE:
            return UIState(screen=Screen.TIMELINE)
        if event == Event.DELETED and state.prompt == Prompt.DELETE:
            return UIState(screen=Screen.TIMELINE)
        raise InvalidTransition(f"{event.value} while {state.prompt.value} prompt is open")

    if event == Event.BACK:
        if "back-button" not in visible_panels(state):
            raise InvalidTransition(f"no back button on {screen.value}")
        mode = back_mode(state)
        if mode == BackMode.RELOAD:
            return UIState()
        if mode == BackMode.WARN:
            return replace(state, prompt=Prompt.LEAVE)
        return UIState(screen=Screen.HOME)

    if event == Event.RESTORED and screen in (Screen.LANDING, Screen.SIGNIN):
        return UIState(screen=Screen.HOME)

    if screen == Screen.LANDING:
        if event == Event.SHOW_SIGNIN:
            return UIState(screen=Screen.SIGNIN)
        if event == Event.SIGNED_UP:
            return UIState(screen=Screen.SIGNIN, new_user=True)

    elif screen == Screen.SIGNIN:
        if event == Event.SIGNED_IN:
            if state.new_user:
                return UIState(screen=Screen.ADD, new_user=True)
            return UIState(screen=Screen.HOME)

    elif screen == Screen.HOME or screen in VISUALS:
        if event in _SHOW_EVENTS:
            return UIState(screen=_SHOW_EVENTS[event])
        if event == Event.ADD and screen == Screen.HOME:
            return UIState(screen=Screen.ADD)
        if event == Event.SELECT and screen == Screen.TIMELINE:
            if achievement_id is None:
                raise InvalidTransition("select needs an achievement id")
            return UIState(screen=Screen.EDIT, edit_id=achievement_id)

    elif screen in (Screen.ADD, Screen.EDIT):
        if event == Event.SUBMITTED:
            return UIState(screen=Screen.TIMELINE)
        if event == Event.REQUEST_DELETE and screen == Screen.EDIT:
            return replace(state, prompt=Prompt.DELETE)

    raise InvalidTransition(f"{event.value} is not valid on {screen.value}")
