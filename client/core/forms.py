# client/core/forms.py

from datetime import date, datetime, timezone


TRAITS = [
    "Optimism", "Creativity", "Resilience", "Self-Control", "Focus", "Flexibility",
    "Vision", "Time Management", "Communication Skills", "Courage", "Generosity",
    "Confidence", "Curiosity", "Planning", "Balance", "Enthusiasm", "People Skills",
    "Listening Skills", "Empathy", "Preparation", "Self-Reliance", "Gratitude",
    "Forgiveness", "Goal Setting", "Grit", "Tenacity",
]


def _invalid(value) -> bool:
    return not value or any(ch.isspace() for ch in value)


def validate_credentials(username, password):
    """
    Returns an error message for a blank or space-containing username or
    password, or None when both are usable.
    """
    if _invalid(username):
        return "Invalid username"
    if _invalid(password):
        return "Invalid password"
    return None


def validate_signup(username, password, confirm):
    if password != confirm:
        return "Passwords must match!"
    return validate_credentials(username, password)


def date_to_epoch_ms(value: date | None) -> int | None:
    if value is None:
        return None
    midnight = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return int(midnight.timestamp() * 1000)


def epoch_ms_to_date(ms: int | None) -> date | None:
    if ms is None:
        return None
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).date()


def parse_extra_traits(text: str) -> list[str]:
    return [t.strip() for t in (text or "").split(",") if t.strip()]


def build_achievement(what, how, when, why, extra_traits="") -> dict:
    """
    Assembles the achievement body sent to the API.
    Extra traits typed by the user are appended after the checked ones,
    skipping any already present.
    """
    traits = list(how or [])
    for trait in parse_extra_traits(extra_traits):
        if trait not in traits:
            traits.append(trait)

    return {
        "achieveWhat": (what or "").strip(),
        "achieveHow": traits,
        "achieveWhen": date_to_epoch_ms(when),
        "achieveWhy": (why or "").strip(),
    }
