# server/core/utils.py

import math
from datetime import date, datetime, timezone
from server.models.achievement import Achievement


# achieve_when is a signed 64-bit BigInteger column
EPOCH_MILLIS_MIN = -(2 ** 63)
EPOCH_MILLIS_MAX = 2 ** 63 - 1


def _checked_millis(millis: int) -> int:
    if not EPOCH_MILLIS_MIN <= millis <= EPOCH_MILLIS_MAX:
        raise ValueError("achieveWhen is out of range")
    return millis


def to_epoch_millis(value):
    """
    Normalizes an incoming achieveWhen value to epoch milliseconds.
    Accepts integers, numeric strings, ISO-8601 strings and datetime/date objects.
    Naive values are read as UTC. Non-finite numbers and values that do not
    fit the column raise ValueError.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("achieveWhen must be a date or epoch milliseconds")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("achieveWhen must be a finite number")
    if isinstance(value, (int, float)):
        return _checked_millis(int(value))
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return _checked_millis(int(text))
        value = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return _checked_millis(int(value.timestamp() * 1000))
    raise ValueError("achieveWhen must be a date or epoch milliseconds")


def serialize_achievement(achievement: Achievement) -> dict:
    return {
        "id": achievement.id,
        "user": achievement.user,
        "achieveWhat": achievement.achieve_what,
        "achieveHow": list(achievement.achieve_how or []),
        "achieveWhen": achievement.achieve_when,
        "achieveWhy": achievement.achieve_why,
    }
