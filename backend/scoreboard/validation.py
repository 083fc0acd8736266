"""Request field checks.

These run in the handlers before anything touches the database, so a
request is rejected the same way whatever store sits underneath. The
models re-check the stored invariants on their own.
"""

from scoreboard.errors import InvalidInput
from scoreboard.models import POINT_MAX, POINT_MIN, SCORE_MAX, SCORE_MIN


def _as_int(value, low, high):
    """Return ``value`` as an int within ``[low, high]``, or None.

    Integral floats (``4.0``) count as integers; booleans do not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if not isinstance(value, int) or not low <= value <= high:
        return None
    return value


def require_name(value, message='Player name is required'):
    if not isinstance(value, str) or not value.strip():
        raise InvalidInput(message)
    return value.strip()


def parse_score(value):
    """Return ``value`` as a 64-bit int.

    Accepts ints, integral floats (``12.0``) and integer strings (``"-5"``).
    """
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            value = None
    score = _as_int(value, SCORE_MIN, SCORE_MAX)
    if score is None:
        raise InvalidInput('New score must be a 64-bit integer')
    return score


def require_password(value, min_length, message=None):
    if not isinstance(value, str) or len(value) < min_length:
        raise InvalidInput(message or f'Password must be at least {min_length} characters')
    return value


def validate_settings(horse_points, return_point):
    if not isinstance(horse_points, list) or len(horse_points) != 4:
        raise InvalidInput('Invalid settings data')
    points = [_as_int(p, POINT_MIN, POINT_MAX) for p in horse_points]
    return_point = _as_int(return_point, POINT_MIN, POINT_MAX)
    if None in points or return_point is None:
        raise InvalidInput('Invalid settings data')
    return points, return_point
