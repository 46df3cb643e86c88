"""
Session Validators

Validation for candidate practice-session payloads submitted by clients.
The first failing check wins; a single human-readable message is returned.
"""

import math
from typing import Any, Dict, Optional

from tdrive.models import TimeOfDay

REQUIRED_FIELDS = ["profileId", "date", "startTime", "durationMinutes", "timeOfDay", "weather"]

TIME_OF_DAY_VALUES = [t.value for t in TimeOfDay]


def parse_minutes(value: Any) -> Optional[float]:
    """
    Parse a duration the way clients send it: a number or a numeric string.

    Returns:
        The value as a float, or None when it is not a finite number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def validate_session(data: Dict[str, Any]) -> Optional[str]:
    """
    Validate a candidate session before server fields are assigned.

    Checks, in order:
    - each required field is present and truthy
    - durationMinutes is a finite number > 0
    - timeOfDay is 'day' or 'night'

    Args:
        data: Raw JSON object from the request body

    Returns:
        None if valid, otherwise the first error message
    """
    for key in REQUIRED_FIELDS:
        if not data.get(key):
            return f"{key} is required"

    minutes = parse_minutes(data.get("durationMinutes"))
    if minutes is None or minutes <= 0:
        return "durationMinutes must be a positive number"

    if data.get("timeOfDay") not in TIME_OF_DAY_VALUES:
        return "timeOfDay must be 'day' or 'night'"

    return None
