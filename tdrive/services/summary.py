"""
Summary Service

Derives session count and day/night hours from a snapshot of records.

Rounding: hours are quantized to 2 decimal places with ROUND_HALF_EVEN on
Decimal values, so ties do not depend on float representation.
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Iterable, Optional

from tdrive.models import PracticeSummary, TimeOfDay
from tdrive.services.sessions import filter_sessions
from tdrive.services.validators import parse_minutes

MINUTES_PER_HOUR = Decimal("60")


def _minutes(session: dict) -> Decimal:
    # Missing or unparsable durations count as zero
    minutes = parse_minutes(session.get("durationMinutes"))
    if minutes is None:
        return Decimal("0")
    return Decimal(str(minutes))


def minutes_to_hours(minutes: Decimal) -> float:
    """Convert minutes to hours, rounded to 2 decimal places."""
    hours = minutes / MINUTES_PER_HOUR
    return float(hours.quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN))


def compute_summary(
    sessions: Iterable[dict], owner_user_id: str, profile_id: Optional[str] = None
) -> PracticeSummary:
    """
    Aggregate one owner's sessions.

    Args:
        sessions: Full collection snapshot
        owner_user_id: Caller uid
        profile_id: Optional profile filter (None or "" means all profiles)

    Returns:
        PracticeSummary with count and total/day/night hours
    """
    filtered = filter_sessions(sessions, owner_user_id, profile_id)

    total_minutes = sum((_minutes(s) for s in filtered), Decimal("0"))
    night_minutes = sum(
        (_minutes(s) for s in filtered if s.get("timeOfDay") == TimeOfDay.NIGHT.value),
        Decimal("0"),
    )
    day_minutes = total_minutes - night_minutes

    return PracticeSummary(
        profile_id=profile_id or "all",
        session_count=len(filtered),
        total_hours=minutes_to_hours(total_minutes),
        day_hours=minutes_to_hours(day_minutes),
        night_hours=minutes_to_hours(night_minutes),
    )
