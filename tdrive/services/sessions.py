"""
Session Service

Builds new session records from validated payloads and scopes a collection
snapshot to one owner (and optionally one profile).
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from tdrive.models import CallerIdentity, PracticeSession
from tdrive.services.validators import parse_minutes


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime. Use this instead of datetime.now()."""
    return datetime.now(timezone.utc)


def new_session_id() -> str:
    return f"s_{uuid.uuid4().hex}"


def filter_sessions(
    sessions: Iterable[dict], owner_user_id: str, profile_id: Optional[str] = None
) -> List[dict]:
    """
    Records owned by owner_user_id, limited to profile_id when one is given.

    An empty or missing profile_id means every profile of the owner.
    """
    result = []
    for session in sessions:
        if session.get("ownerUserId") != owner_user_id:
            continue
        if profile_id and session.get("profileId") != profile_id:
            continue
        result.append(session)
    return result


def build_session(payload: Dict[str, Any], user: CallerIdentity) -> PracticeSession:
    """
    Create a new record from an already validated payload.

    Server-assigned fields (id, owner, createdAt) never come from the payload.
    """
    return PracticeSession(
        id=new_session_id(),
        owner_user_id=user.uid,
        owner_email=user.email,
        owner_phone=user.phone_number,
        profile_id=str(payload["profileId"]),
        date=str(payload["date"]),
        start_time=str(payload["startTime"]),
        duration_minutes=parse_minutes(payload["durationMinutes"]),
        time_of_day=payload["timeOfDay"],
        weather=str(payload["weather"]),
        notes=str(payload.get("notes") or ""),
        created_at=utc_now().isoformat(),
    )
