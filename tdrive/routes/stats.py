from typing import Optional

from fastapi import APIRouter, Depends, Query

from tdrive.auth import get_current_user
from tdrive.models import CallerIdentity
from tdrive.services.summary import compute_summary
from tdrive.store import SessionStore, get_store

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("")
def practice_stats(
    profile_id: Optional[str] = Query(None, alias="profileId"),
    user: CallerIdentity = Depends(get_current_user),
    store: SessionStore = Depends(get_store),
):
    """
    Summary of the caller's practice hours.

    Query params:
        profileId: limit to one profile. Defaults to all of the caller's profiles.
    """
    summary = compute_summary(store.load(), user.uid, profile_id)
    return summary.model_dump(by_alias=True)
