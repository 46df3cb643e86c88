import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from tdrive.auth import get_current_user
from tdrive.models import CallerIdentity
from tdrive.services.sessions import build_session, filter_sessions
from tdrive.services.validators import validate_session
from tdrive.store import SessionStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("")
def list_sessions(
    profile_id: Optional[str] = Query(None, alias="profileId"),
    user: CallerIdentity = Depends(get_current_user),
    store: SessionStore = Depends(get_store),
):
    """List the caller's sessions, optionally for one profile."""
    sessions = store.load()
    return {"sessions": filter_sessions(sessions, user.uid, profile_id)}


@router.post("", status_code=201)
async def create_session(
    request: Request,
    user: CallerIdentity = Depends(get_current_user),
    store: SessionStore = Depends(get_store),
):
    """
    Validate and append a new session.

    Owner fields, id and createdAt are assigned here; anything the client
    sends for them is ignored. The record is written before responding.
    """
    body = await request.body()
    try:
        payload = json.loads(body) if body else {}
    except (ValueError, UnicodeDecodeError):
        raise HTTPException(status_code=400, detail="Invalid JSON payload")
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Invalid JSON payload")

    error = validate_session(payload)
    if error:
        raise HTTPException(status_code=400, detail=error)

    session = build_session(payload, user)
    record = store.append(session.to_record())
    logger.info(f"Session {session.id} created by {user.uid} for profile {session.profile_id}")
    return {"session": record}


@router.delete("/{session_id}")
def delete_session(
    session_id: str,
    user: CallerIdentity = Depends(get_current_user),
    store: SessionStore = Depends(get_store),
):
    """Delete one of the caller's sessions."""
    session_id = session_id.strip()
    target = store.get(session_id)
    if not target:
        raise HTTPException(status_code=404, detail="Session not found")

    if target.get("ownerUserId") != user.uid:
        logger.warning(f"User {user.uid} tried to delete session {session_id} owned by someone else")
        raise HTTPException(status_code=403, detail="Forbidden")

    if not store.delete(session_id):
        # Removed by a concurrent request between lookup and delete
        raise HTTPException(status_code=404, detail="Session not found")

    logger.info(f"Session {session_id} deleted by {user.uid}")
    return {"deleted": True}
