"""
Bearer-token authentication backed by Firebase Admin.

The Firebase app is process-wide state initialized once, normally at startup.
init_identity_provider() is idempotent and lock-guarded, so the lazy path
taken by the first request still initializes exactly once.
"""

import logging
import threading
from typing import Optional

import firebase_admin
from fastapi import HTTPException, Request, status
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from firebase_admin import exceptions as firebase_exceptions

from tdrive import config
from tdrive.models import CallerIdentity

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"

_app: Optional[firebase_admin.App] = None
_init_lock = threading.Lock()


class IdentityProviderError(Exception):
    """Firebase Admin could not be initialized."""


def _required(name: str, value: Optional[str]) -> str:
    if not value:
        raise IdentityProviderError(f"Missing required env var: {name}")
    return value


def init_identity_provider() -> firebase_admin.App:
    """Initialize the Firebase Admin app once per process."""
    global _app
    with _init_lock:
        if _app is not None:
            return _app

        project_id = _required("FIREBASE_PROJECT_ID", config.FIREBASE_PROJECT_ID)
        client_email = _required("FIREBASE_CLIENT_EMAIL", config.FIREBASE_CLIENT_EMAIL)
        private_key = _required("FIREBASE_PRIVATE_KEY", config.FIREBASE_PRIVATE_KEY)

        cert = credentials.Certificate({
            "type": "service_account",
            "project_id": project_id,
            "client_email": client_email,
            # Keys pasted into .env files carry escaped newlines
            "private_key": private_key.replace("\\n", "\n"),
            "token_uri": TOKEN_URI,
        })
        _app = firebase_admin.initialize_app(cert)
        logger.info(f"Firebase Admin initialized for project {project_id}")
        return _app


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an Authorization header.

    Raises HTTPException 401 when the header is missing, uses another scheme,
    or carries an empty token.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing Bearer token")

    token = authorization[len("Bearer "):].strip()
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Empty token")
    return token


def verify_token(token: str) -> CallerIdentity:
    """Verify a Firebase ID token and return the caller it belongs to."""
    app = init_identity_provider()
    try:
        decoded = firebase_auth.verify_id_token(token, app=app)
    except (ValueError, firebase_exceptions.FirebaseError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=f"Invalid token: {e}"
        ) from e

    return CallerIdentity(
        uid=decoded["uid"],
        email=decoded.get("email"),
        phone_number=decoded.get("phone_number"),
        name=decoded.get("name"),
    )


def get_current_user(request: Request) -> CallerIdentity:
    """
    Get the current caller from the bearer token.
    Raises HTTPException if not authenticated.
    """
    token = extract_bearer_token(request.headers.get("authorization"))
    return verify_token(token)
