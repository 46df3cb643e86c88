from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from tdrive import config
from tdrive.auth import get_current_user
from tdrive.models import CallerIdentity

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/public-config")
def public_config():
    """Firebase web config for browser clients."""
    web_config, missing = config.get_public_web_config()
    if missing:
        return JSONResponse(
            {"error": "Missing Firebase web config env vars", "missing": missing},
            status_code=500,
        )
    return {"firebase": web_config}


@router.get("/me")
def me(user: CallerIdentity = Depends(get_current_user)):
    return {"user": user.model_dump(by_alias=True)}
