import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tdrive import config
from tdrive.auth import IdentityProviderError, init_identity_provider
from tdrive.routes import sessions_router, stats_router, system_router
from tdrive.store import StorageError, init_store

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="T-Drive API",
    description="Practice session log",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include routers
app.include_router(system_router)
app.include_router(sessions_router)
app.include_router(stats_router)


@app.on_event("startup")
def on_startup():
    """Create the session file if needed and initialize Firebase Admin.

    Store initialization failures stop the server. Missing Firebase
    credentials only log a warning; authenticated routes then fail with 500
    until the environment is fixed.
    """
    try:
        store = init_store()
    except StorageError as e:
        raise RuntimeError(
            f"Session store initialization failed for DATA_FILE={config.DATA_FILE}: {e}"
        ) from e
    logger.info(f"Session store ready at {store.path}")

    if config.identity_provider_configured():
        init_identity_provider()
    else:
        logger.warning("Firebase Admin credentials not configured. Set FIREBASE_PROJECT_ID, "
                       "FIREBASE_CLIENT_EMAIL and FIREBASE_PRIVATE_KEY env vars.")


# Error handlers
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": message}."""
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    """Handle unreadable or unwritable session data."""
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse({"error": f"Storage failure: {exc}"}, status_code=500)


@app.exception_handler(IdentityProviderError)
async def identity_provider_error_handler(request: Request, exc: IdentityProviderError):
    """Handle a missing or broken Firebase Admin configuration."""
    logger.error(f"Identity provider unavailable: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=500)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
