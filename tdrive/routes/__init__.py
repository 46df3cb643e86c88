from tdrive.routes.sessions import router as sessions_router
from tdrive.routes.stats import router as stats_router
from tdrive.routes.system import router as system_router

__all__ = [
    'sessions_router',
    'stats_router',
    'system_router',
]
