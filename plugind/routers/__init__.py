"""API routers for plugind daemon."""

from .events import router as events_router
from .plugins import router as plugins_router
from .registries import router as registries_router
from .status import router as status_router
from .workspace import router as workspace_router

__all__ = [
    "events_router",
    "plugins_router",
    "registries_router",
    "status_router",
    "workspace_router",
]
