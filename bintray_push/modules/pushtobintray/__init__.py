"""Push to Bintray module exports."""

from .service.manager import PushToBintrayService
from .controller import router as pushtobintray_router

__all__ = ["PushToBintrayService", "pushtobintray_router"]
