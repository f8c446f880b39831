"""Service exports."""

from .manager import PushToBintrayService
from .request_builder import build_push_request, build_upload_override, create_licenses_list
from .run_status import RunStatus
from .runnable import PushToBintrayRunnable
from .steps import PushExecutor, RunLogger, SyncTrigger, VersionGate

__all__ = [
    "PushExecutor",
    "PushToBintrayRunnable",
    "PushToBintrayService",
    "RunLogger",
    "RunStatus",
    "SyncTrigger",
    "VersionGate",
    "build_push_request",
    "build_upload_override",
    "create_licenses_list",
]
