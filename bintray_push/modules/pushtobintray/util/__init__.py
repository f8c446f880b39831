"""Utility modules for Push to Bintray."""

from .constants import MINIMAL_SUPPORTED_VERSION
from .exceptions import (
    PushToBintrayError,
    RemoteCallError,
    SyncError,
    VersionIncompatibleError,
)

__all__ = [
    "MINIMAL_SUPPORTED_VERSION",
    "PushToBintrayError",
    "RemoteCallError",
    "SyncError",
    "VersionIncompatibleError",
]
