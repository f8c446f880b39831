"""Failure kinds raised inside the Push to Bintray flow."""

from __future__ import annotations


class PushToBintrayError(Exception):
    """Base error for the push action."""


class VersionIncompatibleError(PushToBintrayError):
    """Artifactory is older than the minimal supported version."""


class RemoteCallError(PushToBintrayError):
    """The push call to Artifactory failed or returned a non-success response."""


class SyncError(PushToBintrayError):
    """The Maven Central sync call failed."""
