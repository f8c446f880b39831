"""Individual steps of the Push to Bintray action."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from bintray_push.modules.pushtobintray.domain import (
    ArtifactoryVersion,
    BintrayResponse,
    BintraySuccess,
    BuildIdentity,
    MavenCentralSyncModel,
    PushConfig,
    PushRequest,
    ServerConfig,
    StepResult,
)
from bintray_push.modules.pushtobintray.service.request_builder import build_push_request
from bintray_push.modules.pushtobintray.service.run_status import RunStatus
from bintray_push.modules.pushtobintray.util.constants import (
    MINIMAL_SUPPORTED_VERSION,
    MSG_PUSH_EXCEPTION,
    MSG_SYNC_ERROR,
    MSG_SYNC_START,
    MSG_UNSUPPORTED_VERSION,
    MSG_VERSION_CHECK_ERROR,
)
from bintray_push.modules.pushtobintray.util.exceptions import (
    RemoteCallError,
    SyncError,
    VersionIncompatibleError,
)


class ArtifactoryClient(Protocol):
    def verify_compatible_artifactory_version(self) -> ArtifactoryVersion:
        ...

    def push_to_bintray(self, request: PushRequest) -> BintrayResponse:
        ...

    def shutdown(self) -> None:
        ...


class SyncClient(Protocol):
    def maven_central_sync(
        self,
        model: MavenCentralSyncModel,
        subject: str,
        repository: str,
        package: str,
        version: str,
    ) -> str:
        ...


class RunLogger:
    """Writes to the operator log and to the run log shown in the UI."""

    def __init__(self, status: RunStatus, logger: Optional[logging.Logger] = None) -> None:
        self.status = status
        self.log = logger or logging.getLogger("PushToBintray")

    def message(self, message: str) -> None:
        self.log.info(message)
        self.status.append(message)

    def error(self, message: str, exc: Optional[BaseException] = None) -> str:
        if exc is not None:
            message = f"{message} {exc}"
        self.log.error(message)
        self.status.append(message)
        return message


class VersionGate:
    """Refuses Artifactory servers older than the minimal supported version."""

    def __init__(self, run_log: RunLogger, minimal_version: str = MINIMAL_SUPPORTED_VERSION) -> None:
        self.run_log = run_log
        self.minimal_version = ArtifactoryVersion.parse(minimal_version)

    def is_valid(self, client: ArtifactoryClient) -> bool:
        try:
            version = client.verify_compatible_artifactory_version()
            return version.is_at_least(self.minimal_version)
        except Exception as exc:  # noqa: BLE001
            self.run_log.error(MSG_VERSION_CHECK_ERROR, exc)
        return False

    def check(self, client: ArtifactoryClient) -> StepResult:
        if self.is_valid(client):
            return StepResult.success()
        return StepResult.failure(VersionIncompatibleError(MSG_UNSUPPORTED_VERSION))


class PushExecutor:
    """Sends the push request and classifies Artifactory's reply."""

    def __init__(self, run_log: RunLogger) -> None:
        self.run_log = run_log

    def push(self, client: ArtifactoryClient, config: PushConfig, build: BuildIdentity) -> StepResult:
        request = build_push_request(config, build)
        try:
            response = client.push_to_bintray(request)
        except Exception as exc:  # noqa: BLE001
            message = self.run_log.error(MSG_PUSH_EXCEPTION, exc)
            return StepResult.failure(RemoteCallError(message))

        self.run_log.message(str(response))
        # Only an explicit success counts; failure responses are not told apart.
        if isinstance(response, BintraySuccess):
            return StepResult.success()
        return StepResult.failure(RemoteCallError(str(response)))


class SyncTrigger:
    """Asks Bintray to sync the pushed version to Maven Central."""

    def __init__(self, client: SyncClient, server: ServerConfig, run_log: RunLogger) -> None:
        self.client = client
        self.server = server
        self.run_log = run_log

    def trigger(self, config: PushConfig) -> StepResult:
        try:
            self.run_log.message(MSG_SYNC_START)
            model = MavenCentralSyncModel(self.server.mirror_username, self.server.mirror_password)
            response = self.client.maven_central_sync(
                model,
                config.subject,
                config.repository,
                config.package_name,
                config.version,
            )
            self.run_log.message(response)
            return StepResult.success()
        except Exception as exc:  # noqa: BLE001
            message = self.run_log.error(MSG_SYNC_ERROR, exc)
            return StepResult.failure(SyncError(message))
