"""Launches Push to Bintray runs in the background."""

from __future__ import annotations

import threading
from typing import Optional

from bintray_push.modules.pushtobintray.client import ArtifactoryBuildInfoClient, BintrayClient
from bintray_push.modules.pushtobintray.domain import BuildIdentity, PushConfig, ServerConfig
from bintray_push.modules.pushtobintray.service.run_status import RunStatus
from bintray_push.modules.pushtobintray.service.runnable import ClientFactory, PushToBintrayRunnable
from bintray_push.modules.pushtobintray.service.steps import SyncClient
from bintray_push.services.base import BaseService
from bintray_push.settings import Settings


class PushToBintrayService(BaseService):
    """Owns the shared RunStatus and hands runnables to worker threads."""

    def __init__(
        self,
        settings: Settings,
        *,
        server: Optional[ServerConfig] = None,
        status: Optional[RunStatus] = None,
        sync_client: Optional[SyncClient] = None,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        super().__init__(settings)
        self.server = server or ServerConfig.from_settings(settings)
        self.status = status or RunStatus()
        self.sync_client = sync_client or BintrayClient.from_server_config(
            self.server, timeout=settings.http_timeout
        )
        self.client_factory = client_factory or self._default_client_factory

    def _default_client_factory(self, server: ServerConfig) -> ArtifactoryBuildInfoClient:
        return ArtifactoryBuildInfoClient.from_server_config(server, timeout=self.settings.http_timeout)

    def create_runnable(self, config: PushConfig, build: BuildIdentity) -> PushToBintrayRunnable:
        return PushToBintrayRunnable(
            config,
            build,
            self.server,
            self.status,
            sync_client=self.sync_client,
            client_factory=self.client_factory,
        )

    def start(self, config: PushConfig, build: BuildIdentity) -> threading.Thread:
        """Run the push on a daemon thread and return that thread."""
        runnable = self.create_runnable(config, build)
        thread = threading.Thread(
            target=runnable.run,
            name=f"PushToBintray-{build.build_name}-{build.build_number}",
            daemon=True,
        )
        thread.start()
        self.log.info(
            "Push to Bintray started build=%s/%s target=%s/%s/%s/%s mavenSync=%s",
            build.build_name,
            build.build_number,
            config.subject,
            config.repository,
            config.package_name,
            config.version,
            config.maven_sync,
        )
        return thread

    def close(self) -> None:
        close = getattr(self.sync_client, "close", None)
        if callable(close):
            close()
