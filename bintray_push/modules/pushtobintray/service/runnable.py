"""Background run of the Push to Bintray action."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from bintray_push.modules.pushtobintray.client import ArtifactoryBuildInfoClient
from bintray_push.modules.pushtobintray.domain import (
    BuildIdentity,
    PushConfig,
    PushOutcome,
    ServerConfig,
)
from bintray_push.modules.pushtobintray.service.run_status import RunStatus
from bintray_push.modules.pushtobintray.service.steps import (
    ArtifactoryClient,
    PushExecutor,
    RunLogger,
    SyncClient,
    SyncTrigger,
    VersionGate,
)
from bintray_push.modules.pushtobintray.util.constants import MSG_START, MSG_UNEXPECTED

ClientFactory = Callable[[ServerConfig], ArtifactoryClient]


class PushToBintrayRunnable:
    """Pushes one build to Bintray; meant to be the target of a thread.

    ``run`` never raises. Whatever happens, the Artifactory client is shut
    down and the shared status ends up done.
    """

    def __init__(
        self,
        config: PushConfig,
        build: BuildIdentity,
        server: ServerConfig,
        status: RunStatus,
        *,
        sync_client: SyncClient,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        self.config = config
        self.build = build
        self.server = server
        self.status = status
        self.client_factory = client_factory or ArtifactoryBuildInfoClient.from_server_config
        self.log = logging.getLogger(self.__class__.__name__)
        self.run_log = RunLogger(status, self.log)
        self.version_gate = VersionGate(self.run_log)
        self.executor = PushExecutor(self.run_log)
        self.sync_trigger = SyncTrigger(sync_client, server, self.run_log)

    def run(self) -> PushOutcome:
        self.run_log.message(MSG_START)
        with self.status.running() as outcome:
            client: Optional[ArtifactoryClient] = None
            try:
                client = self.client_factory(self.server)
                gate = self.version_gate.check(client)
                if not gate.ok:
                    self.run_log.error(gate.reason)
                    outcome.reason = gate.reason
                    outcome.error = gate.error
                    return outcome

                pushed = self.executor.push(client, self.config, self.build)
                outcome.pushed = pushed.ok
                outcome.reason = pushed.reason
                outcome.error = pushed.error
                if pushed.ok and self.config.maven_sync:
                    synced = self.sync_trigger.trigger(self.config)
                    outcome.synced = synced.ok
                    if not synced.ok:
                        outcome.details["sync"] = synced.reason
            except Exception as exc:  # noqa: BLE001
                self.log.error("%s %s", MSG_UNEXPECTED, exc)
                outcome.reason = str(exc)
                outcome.error = exc
            finally:
                if client is not None:
                    self._shutdown(client)
        return outcome

    def _shutdown(self, client: ArtifactoryClient) -> None:
        try:
            client.shutdown()
        except Exception as exc:  # noqa: BLE001
            self.log.warning("Failed to close Artifactory client: %s", exc)
