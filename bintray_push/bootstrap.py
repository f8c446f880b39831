"""Service wiring and startup logging."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bintray_push.modules.pushtobintray import PushToBintrayService
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    push_to_bintray_service: PushToBintrayService = field(init=False)

    def __post_init__(self) -> None:
        self.push_to_bintray_service = PushToBintrayService(self.settings)

    def close(self) -> None:
        self.push_to_bintray_service.close()


async def bootstrap_services(container: ServiceContainer) -> None:
    settings = container.settings
    log.info("...................RUN...................")
    log.info(
        "########### artifactory=%s bintray=%s mavenSyncCredentials=%s ############",
        settings.artifactory_url,
        settings.bintray_api_url,
        bool(settings.nexus_username and settings.nexus_password),
    )
    if not settings.artifactory_username:
        log.warning("ARTIFACTORY_USERNAME is not set, Artifactory calls will be anonymous")
    if not (settings.bintray_username and settings.bintray_api_key):
        log.warning("Bintray credentials are not set, Maven Central sync will be unauthenticated")
