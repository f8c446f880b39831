"""Dataclasses and DTOs used by the Push to Bintray action."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field

from bintray_push.modules.pushtobintray.util.constants import MAVEN_CENTRAL_SYNC_CLOSE
from bintray_push.modules.pushtobintray.util.exceptions import PushToBintrayError
from bintray_push.settings import Settings


class PushConfig(BaseModel):
    """Fields entered by the user on the Push to Bintray form."""

    subject: str = ""
    repository: str = ""
    package_name: str = Field("", alias="packageName")
    version: str = ""
    vcs_url: str = Field("", alias="vcsUrl")
    sign_method: str = Field("", alias="signMethod")
    gpg_passphrase: str = Field("", alias="gpgPassphrase")
    licenses: str = ""
    maven_sync: bool = Field(False, alias="mavenSync")

    model_config = {"populate_by_name": True}


@dataclass(frozen=True)
class BuildIdentity:
    """Build the artifacts were produced by."""

    build_name: str
    build_number: int

    @property
    def build_number_text(self) -> str:
        return str(self.build_number)


@dataclass(frozen=True)
class ServerConfig:
    """Connection details for Artifactory plus the mirror credentials."""

    url: str
    username: Optional[str] = None
    password: Optional[str] = None
    mirror_username: Optional[str] = None
    mirror_password: Optional[str] = None
    bintray_url: str = "https://api.bintray.com"
    bintray_username: Optional[str] = None
    bintray_api_key: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServerConfig":
        return cls(
            url=settings.artifactory_url,
            username=settings.artifactory_username,
            password=settings.artifactory_password,
            mirror_username=settings.nexus_username,
            mirror_password=settings.nexus_password,
            bintray_url=settings.bintray_api_url,
            bintray_username=settings.bintray_username,
            bintray_api_key=settings.bintray_api_key,
        )


@dataclass(frozen=True)
class UploadOverride:
    """Bintray coordinates overriding the build's descriptor."""

    subject: str
    repository: str
    package: str
    version: str
    licenses: Tuple[str, ...] = ()
    vcs_url: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return {
            "subject": self.subject,
            "repoName": self.repository,
            "packageName": self.package,
            "versionName": self.version,
            "licenses": list(self.licenses),
            "vcsUrl": self.vcs_url,
        }


@dataclass(frozen=True)
class PushRequest:
    build_name: str
    build_number: str
    sign_method: str
    passphrase: str
    override: UploadOverride


@dataclass(frozen=True)
class MavenCentralSyncModel:
    """Sonatype OSS credentials sent along with the sync request."""

    username: Optional[str]
    password: Optional[str]
    close: str = MAVEN_CENTRAL_SYNC_CLOSE

    def to_payload(self) -> Dict[str, Any]:
        return {"username": self.username, "password": self.password, "close": self.close}


@dataclass
class StepResult:
    """Outcome of a single step of the action."""

    ok: bool
    reason: str = ""
    error: Optional[PushToBintrayError] = None

    @classmethod
    def success(cls) -> "StepResult":
        return cls(True)

    @classmethod
    def failure(cls, error: PushToBintrayError) -> "StepResult":
        return cls(False, str(error), error)


@dataclass
class PushOutcome:
    """Terminal result of one Push to Bintray run."""

    pushed: bool = False
    synced: bool = False
    reason: str = ""
    error: Optional[Exception] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"pushed": self.pushed, "synced": self.synced, "reason": self.reason}
        if self.error is not None:
            payload["error"] = type(self.error).__name__
        if self.details:
            payload["details"] = dict(self.details)
        return payload
