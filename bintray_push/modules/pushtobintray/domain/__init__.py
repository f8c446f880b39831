from .models import (
    BuildIdentity,
    MavenCentralSyncModel,
    PushConfig,
    PushOutcome,
    PushRequest,
    ServerConfig,
    StepResult,
    UploadOverride,
)
from .responses import BintrayFailure, BintrayResponse, BintraySuccess, parse_bintray_response
from .version import ArtifactoryVersion

__all__ = [
    "ArtifactoryVersion",
    "BintrayFailure",
    "BintrayResponse",
    "BintraySuccess",
    "BuildIdentity",
    "MavenCentralSyncModel",
    "PushConfig",
    "PushOutcome",
    "PushRequest",
    "ServerConfig",
    "StepResult",
    "UploadOverride",
    "parse_bintray_response",
]
