from .artifactory import ArtifactoryBuildInfoClient
from .bintray import BintrayClient

__all__ = ["ArtifactoryBuildInfoClient", "BintrayClient"]
