"""Runtime configuration for the Push to Bintray service."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Configuration values mapped from environment variables."""

    app_name: str = Field("Push to Bintray API", env="APP_NAME")
    app_version: str = Field("2.1.0", env="APP_VERSION")
    log_level: str = Field("INFO", env="LOG_LEVEL")

    # Artifactory server holding the build info and its artifacts
    artifactory_url: str = Field("http://localhost:8081/artifactory", env="ARTIFACTORY_URL")
    artifactory_username: Optional[str] = Field(None, env="ARTIFACTORY_USERNAME")
    artifactory_password: Optional[str] = Field(None, env="ARTIFACTORY_PASSWORD")

    # Bintray REST API, used for the Maven Central sync call
    bintray_api_url: str = Field("https://api.bintray.com", env="BINTRAY_API_URL")
    bintray_username: Optional[str] = Field(None, env="BINTRAY_USERNAME")
    bintray_api_key: Optional[str] = Field(None, env="BINTRAY_API_KEY")

    # Sonatype (Nexus) credentials forwarded to Bintray for the Maven Central sync
    nexus_username: Optional[str] = Field(None, env="NEXUS_USERNAME")
    nexus_password: Optional[str] = Field(None, env="NEXUS_PASSWORD")

    http_timeout: float = Field(300.0, env="HTTP_TIMEOUT")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
