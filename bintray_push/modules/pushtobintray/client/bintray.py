"""HTTP client for the Bintray REST API."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from bintray_push.modules.pushtobintray.domain import MavenCentralSyncModel, ServerConfig


class BintrayClient:
    """Calls Bintray directly for operations Artifactory does not proxy."""

    def __init__(
        self,
        base_url: str,
        username: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = 300.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.log = logging.getLogger(self.__class__.__name__)
        auth = None
        if username and api_key:
            auth = (username, api_key)
        self._auth = auth
        self._client = client or httpx.Client(timeout=timeout, verify=True)

    @classmethod
    def from_server_config(
        cls,
        server: ServerConfig,
        client: Optional[httpx.Client] = None,
        timeout: float = 300.0,
    ) -> "BintrayClient":
        return cls(
            server.bintray_url,
            server.bintray_username,
            server.bintray_api_key,
            client=client,
            timeout=timeout,
        )

    def maven_central_sync(
        self,
        model: MavenCentralSyncModel,
        subject: str,
        repository: str,
        package: str,
        version: str,
    ) -> str:
        """Sync a published version to Maven Central and return Bintray's reply."""
        path = "/".join(quote(part, safe="") for part in (subject, repository, package))
        url = f"{self.base_url}/maven_central_sync/{path}/versions/{quote(version, safe='')}"
        self.log.info("Maven Central sync %s/%s/%s version=%s", subject, repository, package, version)
        resp = self._client.post(url, json=model.to_payload(), auth=self._auth)
        resp.raise_for_status()
        return resp.text

    def close(self) -> None:
        self._client.close()
