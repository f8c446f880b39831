"""HTTP client for the Artifactory build-info REST API."""

from __future__ import annotations

import logging
from typing import Dict, Optional
from urllib.parse import quote

import httpx

from bintray_push.modules.pushtobintray.domain import (
    ArtifactoryVersion,
    BintrayResponse,
    PushRequest,
    ServerConfig,
    parse_bintray_response,
)
from bintray_push.modules.pushtobintray.util.constants import SIGN_METHOD_DESCRIPTOR


class ArtifactoryBuildInfoClient:
    """Talks to Artifactory on behalf of a single push run."""

    def __init__(
        self,
        url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = 300.0,
    ) -> None:
        self.base_url = url.rstrip("/")
        self.log = logging.getLogger(self.__class__.__name__)
        auth = None
        if username:
            auth = (username, password or "")
        self._auth = auth
        self._client = client or httpx.Client(timeout=timeout, verify=True)
        self._closed = False

    @classmethod
    def from_server_config(
        cls,
        server: ServerConfig,
        client: Optional[httpx.Client] = None,
        timeout: float = 300.0,
    ) -> "ArtifactoryBuildInfoClient":
        return cls(server.url, server.username, server.password, client=client, timeout=timeout)

    def verify_compatible_artifactory_version(self) -> ArtifactoryVersion:
        url = f"{self.base_url}/api/system/version"
        resp = self._client.get(url, auth=self._auth)
        resp.raise_for_status()
        data = resp.json()
        version = data.get("version") if isinstance(data, dict) else None
        if not version:
            raise ValueError(f"Artifactory did not report a version: {resp.text}")
        self.log.debug("Artifactory %s reports version %s", self.base_url, version)
        return ArtifactoryVersion.parse(str(version))

    def push_to_bintray(self, request: PushRequest) -> BintrayResponse:
        url = (
            f"{self.base_url}/api/build/pushToBintray/"
            f"{quote(request.build_name, safe='')}/{quote(request.build_number, safe='')}"
        )
        params = self._build_push_params(request.sign_method, request.passphrase)
        self.log.info(
            "Pushing build %s/%s to Bintray %s/%s/%s/%s",
            request.build_name,
            request.build_number,
            request.override.subject,
            request.override.repository,
            request.override.package,
            request.override.version,
        )
        resp = self._client.post(
            url,
            params=params or None,
            json=request.override.to_payload(),
            auth=self._auth,
        )
        return parse_bintray_response(resp)

    @staticmethod
    def _build_push_params(sign_method: Optional[str], passphrase: Optional[str]) -> Dict[str, str]:
        params: Dict[str, str] = {}
        method = (sign_method or "").strip()
        if method.lower() not in SIGN_METHOD_DESCRIPTOR:
            params["gpgSign"] = method
        if passphrase:
            params["gpgPassphrase"] = passphrase
        return params

    def shutdown(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._client.close()

    @property
    def closed(self) -> bool:
        return self._closed
