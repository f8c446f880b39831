"""Builds the upload override and push request from the form fields."""

from __future__ import annotations

from typing import List, Optional

from bintray_push.modules.pushtobintray.domain import (
    BuildIdentity,
    PushConfig,
    PushRequest,
    UploadOverride,
)


def create_licenses_list(licenses: Optional[str]) -> List[str]:
    """Split a comma separated license string; empty input gives ``[""]``."""
    return [item.strip() for item in (licenses or "").split(",")]


def build_upload_override(config: PushConfig) -> UploadOverride:
    return UploadOverride(
        subject=config.subject,
        repository=config.repository,
        package=config.package_name,
        version=config.version,
        licenses=tuple(create_licenses_list(config.licenses)),
        vcs_url=config.vcs_url,
    )


def build_push_request(config: PushConfig, build: BuildIdentity) -> PushRequest:
    return PushRequest(
        build_name=build.build_name,
        build_number=build.build_number_text,
        sign_method=config.sign_method,
        passphrase=config.gpg_passphrase,
        override=build_upload_override(config),
    )
