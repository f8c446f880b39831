"""Responses returned by Artifactory's push-to-Bintray endpoint."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import List

import httpx


@dataclass
class BintrayResponse:
    """Any response of the push call, kept as raw text for the run log."""

    status_code: int
    body: str = ""

    def __str__(self) -> str:
        return self.body or f"Bintray response status {self.status_code}"


@dataclass
class BintraySuccess(BintrayResponse):
    messages: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        if self.body or not self.messages:
            return super().__str__()
        return "Push to Bintray succeeded: " + "; ".join(self.messages)


@dataclass
class BintrayFailure(BintrayResponse):
    errors: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        if self.body:
            return self.body
        if self.errors:
            return f"Push to Bintray failed ({self.status_code}): " + "; ".join(self.errors)
        return f"Push to Bintray failed ({self.status_code})"


def _collect_messages(payload: object, key: str) -> List[str]:
    if not isinstance(payload, dict):
        return []
    values = payload.get(key) or []
    if isinstance(values, str):
        return [values]
    messages: List[str] = []
    for item in values:
        if isinstance(item, dict):
            text = item.get("message") or item.get("msg")
            if text:
                messages.append(str(text))
        elif item:
            messages.append(str(item))
    return messages


def parse_bintray_response(response: httpx.Response) -> BintrayResponse:
    """Turn the raw HTTP response into a success/failure object."""
    body = response.text
    try:
        payload = json.loads(body) if body else None
    except json.JSONDecodeError:
        payload = None

    if response.is_success:
        return BintraySuccess(
            status_code=response.status_code,
            body=body,
            messages=_collect_messages(payload, "messages"),
        )
    if response.is_client_error or response.is_server_error:
        return BintrayFailure(
            status_code=response.status_code,
            body=body,
            errors=_collect_messages(payload, "errors"),
        )
    return BintrayResponse(status_code=response.status_code, body=body)
