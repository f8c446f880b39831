"""FastAPI routes backing the Push to Bintray build action."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from bintray_push.modules.pushtobintray.domain import BuildIdentity, PushConfig
from bintray_push.modules.pushtobintray.service.manager import PushToBintrayService

router = APIRouter(prefix="/pushtobintray", tags=["push-to-bintray"])


def get_service(request: Request) -> PushToBintrayService:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "push_to_bintray_service", None):
        raise HTTPException(status_code=500, detail="Push to Bintray service not initialized.")
    return container.push_to_bintray_service


@router.post("/{build_name}/{build_number}")
async def push_to_bintray(
    build_name: str,
    build_number: int,
    config: PushConfig,
    svc: PushToBintrayService = Depends(get_service),
) -> Dict[str, Any]:
    if build_number < 0:
        raise HTTPException(status_code=400, detail="build_number must not be negative")
    svc.start(config, BuildIdentity(build_name=build_name, build_number=build_number))
    return {"status": "true", "msg": "started"}


@router.get("/status")
async def push_status(offset: int = 0, svc: PushToBintrayService = Depends(get_service)) -> Dict[str, Any]:
    status = svc.status
    payload: Dict[str, Any] = {"done": status.done, "log": status.lines(offset)}
    result = status.result
    if status.done and result is not None and result.done():
        payload["outcome"] = result.result().as_dict()
    return payload
