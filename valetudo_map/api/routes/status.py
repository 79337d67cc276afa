# valetudo_map/api/routes/status.py
"""
Status routes.
"""
from fastapi import APIRouter

from ..deps import get_shared
from ...models import StatusResponse

router = APIRouter(tags=["status"])


@router.get("/status", response_model=StatusResponse)
def status():
    """Decoder state: current version and failure count."""
    shared = get_shared()
    with shared.lock:
        return StatusResponse(
            version=shared.version,
            has_document=shared.document is not None,
            decode_failures=shared.decode_failures,
            last_error=shared.last_error,
        )


@router.post("/reset")
def reset():
    """Forget the current map."""
    get_shared().reset()
    return {"ok": True}
