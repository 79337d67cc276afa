# valetudo_map/api/routes/map.py
"""
Map routes.
"""
import logging

from fastapi import APIRouter, Body, HTTPException, Query
from fastapi.responses import JSONResponse

from ..deps import get_document, get_shared
from ...core import MapDecodeError
from ...models import (
    MapDocumentResponse, MapGridResponse, SegmentAtResponse, SegmentListResponse,
    VirtualRestrictionsRequest,
)
from ...services.map_service import (
    decode_service, document_to_model, map_grid_service, restrictions_service,
    segment_at_service, segments_service,
)

_LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/map", tags=["map"])


@router.post("/decode", response_model=MapDocumentResponse)
def decode(payload: dict = Body(..., description="Raw map telemetry as served by the robot")):
    """Decode a telemetry snapshot and make it the current map."""
    shared = get_shared()
    try:
        return decode_service(shared, payload)
    except MapDecodeError as exc:
        _LOGGER.warning("Map decode failed (%s): %s", exc.kind, exc)
        shared.record_failure(str(exc))
        return JSONResponse(status_code=422, content={"error": exc.kind, "detail": str(exc)})


@router.get("/document", response_model=MapDocumentResponse)
def document():
    """Summary of the current map (layers without pixels, entities with points)."""
    doc, version = get_shared().snapshot()
    if doc is None:
        raise HTTPException(status_code=404, detail="no map decoded yet")
    return document_to_model(doc, version)


@router.get("/segments", response_model=SegmentListResponse)
def segments():
    """Addressable rooms with names and label points."""
    return segments_service(get_document())


@router.get("/segment_at", response_model=SegmentAtResponse)
def segment_at(
    x: int = Query(..., description="Pixel x"),
    y: int = Query(..., description="Pixel y"),
):
    """Room under a picked pixel, if any."""
    return segment_at_service(get_document(), x, y)


@router.get("/grid", response_model=MapGridResponse)
def grid():
    """Label raster of the current map."""
    return map_grid_service(get_document())


@router.get("/restrictions", response_model=VirtualRestrictionsRequest)
def restrictions():
    """Virtual walls and no-go/no-mop areas of the current map."""
    return restrictions_service(get_document())
