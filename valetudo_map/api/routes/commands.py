# valetudo_map/api/routes/commands.py
"""
Command payload routes: pixel picks in, robot request bodies out.
"""
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..deps import get_document
from ...core import CoordinateTransform
from ...models import (
    GoToPixelRequest, GoToRequest, JoinSegmentsPixelRequest, JoinSegmentsRequest, PixelPoint,
    RenameSegmentIn, SegmentCleanPixelRequest, SegmentCleanRequest, SegmentRenameRequest,
    SplitSegmentPixelRequest, SplitSegmentRequest, ZoneCleanPixelRequest, ZoneCleanRequest,
)
from ...services.command_service import (
    CommandBuildError, go_to_command, join_segments_command, rename_segment_command,
    segment_clean_command, split_segment_command, zone_clean_command,
)

_LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/commands", tags=["commands"])


def _rejected(exc: CommandBuildError) -> JSONResponse:
    _LOGGER.info("Command rejected: %s", exc)
    return JSONResponse(status_code=400, content={"error": "invalid_command", "detail": str(exc)})


@router.post("/go_to", response_model=GoToRequest)
def go_to(payload: GoToPixelRequest):
    doc = get_document()
    transform = CoordinateTransform.for_document(doc)
    return go_to_command(transform, PixelPoint(x=payload.x, y=payload.y))


@router.post("/zone_clean", response_model=ZoneCleanRequest)
def zone_clean(payload: ZoneCleanPixelRequest):
    doc = get_document()
    transform = CoordinateTransform.for_document(doc)
    try:
        return zone_clean_command(
            transform,
            [(z.a, z.b) for z in payload.zones],
            iterations=[z.iterations for z in payload.zones],
        )
    except CommandBuildError as exc:
        return _rejected(exc)


@router.post("/segment_clean", response_model=SegmentCleanRequest)
def segment_clean(payload: SegmentCleanPixelRequest):
    try:
        return segment_clean_command(
            get_document(),
            segment_ids=payload.segment_ids,
            points=payload.points,
            iterations=payload.iterations,
        )
    except CommandBuildError as exc:
        return _rejected(exc)


@router.post("/split_segment", response_model=SplitSegmentRequest)
def split_segment(payload: SplitSegmentPixelRequest):
    doc = get_document()
    transform = CoordinateTransform.for_document(doc)
    try:
        return split_segment_command(doc, transform, payload.segment_id, payload.a, payload.b)
    except CommandBuildError as exc:
        return _rejected(exc)


@router.post("/join_segments", response_model=JoinSegmentsRequest)
def join_segments(payload: JoinSegmentsPixelRequest):
    try:
        return join_segments_command(get_document(), payload.segment_a_id, payload.segment_b_id)
    except CommandBuildError as exc:
        return _rejected(exc)


@router.post("/rename_segment", response_model=SegmentRenameRequest)
def rename_segment(payload: RenameSegmentIn):
    try:
        return rename_segment_command(get_document(), payload.segment_id, payload.name)
    except CommandBuildError as exc:
        return _rejected(exc)
