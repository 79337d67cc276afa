# valetudo_map/models/__init__.py
from .map import (
    LayerKind, EntityKind, UnknownKind, MapSize, BoundingBox, LayerMetadata,
    Layer, Entity, MapDocument,
)
from .raw import RawMapTelemetry, RawLayer, RawEntity, RawSize, RawDimensions
from .commands import (
    ZonePoint, ZonePoints, WallPoints, GoToRequest, CleaningZone, ZoneCleanRequest,
    SegmentCleanRequest, VirtualWall, RestrictedZone, VirtualRestrictionsRequest,
    SplitSegmentRequest, JoinSegmentsRequest, SegmentRenameRequest,
)
from .api import (
    PixelPoint, BoundsModel, SizeModel, LayerSummary, EntitySummary, MapDocumentResponse,
    SegmentInfoModel, SegmentListResponse, SegmentAtResponse, MapGridResponse, StatusResponse,
    GoToPixelRequest, PixelZone, ZoneCleanPixelRequest, SegmentCleanPixelRequest,
    SplitSegmentPixelRequest, JoinSegmentsPixelRequest, RenameSegmentIn,
)
