from .errors import MapDecodeError, MalformedGeometryError, InvalidDimensionsError, MalformedTelemetryError
from .pixels import decode_pixel_runs
from .builder import build_map_document
from .transform import CoordinateTransform
from .lookup import SegmentInfo, layer_at, segment_at, segment_infos, content_bounds
from .state import SharedState
