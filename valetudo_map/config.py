# valetudo_map/config.py

# ---- Map geometry ----
# Valetudo reports pixelSize on every map; this is the firmware default used
# when a snapshot omits it.
DEFAULT_PIXEL_SIZE_MM = 5

# ---- Label grid (numpy export) ----
GRID_EMPTY = 0
GRID_FLOOR = 1
GRID_WALL = 2
GRID_SEGMENT_BASE = 10    # first segment layer gets 10, next 11, ...
GRID_DTYPE = "int16"

# ---- Segments ----
UNNAMED_SEGMENT_PREFIX = "Room"

# ---- Cleaning commands ----
MIN_ITERATIONS = 1
MAX_ITERATIONS = 3
DEFAULT_ITERATIONS = 1

# ---- HTTP surface ----
API_PREFIX = "/api/v1"
APP_TITLE = "Valetudo Map"
CORS_ORIGINS = ["*"]
