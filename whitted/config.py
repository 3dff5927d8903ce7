# config.py
# Tracing constants shared by the core and the render layer.

# Offset applied along a ray before searching for hits, so a ray leaving a
# surface does not immediately hit that same surface again
EPSILON = 0.01

# Material invocations deeper than this return black
MAX_DEPTH = 3

# ---------------- Glossy sampling ----------------
JITTER_MIN = 1e-4
JITTER_MAX = 1e-3
MIN_SAMPLES = 1
MAX_SAMPLES = 5

# ---------------- Geometry ----------------
PLANE_TOLERANCE = 0.01
PARALLEL_TOLERANCE = 1e-6

# ---------------- Rendering ----------------
BACKGROUND = (0, 0, 0)
DEFAULT_WIDTH = 854
DEFAULT_HEIGHT = 480
OUTPUT_DIR = "images"
