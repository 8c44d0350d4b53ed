import logging
import os

# Tile grid
TILE_WIDTH = 28

# Window
WIDTH = TILE_WIDTH * 30
HEIGHT = TILE_WIDTH * 30
FPS = 60
BACKGROUND_COLOR = (0, 0, 0)
TITLE_BACKGROUND_COLOR = (0, 139, 139)

# Lighting
DARKNESS_COLOR = (0, 0, 0, 255)
LIGHT_CULL_FACTOR = 0.55       # cull box = screen size * factor, per axis
LIGHT_RAY_EPSILON = 0.0005     # radians either side of each target
LIGHT_OUTLINE_THICKNESS = TILE_WIDTH / 1.2
LIGHT_MARKER_SIZE = 16

# Level
DEFAULT_MAP = os.path.join(os.path.dirname(__file__), "maps", "cave.txt")

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
