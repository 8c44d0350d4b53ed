# data/tile_stats.py
# Colors cycle through the listed keyframes once per "period" seconds.

TILE_STATS = {
    "floor": {
        "colors": [(150, 77, 0)],
        "period": 3.0,
    },
    "blood": {
        "colors": [(64, 0, 0)],
        "period": 3.0,
    },
    "walls": {
        "colors": [(60, 60, 60), (70, 25, 10), (60, 60, 60)],
        "period": 3.0,
    },
    "gold": {
        "colors": [(255, 165, 0), (255, 255, 0), (255, 165, 0)],
        "period": 3.0,
    },
    "door": {
        "colors": [(130, 20, 0), (170, 70, 20), (130, 20, 0)],
        "period": 1.0,
    },
    "health": {
        "colors": [(0, 255, 0), (255, 255, 255), (0, 150, 50), (0, 255, 0)],
        "period": 3.0,
    },
    "spikes": {
        "colors": [(255, 0, 0), (0, 0, 0), (255, 165, 0), (255, 0, 0)],
        "period": 1.0,
    },
    "warp": {
        "colors": [(0, 0, 255), (0, 255, 255), (0, 255, 0), (0, 0, 255)],
        "period": 3.0,
    },
    "exit": {
        "colors": [(255, 0, 255), (255, 255, 255), (255, 0, 255)],
        "period": 3.0,
    },
}
