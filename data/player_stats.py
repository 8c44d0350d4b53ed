# data/player_stats.py

PLAYER_STATS = {
    "start_health": 5,
    "freeze_time": 0.15,
    "corner_radius": 4,
    "colors": [(0, 0, 255), (0, 255, 255), (0, 0, 255)],
    "color_period": 3.0,
}
