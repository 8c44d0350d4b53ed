import argparse
import logging
import sys

import pygame

from settings import WIDTH, HEIGHT, FPS, BACKGROUND_COLOR, DEFAULT_MAP, LOG_LEVEL

from core.camera import Camera
from core.errors import MapParseError
from core.input_manager import InputManager
from core.log_config import configure_logging, parse_level
from core.player_base import Player
from core.visibility import VisibilityConfig

from maps.map_base import CaveMap
from menus.title_menu import TitleMenu
from hud.cave_hud import CaveHud

from data.player_stats import PLAYER_STATS

logger = logging.getLogger(__name__)

TITLE_SCENE = "title"
CAVE_SCENE = "cave"


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--map", type=str, default=DEFAULT_MAP,
                        help="Cave map text file to load")
    parser.add_argument("--log-level", type=parse_level, default=LOG_LEVEL,
                        help="Logging level name or number (DEBUG, INFO, 10, ...)")
    parser.add_argument("--verbose-frames", action="store_true",
                        help="Also log per-frame tile and movement changes")
    args = parser.parse_args()

    configure_logging(args.log_level, args.verbose_frames)

    # -----------------------------
    # Load Map
    # -----------------------------
    try:
        cave_map = CaveMap.from_file(args.map)
    except (OSError, MapParseError) as exc:
        logger.error("Could not load map %s: %s", args.map, exc)
        sys.exit(1)

    pygame.init()

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()

    camera = Camera((WIDTH, HEIGHT))
    input_manager = InputManager()
    light_config = VisibilityConfig((WIDTH, HEIGHT))

    # -----------------------------
    # Create Player
    # -----------------------------
    player = Player(position=cave_map.spawn, stats=PLAYER_STATS)
    camera.follow(player)
    camera.update()
    cave_map.update_visibility(player.center, (WIDTH, HEIGHT), light_config)

    hud = CaveHud(player)

    scene = {"current": TITLE_SCENE, "running": True}

    def start_game():
        logger.info("Entering the cave")
        scene["current"] = CAVE_SCENE
        title.close()

    def quit_game():
        scene["running"] = False

    title = TitleMenu(on_start=start_game, on_quit=quit_game)
    title.open()

    elapsed = 0.0

    while scene["running"]:
        dt = clock.tick(FPS) / 1000.0
        elapsed += dt

        # -----------------------------
        # Events
        # -----------------------------
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                scene["running"] = False

        # -----------------------------
        # Input
        # -----------------------------
        input_manager.update()

        if input_manager.is_pressed("quit"):
            scene["running"] = False

        if scene["current"] == TITLE_SCENE:
            pygame.display.set_caption(f"Title: {clock.get_fps():.0f}")
            title.update(input_manager)
            title.draw(screen)
        else:
            pygame.display.set_caption(f"Cave: {clock.get_fps():.0f}")
            if input_manager.is_pressed("title"):
                scene["current"] = TITLE_SCENE
                title.open()
                continue

            # -----------------------------
            # Update
            # -----------------------------
            player.update(dt, input_manager, cave_map)
            camera.update(dt)
            cave_map.update_visibility(player.center, (WIDTH, HEIGHT), light_config)

            # -----------------------------
            # Draw
            # -----------------------------
            screen.fill(BACKGROUND_COLOR)
            cave_map.draw_floor(screen, camera, elapsed)
            cave_map.draw_objects(screen, camera, elapsed)
            player.draw(screen, camera, elapsed)
            cave_map.draw_walls(screen, camera, elapsed)
            cave_map.draw_visibility(screen, camera)
            hud.draw(screen)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
