from settings import TITLE_BACKGROUND_COLOR
from core.menu_base import Menu


class TitleMenu(Menu):
    """Title screen. on_start/on_quit are called when an item is chosen."""

    def __init__(self, on_start, on_quit, config=None):
        config = dict(config or {})
        config.setdefault("title", "Cave Escape")
        config.setdefault("bg_color", TITLE_BACKGROUND_COLOR)
        items = [
            ("Start Game", on_start),
            ("Exit Game", on_quit),
        ]
        super().__init__(items, config)
