from core.hud_base import HudLayer, HudPanel, HudText

STATUS_COLOR = (255, 165, 0)


def status_text(player):
    return "Health: {}\nGold: {}\n{},{}".format(
        player.health, player.gold, *player.tile
    )


class CaveHud(HudLayer):
    """Status readout for the cave: health, gold and the player's tile."""

    def __init__(self, player):
        super().__init__()

        padding = 16
        panel = self.add(HudPanel(position=(0, 0), padding=padding))
        self.status = panel.add(HudText(
            position=(padding, padding),
            text_source=lambda: status_text(player),
            color=STATUS_COLOR,
            font_size=32,
        ))
