import pygame


class HudElement:
    """Base class for HUD pieces, positioned relative to their parent."""

    def __init__(self, position=(0, 0), size=(0, 0)):
        self.rel_pos = pygame.Vector2(position)
        self.size = pygame.Vector2(size)
        self.visible = True

    def get_rect(self, parent_offset=(0, 0)):
        x, y = self.rel_pos + pygame.Vector2(parent_offset)
        return pygame.Rect(round(x), round(y), round(self.size.x), round(self.size.y))

    def draw(self, screen, parent_offset=(0, 0)):
        pass


class HudText(HudElement):
    """Block of text lines re-read from text_source every draw.

    text_source: callable returning a string; "\\n" starts a new line.
    """

    def __init__(self, position=(0, 0), text_source=None,
                 color=(255, 255, 255), font_size=24, line_spacing=4):
        self._font = pygame.font.SysFont(None, font_size)
        self.text_source = text_source or (lambda: "")
        self.color = color
        self.line_height = self._font.get_linesize() + line_spacing
        super().__init__(position, self._measure(self.text_source()))

    def lines(self):
        return self.text_source().split("\n")

    def _measure(self, text):
        lines = text.split("\n")
        width = max(self._font.size(line)[0] for line in lines)
        return width, self.line_height * len(lines)

    def draw(self, screen, parent_offset=(0, 0)):
        if not self.visible:
            return
        pos = self.rel_pos + pygame.Vector2(parent_offset)
        for i, line in enumerate(self.lines()):
            surface = self._font.render(line, True, self.color)
            screen.blit(surface, pos + (0, i * self.line_height))


class HudPanel(HudElement):
    """Translucent box that sizes itself around its children plus padding."""

    def __init__(self, position=(0, 0), padding=12, bg_color=(0, 0, 0, 120)):
        super().__init__(position)
        self.padding = padding
        self.bg_color = bg_color
        self.children = []

    def add(self, element):
        self.children.append(element)
        right = max(c.rel_pos.x + c.size.x for c in self.children)
        bottom = max(c.rel_pos.y + c.size.y for c in self.children)
        self.size.update(right + self.padding, bottom + self.padding)
        return element

    def draw(self, screen, parent_offset=(0, 0)):
        if not self.visible:
            return
        rect = self.get_rect(parent_offset)

        surf = pygame.Surface(rect.size, pygame.SRCALPHA)
        surf.fill(self.bg_color)
        screen.blit(surf, rect.topleft)

        for child in self.children:
            child.draw(screen, rect.topleft)


class HudLayer:
    """Holds the top-level HUD elements and draws them in order."""

    def __init__(self):
        self.elements = []

    def add(self, element):
        self.elements.append(element)
        return element

    def draw(self, screen):
        for element in self.elements:
            element.draw(screen)
