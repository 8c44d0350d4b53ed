import pygame


class Menu:
    def __init__(self, items, config=None):
        """
        items: list of (label, callback) tuples
        config: optional dict with normal_color, selected_color, font_size,
                item_spacing, title, title_size, bg_color
        """
        config = config or {}
        self.normal_color = config.get("normal_color", (255, 255, 255))
        self.selected_color = config.get("selected_color", (255, 69, 0))
        self.font_size = config.get("font_size", 64)
        self.item_spacing = config.get("item_spacing", 90)
        self.title = config.get("title")
        self.title_size = config.get("title_size", 110)
        self.bg_color = config.get("bg_color")

        self.items = items
        self.selected_index = 0
        self.active = False
        self.font = pygame.font.SysFont(None, self.font_size)
        self.title_font = pygame.font.SysFont(None, self.title_size)
        self.item_rects = []
        self._prev_click = False

    def open(self):
        self.active = True
        self.selected_index = 0
        pygame.mouse.set_visible(True)

    def close(self):
        self.active = False

    def update(self, input_manager):
        if not self.active:
            return

        # Keyboard navigation
        if input_manager.is_pressed("move_up"):
            self.selected_index = (self.selected_index - 1) % len(self.items)
        if input_manager.is_pressed("move_down"):
            self.selected_index = (self.selected_index + 1) % len(self.items)

        # Mouse hover detection
        mouse_pos = pygame.mouse.get_pos()
        for i, rect in enumerate(self.item_rects):
            if rect.collidepoint(mouse_pos):
                self.selected_index = i
                break

        if input_manager.is_pressed("confirm"):
            self._trigger(self.selected_index)
            return

        # Mouse click
        clicked = pygame.mouse.get_pressed()[0]
        if clicked and not self._prev_click:
            for i, rect in enumerate(self.item_rects):
                if rect.collidepoint(mouse_pos):
                    self._trigger(i)
                    break
        self._prev_click = clicked

    def _trigger(self, index):
        _, callback = self.items[index]
        if callback:
            callback()

    def draw(self, screen):
        if not self.active:
            return

        if self.bg_color:
            screen.fill(self.bg_color)
        else:
            # Semi-transparent overlay
            overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 150))
            screen.blit(overlay, (0, 0))

        screen_w, screen_h = screen.get_size()

        if self.title:
            title_surface = self.title_font.render(self.title, True, self.normal_color)
            screen.blit(title_surface, title_surface.get_rect(center=(screen_w // 2, screen_h // 4)))

        # Render menu items
        self.item_rects = []
        total_height = len(self.items) * self.item_spacing
        start_y = (screen_h - total_height) // 2 + self.item_spacing // 2

        for i, (label, _) in enumerate(self.items):
            color = self.selected_color if i == self.selected_index else self.normal_color
            text_surface = self.font.render(label, True, color)
            rect = text_surface.get_rect(center=(screen_w // 2, start_y + i * self.item_spacing))
            screen.blit(text_surface, rect)
            self.item_rects.append(rect)
