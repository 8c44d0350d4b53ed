import pygame

from settings import WIDTH, HEIGHT


class Camera:
    def __init__(self, screen_size=(WIDTH, HEIGHT)):
        self.offset = pygame.Vector2(0, 0)
        self.target = None
        self.screen_size = pygame.Vector2(screen_size)

    # -------------------------
    # Public API
    # -------------------------

    def follow(self, target):
        """Set the target to follow. Target must have a .center attribute."""
        self.target = target

    def update(self, dt=0.0):
        """
        Keep the target in the middle of the screen.
        """
        if self.target:
            self.offset = self.screen_size / 2 - self.target.center
        else:
            self.offset.update(0, 0)

    def view_center(self):
        """World position at the middle of the screen."""
        return self.screen_size / 2 - self.offset

    def apply(self, position):
        """
        Apply camera offset to a world position.
        """
        return position + self.offset
