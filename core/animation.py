import pygame


def cycle_color(colors, period, time):
    """Color looping through keyframes, one full pass every period seconds."""
    if len(colors) == 1 or period <= 0:
        return pygame.Color(colors[0])

    t = (time % period) / period * (len(colors) - 1)
    i = min(int(t), len(colors) - 2)
    return pygame.Color(colors[i]).lerp(colors[i + 1], t - i)


class Tween:
    """One-shot linear move between two points."""

    def __init__(self, start, end, duration):
        self.start = pygame.Vector2(start)
        self.end = pygame.Vector2(end)
        self.duration = duration
        self.elapsed = 0.0

    def update(self, dt):
        self.elapsed = min(self.duration, self.elapsed + dt)

    def done(self):
        return self.elapsed >= self.duration

    def value(self):
        if self.duration <= 0:
            return pygame.Vector2(self.end)
        return self.start.lerp(self.end, self.elapsed / self.duration)
