import math

import pygame


class Segment:
    """Oriented wall edge used for both collision and light occlusion.

    The normal points to the right of begin -> end in screen space
    (y down), which for boundary edges is the open side. Rays only
    stop on a segment when they approach from the normal side.
    """

    def __init__(self, begin, end, flipped=False):
        self.begin = pygame.Vector2(begin)
        self.end = pygame.Vector2(end)
        self.flipped = flipped

    def __repr__(self):
        flag = ", flipped" if self.flipped else ""
        return (f"Segment(({self.begin.x:g}, {self.begin.y:g}) -> "
                f"({self.end.x:g}, {self.end.y:g}){flag})")

    def axis(self):
        direction = self.end - self.begin
        if direction.length_squared() == 0:
            return pygame.Vector2(0, 0)
        return direction.normalize()

    def length(self):
        return self.begin.distance_to(self.end)

    def normal(self):
        axis = self.axis()
        normal = pygame.Vector2(axis.y, -axis.x)
        return -normal if self.flipped else normal

    def reverse_normal(self):
        """Copy with the blocking side swapped; endpoints are unchanged."""
        return Segment(self.begin, self.end, not self.flipped)

    def key(self):
        """Hashable endpoint pair, for comparing segment sets."""
        return ((self.begin.x, self.begin.y), (self.end.x, self.end.y))

    def contains_point(self, point, tolerance=1e-6):
        """True if point lies on the segment (within tolerance)."""
        point = pygame.Vector2(point)
        length = self.length()
        if length == 0:
            return point.distance_to(self.begin) <= tolerance
        offset = point - self.begin
        along = offset.dot(self.axis())
        across = abs(offset.cross(self.axis()))
        return -tolerance <= along <= length + tolerance and across <= tolerance

    def intersect_ray(self, origin, direction):
        """Intersect ray origin + t*direction with this segment.

        Returns (t, point) or None. Segments seen from behind or edge-on
        never block.
        """
        if direction.dot(self.normal()) >= 0:
            return None

        px, py = origin
        rdx, rdy = direction
        ax, ay = self.begin
        sdx = self.end.x - ax
        sdy = self.end.y - ay

        denom = rdx * sdy - rdy * sdx
        if abs(denom) < 1e-10:
            return None

        t = ((ax - px) * sdy - (ay - py) * sdx) / denom
        u = ((ax - px) * rdy - (ay - py) * rdx) / denom

        if t >= 0 and 0 <= u <= 1:
            return t, pygame.Vector2(px + rdx * t, py + rdy * t)
        return None


class RayHit:
    def __init__(self, point, segment, distance):
        self.point = point
        self.segment = segment
        self.distance = distance


def angle_vector(angle):
    return pygame.Vector2(math.cos(angle), math.sin(angle))


def raycast(origin, direction, segments):
    """Nearest forward hit of a ray against segments, or None."""
    origin = pygame.Vector2(origin)
    direction = pygame.Vector2(direction)

    closest = None
    for segment in segments:
        hit = segment.intersect_ray(origin, direction)
        if hit is None:
            continue
        t, point = hit
        if closest is None or t < closest.distance:
            closest = RayHit(point, segment, t)
    return closest
