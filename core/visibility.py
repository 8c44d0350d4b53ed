import math

import pygame

from settings import (
    WIDTH, HEIGHT, LIGHT_CULL_FACTOR, LIGHT_RAY_EPSILON,
    LIGHT_OUTLINE_THICKNESS, LIGHT_MARKER_SIZE,
)
from core.geometry import angle_vector, raycast


class VisibilityConfig:
    def __init__(self, screen_size=(WIDTH, HEIGHT),
                 cull_factor=LIGHT_CULL_FACTOR, epsilon=LIGHT_RAY_EPSILON,
                 outline_thickness=LIGHT_OUTLINE_THICKNESS,
                 marker_size=LIGHT_MARKER_SIZE):
        self.screen_size = pygame.Vector2(screen_size)
        self.cull_factor = cull_factor
        self.epsilon = epsilon
        self.outline_thickness = outline_thickness
        self.marker_size = marker_size

    @property
    def cull_extent(self):
        return self.screen_size * self.cull_factor


class LightMesh:
    """Lit region around a viewpoint: fan triangles, outline and markers.

    Drawn with a transparent color into a darkness overlay it punches out
    the visible area; the outline and markers soften the edge.
    """

    def __init__(self, origin, ring, outline_thickness, marker_size):
        self.origin = pygame.Vector2(origin)
        self.ring = ring
        self.outline_thickness = outline_thickness

        n = len(ring)
        self.triangles = []
        if n >= 3:
            for i in range(n):
                self.triangles.append(
                    (self.origin, ring[i], ring[(i + 1) % n])
                )

        self.outline = list(ring) if n >= 2 else []

        half = marker_size / 2
        self.markers = [
            pygame.Rect(round(p.x - half), round(p.y - half),
                        marker_size, marker_size)
            for p in ring
        ]

    def is_empty(self):
        return not self.ring

    def area(self):
        total = 0.0
        for a, b, c in self.triangles:
            total += abs((b - a).cross(c - a)) / 2
        return total

    def draw(self, surface, offset=(0, 0), color=(0, 0, 0, 0)):
        offset = pygame.Vector2(offset)
        for triangle in self.triangles:
            pygame.draw.polygon(surface, color, [p + offset for p in triangle])

        if self.outline:
            width = max(1, round(self.outline_thickness))
            pygame.draw.lines(surface, color, True,
                              [p + offset for p in self.outline], width)

        shift = (round(offset.x), round(offset.y))
        for rect in self.markers:
            pygame.draw.rect(surface, color, rect.move(shift))


def cull_targets(origin, segments, config):
    """Begin points of segments inside the cull box around origin."""
    cull = config.cull_extent
    return [
        s.begin for s in segments
        if abs(s.begin.x - origin.x) <= cull.x
        and abs(s.begin.y - origin.y) <= cull.y
    ]


def compute_visibility_polygon(origin, segments, config=None):
    """Cast rays just either side of each segment's begin point.

    Returns the hit points sorted by angle around origin (ties by
    distance), forming a polygon that is star-shaped around origin.
    Only begin points are targeted, so a silhouette corner that is
    solely an end point is sampled only by neighbouring rays.
    """
    config = config or VisibilityConfig()
    origin = pygame.Vector2(origin)

    hits = []
    for target in cull_targets(origin, segments, config):
        angle = math.atan2(target.y - origin.y, target.x - origin.x)
        for ray_angle in (angle - config.epsilon, angle + config.epsilon):
            hit = raycast(origin, angle_vector(ray_angle), segments)
            if hit is not None:
                hits.append(hit.point)

    hits.sort(key=lambda p: (
        math.atan2(p.y - origin.y, p.x - origin.x),
        origin.distance_squared_to(p),
    ))
    return hits


def build_light_mesh(origin, ring, config=None):
    config = config or VisibilityConfig()
    return LightMesh(origin, ring, config.outline_thickness, config.marker_size)


def build_visibility(origin, segments, config=None):
    """Visibility polygon from origin against segments, as a LightMesh."""
    config = config or VisibilityConfig()
    ring = compute_visibility_polygon(origin, segments, config)
    return build_light_mesh(origin, ring, config)


def point_in_polygon(x, y, polygon):
    """Ray-casting point-in-polygon test."""
    n = len(polygon)
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside
