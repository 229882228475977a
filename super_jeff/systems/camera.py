import pygame
from config import WIDTH, HEIGHT, CAMERA_WIDTH, CAMERA_HEIGHT

from ..core.utils import clamp


class Camera:
    """Maps world units (y up) to screen pixels (y down)."""

    def __init__(self, screen_size=(WIDTH, HEIGHT), view=(CAMERA_WIDTH, CAMERA_HEIGHT)):
        self.x = 0.0
        self.y = 0.0
        self.view_w, self.view_h = view
        self.screen_w, self.screen_h = screen_size

    def scale(self) -> float:
        """Pixels per world unit."""
        return self.screen_w / self.view_w

    def recenter(self, position, max_bounds):
        """Centre on position, clamped so the view never leaves the level."""
        max_x = max(0.0, max_bounds[0] - self.view_w / 2)
        max_y = max(0.0, max_bounds[1] - self.view_h / 2)
        self.x = clamp(position[0], -max_x, max_x)
        self.y = clamp(position[1], -max_y, max_y)

    def lock_to_arena(self, max_bounds):
        """Pin the view to the bottom-right corner of the level."""
        self.x = max(0.0, max_bounds[0] - self.view_w / 2)
        self.y = -max(0.0, max_bounds[1] - self.view_h / 2)

    def follow(self, snapshot):
        if snapshot.trapped:
            self.lock_to_arena(snapshot.max_bounds)
        else:
            self.recenter(snapshot.player.position, snapshot.max_bounds)

    def to_screen(self, p):
        px = self.screen_w / 2 + self.screen_w * (p[0] - self.x) / self.view_w
        py = self.screen_h / 2 - self.screen_h * (p[1] - self.y) / self.view_h
        return (int(px), int(py))

    def to_screen_rect(self, position, sides) -> pygame.Rect:
        scale = self.scale()
        rect = pygame.Rect(0, 0, int(sides[0] * scale), int(sides[1] * scale))
        rect.center = self.to_screen(position)
        return rect
