import pygame
from config import WHITE


def sign(x):
    return (x > 0) - (x < 0)


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


def clamp_vector(vec: pygame.Vector2, limit) -> pygame.Vector2:
    """Clamp each component of vec to [-limit, limit] in place and return it."""
    vec.x = clamp(vec.x, -limit[0], limit[0])
    vec.y = clamp(vec.y, -limit[1], limit[1])
    return vec


def format_time(seconds: float) -> str:
    """Format seconds as m:ss."""
    secs = int(seconds)
    return f"{secs // 60}:{secs % 60:02d}"


# Lazy font getter to avoid init-order issues
_fonts = {}

def get_font(size=18, bold=False):
    key = (size, bold)
    if key not in _fonts:
        _fonts[key] = pygame.font.SysFont("consolas", size, bold=bold)
    return _fonts[key]

def draw_text(surf, text, pos, col=WHITE, size=18, bold=False, center=False):
    font = get_font(size=size, bold=bold)
    img = font.render(text, True, col)
    if center:
        pos = img.get_rect(center=pos).topleft
    surf.blit(img, pos)
