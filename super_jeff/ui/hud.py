"""
HUD drawing utilities for Super Jeff.
This module has one main entrypoint: `draw_hud(game, screen)` which draws the
score, the session timer and the start / game over / completion overlays.

Guidelines:
- Accept the Game instance and only read its attributes.
- Keep draw-only logic here; never mutate the session.
"""
import logging
import pygame

from config import WIDTH, HEIGHT, WHITE, YELLOW, RED, GREEN, OVERLAY
from ..core.utils import draw_text, format_time
from ..systems.session import SessionState

logger = logging.getLogger(__name__)


def _dim(screen: pygame.Surface) -> None:
    shade = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    shade.fill((*OVERLAY, 170))
    screen.blit(shade, (0, 0))


def draw_overlay(session, screen: pygame.Surface) -> None:
    cx, cy = WIDTH // 2, HEIGHT // 2
    state = session.state

    if state is SessionState.NOT_STARTED:
        _dim(screen)
        draw_text(screen, "SUPER JEFF", (cx, cy - 60), YELLOW, size=48, bold=True, center=True)
        draw_text(screen, "Press Enter to start", (cx, cy + 10), WHITE, size=24, center=True)
    elif state is SessionState.PLAYER_DEAD:
        _dim(screen)
        draw_text(screen, "GAME OVER", (cx, cy - 40), RED, size=48, bold=True, center=True)
        draw_text(screen, "Press R to try again", (cx, cy + 20), WHITE, size=24, center=True)
    elif state is SessionState.COMPLETED:
        _dim(screen)
        draw_text(screen, "THE MONKEY IS DOWN", (cx, cy - 90), GREEN, size=44, bold=True, center=True)
        draw_text(screen, f"Score  {session.score}", (cx, cy - 20), WHITE, size=24, center=True)
        draw_text(screen, f"Time  {format_time(session.final_time or 0.0)}  (+{session.time_bonus()})",
                  (cx, cy + 14), WHITE, size=24, center=True)
        draw_text(screen, f"Total  {session.final_score()}", (cx, cy + 56), YELLOW, size=30,
                  bold=True, center=True)
        draw_text(screen, "Press R to play again", (cx, cy + 110), WHITE, size=20, center=True)


def draw_hud(game, screen: pygame.Surface) -> None:
    """Draw HUD elements using `game`'s session.

    Args:
        game: The running Game instance (read-only for HUD purposes).
        screen: Pygame surface to draw onto.
    """
    session = game.session
    try:
        if session.started:
            draw_text(screen, f"SCORE {session.score:05d}", (16, 12), WHITE, size=22, bold=True)
            shown = session.final_time if session.final_time is not None else session.elapsed
            draw_text(screen, format_time(shown), (WIDTH - 90, 12), WHITE, size=22, bold=True)
        draw_overlay(session, screen)
    except pygame.error as e:
        logger.error("HUD draw failed: %s", e)
