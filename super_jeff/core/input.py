"""
Input handling for Super Jeff.

Two jobs:
- turn the keyboard state into the held-key snapshot the simulation reads
- route one-shot hotkeys (quit, start, reset, fullscreen) to the game

Design:
- The simulation never sees pygame key codes, only `Key` values.
- Unknown keys are ignored.
"""
import logging
from typing import FrozenSet, Iterable

import pygame

from .constants import Key

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_a: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_d: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_s: Key.DOWN,
    pygame.K_SPACE: Key.JUMP,
    pygame.K_UP: Key.JUMP,
    pygame.K_w: Key.JUMP,
}


def map_keys(pressed_codes: Iterable[int]) -> FrozenSet[Key]:
    """Map held pygame key codes to logical keys."""
    return frozenset(KEY_BINDINGS[code] for code in pressed_codes if code in KEY_BINDINGS)


def held_keys() -> FrozenSet[Key]:
    """Snapshot of the logical keys currently held down."""
    pressed = pygame.key.get_pressed()
    return map_keys(code for code in KEY_BINDINGS if pressed[code])


class InputHandler:
    """Centralized event processing.

    Usage:
        handler = InputHandler()
        handler.process_events(game)
    """

    def process_events(self, game) -> None:
        """Process pygame events and invoke game actions."""
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                game.running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    game.running = False
                elif ev.key == pygame.K_r:
                    game.reset()
                elif ev.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    game.start()
