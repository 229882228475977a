"""World renderer: draws a WorldSnapshot through the camera as flat rects."""

import pygame

from config import BG, TILE_COL, ACCENT, RED, YELLOW, GREEN, CYAN, TEXT_COL

MONKEY_COL = (139, 94, 60)
ENEMY_COL = (120, 80, 160)
TRAP_COL = (200, 60, 60)


class WorldRenderer:
    """Draws tiles, bodies and the trap line. Never mutates the snapshot."""

    def __init__(self, camera):
        self.camera = camera

    def _rect(self, view) -> pygame.Rect:
        return self.camera.to_screen_rect(view.position, view.sides)

    def _visible(self, screen: pygame.Surface, rect: pygame.Rect) -> bool:
        return rect.colliderect(screen.get_rect())

    def draw(self, screen: pygame.Surface, snapshot) -> None:
        screen.fill(BG)

        for tile in snapshot.tiles:
            rect = self._rect(tile)
            if self._visible(screen, rect):
                pygame.draw.rect(screen, TILE_COL, rect)

        if snapshot.trapped:
            top = self.camera.to_screen((snapshot.trap_x, snapshot.max_bounds[1]))
            bottom = self.camera.to_screen((snapshot.trap_x, snapshot.min_bounds[1]))
            pygame.draw.line(screen, TRAP_COL, top, bottom, 2)

        for enemy in snapshot.enemies:
            if enemy.dead:
                continue
            self._draw_body(screen, enemy, ENEMY_COL)

        monkey = snapshot.monkey
        if not monkey.dead:
            self._draw_body(screen, monkey, RED if monkey.enraged else MONKEY_COL)

        for banana in snapshot.bananas:
            pygame.draw.ellipse(screen, YELLOW, self._rect(banana))

        player = snapshot.player
        col = TEXT_COL if player.dead else (CYAN if player.grounded else GREEN)
        self._draw_body(screen, player, col)

    def _draw_body(self, screen: pygame.Surface, view, col) -> None:
        rect = self._rect(view)
        if not self._visible(screen, rect):
            return
        pygame.draw.rect(screen, col, rect, border_radius=4)
        # eye marks facing
        eye_x = rect.left + rect.width // 4 if view.facing_left else rect.right - rect.width // 4
        pygame.draw.circle(screen, ACCENT, (eye_x, rect.top + max(3, rect.height // 5)),
                           max(2, rect.width // 8))
