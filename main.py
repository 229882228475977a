import sys
import argparse
import logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

import pygame

from config import (
    WIDTH,
    HEIGHT,
    FPS,
    FIXED_TIMESTEP,
    MAX_FRAME_TIME,
    GAME_CONFIG_PATH,
)

from super_jeff.core.input import InputHandler, held_keys
from super_jeff.level.config_loader import load_game_config
from super_jeff.level.level_loader import LevelLoader, LevelLoadError
from super_jeff.systems.camera import Camera
from super_jeff.systems.session import Session
from super_jeff.systems.sound import SoundBoard
from super_jeff.ui.hud import draw_hud
from super_jeff.ui.renderer import WorldRenderer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Super Jeff")
    parser.add_argument("--fixed", action="store_true",
                        help="advance the simulation by a fixed 1/60 s per frame")
    parser.add_argument("--config", default=GAME_CONFIG_PATH, help="path to the tuning JSON")
    parser.add_argument("--level", default=None, help="path to an ASCII level file")
    return parser.parse_args(argv)


class Game:
    def __init__(self, args):
        self.tuning = load_game_config(args.config)
        if args.fixed:
            self.tuning.fixed_timestep = True
        level_path = args.level or self.tuning.level_path

        # Fail before opening a window if the level is unusable
        self.session = Session(LevelLoader(level_path), tuning=self.tuning)

        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Super Jeff")
        self.clock = pygame.time.Clock()
        self.camera = Camera((WIDTH, HEIGHT))
        self.renderer = WorldRenderer(self.camera)
        self.input_handler = InputHandler()
        self.sound = SoundBoard()
        self.sound.load()
        self.sound.play_music()
        self.running = True

    def start(self):
        self.session.start()

    def reset(self):
        try:
            self.session.reset()
        except LevelLoadError as e:
            logger.error("Reset failed, keeping current level: %s", e)

    def frame_time(self, measured: float) -> float:
        if self.tuning.fixed_timestep:
            return FIXED_TIMESTEP
        return min(measured, MAX_FRAME_TIME)

    def update(self, dt: float):
        sounds = self.session.update(dt, held_keys())
        self.sound.play(sounds)

    def draw(self):
        snapshot = self.session.snapshot()
        self.camera.follow(snapshot)
        self.renderer.draw(self.screen, snapshot)
        draw_hud(self, self.screen)

    def run(self):
        while self.running:
            dt = self.frame_time(self.clock.tick(FPS) / 1000.0)
            try:
                self.input_handler.process_events(self)
            except Exception:
                logger.exception('Input processing failed')

            self.update(dt)
            self.draw()

            pygame.display.flip()

        pygame.quit()


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        game = Game(args)
    except LevelLoadError as e:
        logger.error("Could not load level: %s", e)
        return 1
    game.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
