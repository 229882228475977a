"""Sound board: plays the cues the simulation emits each frame."""

import logging
import os
from typing import Dict, Iterable, Optional

import pygame

from config import SOUND_DIR, MUSIC_PATH, MUSIC_VOLUME
from ..core.constants import SoundEffect

logger = logging.getLogger(__name__)


class SoundBoard:
    """Registry of loaded effects. Missing files are skipped, never fatal."""

    def __init__(self, sound_dir: str = SOUND_DIR, music_path: Optional[str] = MUSIC_PATH):
        self.sound_dir = sound_dir
        self.music_path = music_path
        self.registry: Dict[SoundEffect, pygame.mixer.Sound] = {}
        self.enabled = False

    def load(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=1024)
            pygame.mixer.set_num_channels(8)
        except pygame.error as e:
            logger.warning("Audio unavailable, continuing without sound: %s", e)
            return

        self.enabled = True
        for effect in SoundEffect:
            path = os.path.join(self.sound_dir, f"{effect.value}.wav")
            try:
                self.registry[effect] = pygame.mixer.Sound(path)
            except (pygame.error, FileNotFoundError) as e:
                logger.warning("Failed to load sound %s: %s", path, e)

    def play_music(self) -> None:
        if not self.enabled or not self.music_path:
            return
        try:
            pygame.mixer.music.load(self.music_path)
            pygame.mixer.music.set_volume(MUSIC_VOLUME)
            pygame.mixer.music.play(-1)
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Failed to play music %s: %s", self.music_path, e)

    def play(self, sounds: Iterable[SoundEffect]) -> None:
        for effect in sounds:
            sound = self.registry.get(effect)
            if sound is not None:
                sound.play()
