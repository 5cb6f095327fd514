import logging
import random

import numpy as np
import pygame

from config import EAT_SOUND_DURATION, EAT_SOUND_FREQUENCIES, SOUND_VOLUME

logger = logging.getLogger(__name__)


def make_sine_sound(freq=440, duration=0.12, volume=0.2, sample_rate=44100):
    """Generate a pygame Sound with a sine wave tone."""
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    wave = 0.5 * np.sin(2 * np.pi * freq * t)
    # Apply quick envelope
    env = np.ones_like(wave)
    attack = int(0.01 * sample_rate)
    release = int(0.03 * sample_rate)
    env[:attack] = np.linspace(0, 1, attack)
    env[-release:] = np.linspace(1, 0, release)
    wave = wave * env * volume
    wave = (wave * (2**15 - 1)).astype(np.int16)
    stereo = np.column_stack([wave, wave])
    return pygame.sndarray.make_sound(stereo)


class SoundPool:
    """A fixed set of tones; ``play_random`` picks one per call.

    Pass ``sounds`` to use ready-made sounds instead of generating tones,
    which skips mixer setup entirely.
    """

    def __init__(self, frequencies=EAT_SOUND_FREQUENCIES, duration=EAT_SOUND_DURATION,
                 volume=SOUND_VOLUME, rng=None, sounds=None):
        self.rng = rng if rng is not None else random.Random()
        if sounds is not None:
            self.sounds = list(sounds)
            return

        self.sounds = []
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=44100, channels=2)
            self.sounds = [make_sine_sound(f, duration, volume) for f in frequencies]
        except pygame.error as exc:
            logger.warning("Audio unavailable, running silently: %s", exc)

    def play_random(self):
        if not self.sounds:
            return None
        sound = self.rng.choice(self.sounds)
        sound.play()
        return sound
