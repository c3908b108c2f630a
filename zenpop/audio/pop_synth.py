from __future__ import annotations
import logging
import random
from typing import Optional

import numpy as np
import pygame

log = logging.getLogger(__name__)

SAMPLE_RATE = 44100
DURATION_SEC = 0.2
SWEEP_SEC = 0.15        # pitch falls over this long
DECAY_SEC = 0.1         # gain falls to FLOOR over this long
FLOOR = 0.01
BASE_FREQ_RANGE = (400.0, 600.0)
DETUNE_CENTS = 500.0


def render_pop(volume: float = 0.5, rng: Optional[random.Random] = None, pitch: float = 1.0,
               sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    One "pop": a sine whose pitch drops exponentially from a random base
    frequency, under a fast exponential gain decay. Returns int16 mono samples.
    """
    rng = rng or random.Random()
    base = rng.uniform(*BASE_FREQ_RANGE) * pitch
    base *= 2.0 ** (rng.uniform(-DETUNE_CENTS, DETUNE_CENTS) / 1200.0)

    n = int(sample_rate * DURATION_SEC)
    t = np.arange(n, dtype=np.float64) / sample_rate

    # exponential ramps, held at the end value once the ramp is done
    sweep = np.minimum(t / SWEEP_SEC, 1.0)
    freq = base * (FLOOR / base) ** sweep
    phase = 2.0 * np.pi * np.cumsum(freq) / sample_rate

    volume = float(np.clip(volume, FLOOR, 1.0))
    decay = np.minimum(t / DECAY_SEC, 1.0)
    gain = volume * (FLOOR / volume) ** decay

    wave = np.sin(phase) * gain
    return (wave * 32767).astype(np.int16)


class PopSynth:
    """Plays rendered pops through pygame.mixer; silent if the mixer is down."""

    def __init__(self, volume: float = 0.5, seed: Optional[int] = None):
        self.volume = volume
        self.rng = random.Random(seed)

    @property
    def available(self) -> bool:
        return bool(pygame.mixer.get_init())

    def play(self, volume: Optional[float] = None, pitch: float = 1.0) -> None:
        init = pygame.mixer.get_init()
        if not init:
            return
        freq, _, channels = init
        samples = render_pop(self.volume if volume is None else volume, self.rng, pitch, freq)
        if channels > 1:
            samples = np.repeat(samples[:, None], channels, axis=1)
        sound = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
        sound.play()
