from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Any, Tuple
from zenpop.api.config import EngineConfig


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    # shared services exposed to games (audio, counter, ...)
    resources: dict[str, Any]
    screen_size: Tuple[int, int]
