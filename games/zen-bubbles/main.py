from __future__ import annotations
import random
from typing import List, Optional

import pygame

from zenpop.api import Game, FrameData, Point
from zenpop.app.context import Context
from zenpop.audio.pop_synth import PopSynth
from zenpop.field.field import Field
from zenpop.render.backdrop import draw_backdrop
from zenpop.render.shapes import draw_bubble, draw_hand, draw_text, draw_text_centered
from zenpop.sync.counter import CounterFlusher, PopCounter, YamlCounterStore

from .const import *


class ZenBubbles(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        opts = manifest.get("options", {})

        seed = opts.get("seed")
        self.rng = random.Random(seed)
        self.golden_bonus = int(opts.get("golden_bonus", GOLDEN_BONUS))
        self.backdrop_alpha = float(opts.get("backdrop_alpha", BACKDROP_ALPHA))

        self.field = Field(
            self,
            tile_radius=float(opts.get("tile_radius", TILE_RADIUS)),
            hit_multiplier=float(opts.get("hit_multiplier", HIT_MULTIPLIER)),
            pop_step=float(opts.get("pop_step", POP_STEP)),
            golden_probability=float(opts.get("golden_probability", GOLDEN_PROBABILITY)),
            rng=self.rng,
        )
        self.field.resize(*ctx.screen_size)

        self.audio = ctx.resources.get("audio") or PopSynth(volume=POP_VOLUME, seed=seed)
        self.counter = PopCounter()
        store = ctx.resources.get("counter_store") or YamlCounterStore(
            opts.get("counter_name", COUNTER_NAME))
        self.flusher = CounterFlusher(
            self.counter, store, float(opts.get("flush_period_sec", FLUSH_PERIOD_SEC)))
        self.flusher.start()

        self.session_pops = 0
        self.quote: Optional[str] = None
        self.quote_until_ms = 0
        self.tips: List[Point] = []
        self.hands: List[List[Point]] = []
        self.camera_frame = None

    # ------------- pop listener -------------
    def on_pop(self) -> None:
        self.counter.record(1)
        self.session_pops += 1
        self.audio.play()

    def on_golden_pop(self) -> None:
        self.counter.record(self.golden_bonus)
        self.session_pops += self.golden_bonus
        self.audio.play(pitch=GOLDEN_PITCH)
        self.quote = self.rng.choice(QUOTES)
        self.quote_until_ms = pygame.time.get_ticks() + QUOTE_MS

    # ------------- loop hooks -------------
    def on_resize(self, size) -> None:
        self.field.resize(*size)

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        self.tips = frame.points_by_source.get("hand", [])
        self.hands = frame.hands
        self.camera_frame = frame.camera_frame
        self.field.advance(frame.all_points())

        if self.quote and pygame.time.get_ticks() >= self.quote_until_ms:
            self.quote = None

    def on_draw(self, surface: pygame.Surface) -> None:
        draw_backdrop(surface, self.camera_frame, self.backdrop_alpha, mirror=self.ctx.cfg.mirror)

        for sprite in self.field.snapshot():
            draw_bubble(surface, sprite)

        for hand in self.hands:
            draw_hand(surface, [(p.x, p.y) for p in hand], SKELETON_COLOR)
        for p in self.tips:
            pygame.draw.circle(surface, TIP_COLOR, (int(p.x), int(p.y)), 8, width=2)

        draw_text(surface, f"Global Pops: {self.flusher.last_total + self.counter.pending:,}",
                  (20, 16), HUD_ACCENT, size=28)
        draw_text(surface, f"This session: {self.session_pops}", (20, 46), HUD_COLOR, size=22)

        if self.quote:
            w, h = surface.get_size()
            draw_text_centered(surface, self.quote, (w // 2, h // 2), (255, 255, 255), size=40)

    def on_event(self, event: pygame.event.Event) -> None:
        # R regenerates the field
        if event.type == pygame.KEYDOWN and event.key == pygame.K_r:
            self.field.resize(*self.ctx.screen_size)

    def on_unload(self) -> None:
        self.flusher.stop()


def get_game():
    return ZenBubbles()
