from __future__ import annotations
import logging
import time
import pygame

from zenpop.api.config import EngineConfig
from zenpop.api.frame_data import FrameData
from zenpop.app.context import Context
from zenpop.app.loader import load_game_manifest, load_game_module, resolve_game_root
from zenpop.input.debug_points import DebugPointInjector
from zenpop.input.pointer_normalizer import PointerNormalizer
from zenpop.video.camera import Camera

log = logging.getLogger(__name__)

STALE_AFTER_SEC = 0.5


def collect_frame(tracker, normalizer: PointerNormalizer, injector: DebugPointInjector,
                  screen_size: tuple[int, int]) -> FrameData:
    """
    Build this tick's FrameData from the newest hand result (never waiting
    for one) and the held mouse/touch pointers.
    """
    frame = FrameData(timestamp=time.time())
    result = tracker.latest.get(max_age=STALE_AFTER_SEC) if tracker is not None else None
    if result is not None:
        frame.points_by_source["hand"] = normalizer.normalize_many(
            result.tips, result.frame_size, screen_size)
        frame.hands = [normalizer.normalize_many(h, result.frame_size, screen_size)
                       for h in result.hands]
        frame.camera_frame = result.frame
    mouse = injector.emit_points()
    if mouse:
        frame.points_by_source["mouse"] = mouse
    return frame


def run_game(game_id: str, cfg: EngineConfig):
    game_root = resolve_game_root(game_id)
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    pygame.display.set_caption(f"Zen Pop - {manifest.get('name', game_id)}")
    screen = pygame.display.set_mode(cfg.screen_size, pygame.RESIZABLE)
    clock = pygame.time.Clock()
    screen_size = screen.get_size()

    cam = None
    tracker = None
    if cfg.hands:
        # mediapipe is an optional extra; only needed when tracking hands
        from zenpop.input.hand_tracker import HandTracker, INDEX_FINGER_TIP

        cam = Camera(index=cfg.cam_index)
        if not cam.open():
            log.error("Could not open camera %d", cfg.cam_index)
            if not cfg.mouse:
                pygame.quit()
                return
            log.warning("Continuing with mouse input only")
            cam = None
        else:
            landmarks = manifest["input"].get("landmarks", [INDEX_FINGER_TIP])
            tracker = HandTracker(cam, max_hands=cfg.max_hands, landmarks=landmarks)
            tracker.start()

    normalizer = PointerNormalizer(mirror=cfg.mirror)
    injector = DebugPointInjector(enabled=cfg.mouse or bool(manifest["input"].get("mouse", False)))

    ctx = Context(
        screen=screen,
        clock=clock,
        cfg=cfg,
        resources={},
        screen_size=screen_size,
    )

    game.on_load(ctx, manifest)
    log.info("Running %s at %dx%d", game_id, *screen_size)

    running = True
    try:
        while running:
            dt = clock.tick(cfg.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen_size = (max(1, event.w), max(1, event.h))
                    ctx.screen = pygame.display.get_surface()
                    ctx.screen_size = screen_size
                    game.on_resize(screen_size)
                injector.handle_pygame_event(event, screen_size)
                game.on_event(event)

            frame_data = collect_frame(tracker, normalizer, injector, screen_size)

            ctx.screen.fill((15, 23, 42))
            game.on_update(dt, frame_data)
            game.on_draw(ctx.screen)
            pygame.display.flip()
    finally:
        if tracker is not None:
            tracker.stop()
        if cam is not None:
            cam.close()
        game.on_unload()
        pygame.quit()
