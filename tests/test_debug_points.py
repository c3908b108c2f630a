import pygame

from zenpop.input.debug_points import DebugPointInjector

SIZE = (800, 600)


def _ev(kind, **kw):
    return pygame.event.Event(kind, **kw)


def test_points_only_while_held():
    inj = DebugPointInjector()
    assert inj.emit_points() == []
    inj.handle_pygame_event(_ev(pygame.MOUSEMOTION, pos=(5, 5), rel=(0, 0), buttons=(0, 0, 0)), SIZE)
    assert inj.emit_points() == []

    inj.handle_pygame_event(_ev(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20)), SIZE)
    assert [(p.x, p.y) for p in inj.emit_points()] == [(10.0, 20.0)]

    inj.handle_pygame_event(_ev(pygame.MOUSEMOTION, pos=(30, 40), rel=(20, 20), buttons=(1, 0, 0)), SIZE)
    assert [(p.x, p.y) for p in inj.emit_points()] == [(30.0, 40.0)]

    inj.handle_pygame_event(_ev(pygame.MOUSEBUTTONUP, button=1, pos=(30, 40)), SIZE)
    assert inj.emit_points() == []


def test_unmapped_button_is_ignored():
    inj = DebugPointInjector(buttons=("left",))
    inj.handle_pygame_event(_ev(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 20)), SIZE)
    assert inj.emit_points() == []


def test_touch_fingers_are_separate_points():
    inj = DebugPointInjector()
    inj.handle_pygame_event(_ev(pygame.FINGERDOWN, finger_id=1, x=0.5, y=0.5, touch_id=0), SIZE)
    inj.handle_pygame_event(_ev(pygame.FINGERDOWN, finger_id=2, x=0.25, y=0.0, touch_id=0), SIZE)
    assert sorted((p.x, p.y) for p in inj.emit_points()) == [(200.0, 0.0), (400.0, 300.0)]
    inj.handle_pygame_event(_ev(pygame.FINGERUP, finger_id=1, x=0.5, y=0.5, touch_id=0), SIZE)
    assert [(p.x, p.y) for p in inj.emit_points()] == [(200.0, 0.0)]


def test_focus_loss_and_disabled():
    inj = DebugPointInjector()
    inj.handle_pygame_event(_ev(pygame.MOUSEBUTTONDOWN, button=1, pos=(1, 2)), SIZE)
    inj.handle_pygame_event(_ev(pygame.WINDOWFOCUSLOST), SIZE)
    assert inj.emit_points() == []

    off = DebugPointInjector(enabled=False)
    off.handle_pygame_event(_ev(pygame.MOUSEBUTTONDOWN, button=1, pos=(1, 2)), SIZE)
    assert off.emit_points() == []
