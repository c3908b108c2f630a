import math
import random

import pytest

from zenpop.api.frame_data import Point
from zenpop.field.bubble import BubbleKind, BubbleState, POP_GROWTH
from zenpop.field.field import Field, generate, grid_centers, GAP_RATIO


def _positions(bubbles):
    return [(b.id, b.x, b.y, b.radius) for b in bubbles]


@pytest.mark.parametrize("w,h", [(1, 1), (400, 400), (1280, 720), (333, 97)])
def test_positions_depend_only_on_geometry(w, h):
    a = generate(w, h, 40, random.Random(1))
    b = generate(w, h, 40, random.Random(2))
    assert a
    assert _positions(a) == _positions(b)


def test_grid_covers_surface_with_margin():
    centers = grid_centers(400, 400, 40)
    xs = [x for _, _, x, _ in centers]
    ys = [y for _, _, _, y in centers]
    assert min(xs) >= -40 and max(xs) <= 440
    assert min(ys) >= -40 and max(ys) <= 440
    # odd rows interlock with even rows
    row0 = sorted(x for r, _, x, _ in centers if r == 0)
    row1 = sorted(x for r, _, x, _ in centers if r == 1)
    assert row0[1] - row0[0] == pytest.approx(80)
    assert (row1[0] - row0[0]) % 80 == pytest.approx(40)
    for r, _, _, y in centers:
        assert y == pytest.approx(r * 40 * math.sqrt(3))


def test_neighbours_keep_a_gap():
    bubbles = generate(400, 400, 40, random.Random(0))
    r = bubbles[0].radius
    assert r == pytest.approx(40 * (1 - GAP_RATIO))
    for i, a in enumerate(bubbles):
        for b in bubbles[i + 1:]:
            assert math.hypot(a.x - b.x, a.y - b.y) > 2 * r


def test_ids_are_unique_and_row_major():
    bubbles = generate(400, 400, 40, random.Random(0))
    ids = [b.id for b in bubbles]
    assert len(ids) == len(set(ids))
    assert ids[0] == "0-0"
    rows = [int(i.split("-")[0]) for i in ids]
    assert rows == sorted(rows)


@pytest.mark.parametrize("w,h", [(0, 400), (400, 0), (-5, 100), (0, 0)])
def test_degenerate_sizes_give_empty_field(w, h):
    f = Field(seed=1)
    f.resize(w, h)
    assert f.bubbles == []
    assert f.advance([Point(0, 0)]) == []


def test_golden_probability_extremes():
    assert all(b.kind is BubbleKind.Golden for b in generate(200, 200, 40, random.Random(3), 1.0))
    assert all(b.kind is BubbleKind.Normal for b in generate(200, 200, 40, random.Random(3), 0.0))


def test_same_seed_same_kinds_and_colours():
    a = generate(640, 480, 40, random.Random(9))
    b = generate(640, 480, 40, random.Random(9))
    assert [(x.kind, x.color) for x in a] == [(y.kind, y.color) for y in b]


def test_normal_colours_are_cool_hues():
    for b in generate(640, 480, 40, random.Random(5), 0.0):
        r, g, bl = b.color
        assert bl >= r and bl >= g


def test_miss_causes_no_change(listener):
    f = Field(listener, seed=1)
    f.resize(400, 400)
    b = f.bubbles[0]
    # just outside the forgiving hit box
    far = b.radius * f.hit_multiplier + 0.5
    popped = f.advance([Point(b.x - far, b.y)])
    assert popped == []
    assert listener.events == []
    assert f.count(BubbleState.Alive) == len(f.bubbles)


def test_hit_box_edge_is_inclusive(listener):
    f = Field(listener, seed=1, hit_multiplier=1.0)
    f.resize(400, 400)
    b = f.bubbles[0]
    f.advance([(b.x + b.radius, b.y)])
    assert b.state is BubbleState.Popping


def test_single_pointer_pops_once_and_is_removed(listener):
    f = Field(listener, seed=1, golden_probability=0.0, pop_step=0.1)
    f.resize(400, 400)
    target = f.bubbles[0]
    for _ in range(10):
        f.advance([Point(target.x, target.y)])
    assert listener.events == ["pop"]
    assert target.state is BubbleState.Popping
    assert target.progress == pytest.approx(0.9)

    f.advance([Point(target.x, target.y)])
    assert target.state is BubbleState.Removed
    assert target.progress == 1.0
    assert target.visual_scale == pytest.approx(1 + POP_GROWTH)
    assert listener.events == ["pop"]
    assert all(s.id != target.id for s in f.snapshot())


def test_animation_runs_without_pointers():
    f = Field(seed=1, pop_step=0.25)
    f.resize(400, 400)
    b = f.bubbles[3]
    f.advance([Point(b.x, b.y)])
    for _ in range(4):
        f.advance([])
    assert b.state is BubbleState.Removed


def test_states_only_move_forward():
    rng = random.Random(42)
    f = Field(seed=7, pop_step=0.3)
    f.resize(300, 200)
    order = {BubbleState.Alive: 0, BubbleState.Popping: 1, BubbleState.Removed: 2}
    last = {b.id: 0 for b in f.bubbles}
    for _ in range(60):
        pts = [Point(rng.uniform(0, 300), rng.uniform(0, 200)) for _ in range(rng.randint(0, 3))]
        f.advance(pts)
        for b in f.bubbles:
            assert order[b.state] >= last[b.id]
            last[b.id] = order[b.state]


def test_repeat_hits_do_not_refire_or_reset(listener):
    f = Field(listener, seed=1, golden_probability=0.0)
    f.resize(400, 400)
    b = f.bubbles[5]
    f.advance([Point(b.x, b.y), Point(b.x + 1, b.y - 1)])
    assert listener.events == ["pop"]
    f.advance([Point(b.x, b.y)])
    f.advance([Point(b.x, b.y)])
    assert listener.events == ["pop"]
    assert b.progress == pytest.approx(0.2)


def test_golden_pop_fires_right_after_pop(listener):
    f = Field(listener, seed=1, golden_probability=1.0)
    f.resize(400, 400)
    a, b = f.bubbles[0], f.bubbles[2]
    f.advance([Point(a.x, a.y), Point(b.x, b.y)])
    assert listener.events == ["pop", "golden", "pop", "golden"]


def test_normal_pop_never_fires_golden(listener):
    f = Field(listener, seed=1, golden_probability=0.0)
    f.resize(400, 400)
    f.advance([Point(b.x, b.y) for b in f.bubbles])
    assert set(listener.events) == {"pop"}
    assert len(listener.events) == len(f.bubbles)


def test_pointer_order_does_not_matter():
    pts = [Point(10, 10), Point(210, 150), Point(390, 390)]
    a = Field(seed=3)
    a.resize(400, 400)
    b = Field(seed=3)
    b.resize(400, 400)
    pa = a.advance(pts)
    pb = b.advance(list(reversed(pts)))
    assert [x.id for x in pa] == [x.id for x in pb]


def test_plain_callbacks_and_missing_hooks():
    pops = []
    f = Field(on_pop=lambda: pops.append(1), seed=2, golden_probability=1.0)
    f.resize(400, 400)
    b = f.bubbles[0]
    f.advance([Point(b.x, b.y)])
    assert pops == [1]

    silent = Field(seed=2)
    silent.resize(400, 400)
    b = silent.bubbles[0]
    assert silent.advance([Point(b.x, b.y)]) == [b]


def test_resize_clears_state():
    f = Field(seed=4)
    f.resize(400, 400)
    f.advance([Point(b.x, b.y) for b in f.bubbles[:10]])
    for _ in range(5):
        f.advance([])
    assert f.count(BubbleState.Alive) < len(f.bubbles)

    f.resize(500, 300)
    assert f.bubbles
    assert f.count(BubbleState.Alive) == len(f.bubbles)
    assert all(b.progress == 0 and b.visual_scale == 1 for b in f.bubbles)


def test_snapshot_tracks_pop_progress():
    f = Field(seed=1, pop_step=0.5)
    f.resize(200, 200)
    b = f.bubbles[0]
    before = {s.id: s for s in f.snapshot()}[b.id]
    assert before.alpha == pytest.approx(0.8)
    assert before.radius == pytest.approx(b.radius)

    f.advance([Point(b.x, b.y)])
    f.advance([])
    mid = {s.id: s for s in f.snapshot()}[b.id]
    assert mid.alpha == pytest.approx(0.4)
    assert mid.radius == pytest.approx(b.radius * (1 + POP_GROWTH * 0.5))


def test_rejects_bad_constants():
    with pytest.raises(ValueError):
        Field(hit_multiplier=0.9)
    with pytest.raises(ValueError):
        Field(pop_step=0)


def test_listener_and_callbacks_together_are_rejected(listener):
    with pytest.raises(ValueError):
        Field(listener, on_pop=lambda: None)
    with pytest.raises(ValueError):
        Field(listener, on_golden_pop=lambda: None)
