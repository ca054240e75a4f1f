import itertools
import math
import random

import pytest

from field_coverage.core.geometry import Chord, Point
from field_coverage.core.planning import (
    assemble,
    field_polygon,
    normalize,
    plan_chords,
    preview_path,
)
from field_coverage.core.styles import Diagonal, Ladder, Zigzag

STYLES = [Zigzag(0.35), Ladder(0.35), Diagonal(0.35, 0.0), Diagonal(0.35, 60.0), Diagonal(0.35, 135.0)]

QUADS = [
    [(0, 0), (5, 0), (5, 3), (0, 3)],
    [(0, 0), (6, 1), (5, 4), (-1, 3)],
    [(2, 0), (4, 2), (2, 4), (0, 2)],
    [(-3.2, 1.1), (1.7, -0.4), (2.9, 3.3), (-2.5, 4.0)],
]


def _as_tuples(path):
    return [p.as_tuple() for p in path]


def _rounded(path, digits=9):
    return sorted((round(p.x, digits), round(p.y, digits)) for p in path)


def test_unit_square_zigzag_scenario(unit_square):
    path = preview_path(unit_square, Zigzag(0.5), 0)
    assert _as_tuples(path) == [
        (0.0, 0.0),
        (1.0, 0.0),
        (1.0, 0.5),
        (0.0, 0.5),
        (0.0, 1.0),
        (1.0, 1.0),
    ]


def test_oversized_spacing_keeps_two_intervals(unit_square):
    path = preview_path(unit_square, Zigzag(5.0), 0)
    assert len(path) == 6
    assert [p.y for p in path] == [0.0, 0.0, 0.5, 0.5, 1.0, 1.0]


def test_identical_points_give_empty_path():
    assert preview_path([(1, 1)] * 4, Zigzag(0.5)) == []


def test_three_distinct_points_give_empty_path():
    assert preview_path([(0, 0), (1, 0), (1, 1), (1, 1)], Ladder(0.2)) == []


@pytest.mark.parametrize("count", [0, 3, 5])
def test_wrong_corner_count_gives_empty_path(count):
    points = [(math.cos(i), math.sin(i)) for i in range(count)]
    assert preview_path(points, Zigzag(0.5)) == []


@pytest.mark.parametrize("style", STYLES)
def test_collinear_points_give_empty_path(style):
    assert preview_path([(0, 0), (1, 1), (2, 2), (3, 3)], style) == []
    assert field_polygon([(0, 0), (1, 0), (2, 0), (3, 0)]) is None


@pytest.mark.parametrize("style", STYLES)
@pytest.mark.parametrize("quad", QUADS)
def test_deterministic(style, quad):
    first = preview_path(quad, style, 2)
    second = preview_path(list(quad), style, 2)
    assert _as_tuples(first) == _as_tuples(second)


@pytest.mark.parametrize("style", STYLES)
@pytest.mark.parametrize("quad", QUADS)
def test_chord_endpoints_lie_on_boundary(style, quad):
    polygon = normalize(quad)
    chords = plan_chords(polygon, style)
    assert chords
    for chord in chords:
        assert polygon.distance_to_boundary(chord.start) < 1e-9
        assert polygon.distance_to_boundary(chord.end) < 1e-9


@pytest.mark.parametrize("style", STYLES)
@pytest.mark.parametrize("quad", QUADS)
def test_consecutive_passes_alternate_direction(style, quad):
    path = preview_path(quad, style)
    assert len(path) >= 4 and len(path) % 2 == 0
    passes = [(path[i], path[i + 1]) for i in range(0, len(path), 2)]
    for (a_start, a_end), (b_start, b_end) in zip(passes, passes[1:]):
        dot = (a_end.x - a_start.x) * (b_end.x - b_start.x) + (a_end.y - a_start.y) * (b_end.y - b_start.y)
        assert dot <= 1e-9


@pytest.mark.parametrize("style", [Zigzag(0.4), Ladder(0.4)])
def test_start_corner_keeps_sweep_lines(style):
    quad = QUADS[1]
    reference = preview_path(quad, style, 0)
    for corner in range(1, 4):
        path = preview_path(quad, style, corner)
        assert len(path) == len(reference)
        assert _rounded(path) == _rounded(reference)


def test_click_order_does_not_matter():
    quad = QUADS[3]
    reference = _as_tuples(preview_path(quad, Diagonal(0.5, 45.0), 1))
    shuffled = list(quad)
    random.Random(7).shuffle(shuffled)
    assert _as_tuples(preview_path(shuffled, Diagonal(0.5, 45.0), 1)) == reference


def test_assemble_reverses_odd_chords():
    chords = [
        Chord(Point(0, 0), Point(1, 0)),
        Chord(Point(0, 1), Point(1, 1)),
        Chord(Point(0, 2), Point(1, 2)),
    ]
    assert _as_tuples(assemble(chords)) == [
        (0, 0), (1, 0), (1, 1), (0, 1), (0, 2), (1, 2),
    ]


def test_assemble_keeps_duplicate_endpoints():
    chords = [Chord(Point(0, 0), Point(1, 0)), Chord(Point(1, 0), Point(1, 0))]
    assert len(assemble(chords)) == 4
    assert assemble([]) == []


def test_diagonal_at_zero_degrees_sweeps_vertical_passes():
    path = preview_path(QUADS[0], Diagonal(1.0, 0.0))
    for a, b in zip(path[::2], path[1::2]):
        assert a.x == pytest.approx(b.x)


def test_every_start_corner_yields_path():
    for quad, corner in itertools.product(QUADS, range(4)):
        assert preview_path(quad, Zigzag(0.5), corner)


@pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
def test_non_finite_corners_give_empty_path(bad):
    quad = [(0, 0), (4, 0), (4, bad), (0, 3)]
    assert field_polygon(quad) is None
    assert preview_path(quad, Zigzag(0.5)) == []


@pytest.mark.parametrize("style", [Zigzag(0.5), Ladder(0.5), Diagonal(0.5, 45.0)])
def test_huge_field_gives_empty_path(style):
    quad = [(0, 0), (1e308, 0), (1e308, 1e308), (0, 1e308)]
    assert field_polygon(quad) is not None
    assert preview_path(quad, style) == []


def test_overflowing_extent_has_no_polygon():
    assert field_polygon([(-1e308, 0), (1e308, 0), (1e308, 1), (-1e308, 1)]) is None
