import itertools

import pytest

from models.point import Point
from models.segment import Segment
from utils.bresenham_utils import discretize_segment, segment_points
from utils.parsing import parse_segment


def test_shared_x_steps_y():
    seg = Segment(Point(1, 1), Point(1, 3))
    assert list(discretize_segment(seg)) == [Point(1, 1), Point(1, 2), Point(1, 3)]


def test_shared_y_steps_x():
    seg = parse_segment("3,4 -> 1,4")
    assert list(discretize_segment(seg)) == [Point(1, 4), Point(2, 4), Point(3, 4)]


def test_single_point_segment():
    seg = Segment(Point(2, 1), Point(2, 1))
    assert list(discretize_segment(seg)) == [Point(2, 1)]


@pytest.mark.parametrize("line", ["8,0 -> 0,8", "0,0 -> 8,8", "5,5 -> 8,2", "6,4 -> 2,0"])
def test_diagonal_is_not_discretized(line):
    assert discretize_segment(parse_segment(line)) is None


@pytest.mark.parametrize(
    "line", ["0,9 -> 5,9", "9,4 -> 3,4", "2,2 -> 2,1", "7,0 -> 7,4", "0,0 -> 0,0", "4,10 -> 4,0"]
)
def test_point_sequence_shape(line):
    seg = parse_segment(line)
    points = list(discretize_segment(seg))

    dx = abs(seg.end.x - seg.start.x)
    dy = abs(seg.end.y - seg.start.y)
    assert len(points) == max(dx, dy) + 1
    assert points[0] == seg.start
    assert points[-1] == seg.end

    for a, b in zip(points, points[1:]):
        steps = sorted((abs(b.x - a.x), abs(b.y - a.y)))
        assert steps == [0, 1]


def test_sequence_is_lazy():
    seg = parse_segment("0,0 -> 0,1000000")
    first_three = list(itertools.islice(discretize_segment(seg), 3))
    assert first_three == [Point(0, 0), Point(0, 1), Point(0, 2)]


def test_sequence_is_single_pass():
    points = discretize_segment(parse_segment("0,0 -> 2,0"))
    assert len(list(points)) == 3
    assert list(points) == []


def test_segment_points_rejects_diagonal():
    with pytest.raises(ValueError):
        next(segment_points(parse_segment("0,0 -> 2,2")))
