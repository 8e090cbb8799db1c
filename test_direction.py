#!/usr/bin/env python3
"""Tests for four-way swipe direction classification."""

import pytest

from swipe_detector.gestures.direction import (
    SwipeDirection,
    axis_value,
    classify_offset,
    classify_swipe,
)
from swipe_detector.utils.gesture_utils import Offset


@pytest.mark.parametrize("start, end, expected", [
    ((0, 0), (0, -50), SwipeDirection.UP),
    ((0, 0), (0, 50), SwipeDirection.DOWN),
    ((0, 0), (-80, 10), SwipeDirection.LEFT),
    ((0, 0), (30, 30), SwipeDirection.DOWN),
    ((100, 100), (260, 140), SwipeDirection.RIGHT),
])
def test_gesture_scenarios(start, end, expected):
    displacement = Offset(*end) - Offset(*start)
    assert classify_offset(displacement) is expected


def test_horizontal_dominant_uses_sign_of_dx():
    assert classify_swipe(10.5, -3) is SwipeDirection.RIGHT
    assert classify_swipe(-10.5, 3) is SwipeDirection.LEFT
    assert classify_swipe(-0.2, 0.1) is SwipeDirection.LEFT


def test_vertical_dominant_uses_sign_of_dy():
    assert classify_swipe(1, 7) is SwipeDirection.DOWN
    assert classify_swipe(-1, -7) is SwipeDirection.UP


def test_ties_resolve_to_vertical_axis():
    assert classify_swipe(30, 30) is SwipeDirection.DOWN
    assert classify_swipe(-30, 30) is SwipeDirection.DOWN
    assert classify_swipe(30, -30) is SwipeDirection.UP
    assert classify_swipe(-30, -30) is SwipeDirection.UP


def test_zero_vector_is_up():
    assert classify_swipe(0, 0) is SwipeDirection.UP
    assert classify_swipe(-0.0, 0.0) is SwipeDirection.UP


def test_purely_horizontal_swipes():
    assert classify_swipe(5, 0) is SwipeDirection.RIGHT
    assert classify_swipe(-5, 0) is SwipeDirection.LEFT


def test_axis_value_picks_signed_component():
    offset = Offset(-80, 10)
    assert axis_value(SwipeDirection.LEFT, offset) == -80
    assert axis_value(SwipeDirection.RIGHT, offset) == -80
    assert axis_value(SwipeDirection.UP, offset) == 10
    assert axis_value(SwipeDirection.DOWN, offset) == 10


def test_direction_values():
    assert [d.value for d in SwipeDirection] == ['up', 'down', 'left', 'right']
    assert SwipeDirection.LEFT.is_horizontal
    assert not SwipeDirection.UP.is_horizontal


def test_offset_arithmetic():
    a = Offset(3, 4)
    b = Offset(1, 1)
    assert a - b == Offset(2, 3)
    assert a + b == Offset(4, 5)
    assert a.distance == 5.0
    assert Offset.from_tuple((7, 9)) == Offset(7.0, 9.0)
    dx, dy = a
    assert (dx, dy) == (3.0, 4.0)


def test_offset_is_immutable():
    offset = Offset(1, 2)
    with pytest.raises(AttributeError):
        offset.dx = 5


def test_offset_rejects_non_numeric():
    with pytest.raises(ValueError):
        Offset("left", 0)
