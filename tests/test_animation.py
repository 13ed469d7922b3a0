"""Tests for animation reconciliation."""

from datetime import timedelta

import pytest

from tiled_tileset import CoercionError, DeserializationError, Frame
from tiled_tileset.model.animation import parse_animation


def frame(tileid, millis):
    return Frame(tileid=tileid, duration=timedelta(milliseconds=millis))


def test_frame_list_shape():
    frames = parse_animation({"animation": [
        {"tileid": 0, "duration": 100},
        {"tileid": 1, "duration": 250},
    ]})
    assert frames == (frame(0, 100), frame(1, 250))


def test_wrapper_shape():
    frames = parse_animation({"animation": [{"frame": [
        {"tileid": "4", "duration": "100"},
        {"tileid": "5", "duration": "100"},
    ]}]})
    assert frames == (frame(4, 100), frame(5, 100))


def test_first_animation_wins():
    frames = parse_animation({"animation": [
        {"frame": [{"tileid": "1", "duration": "10"}]},
        {"frame": [{"tileid": "2", "duration": "20"}]},
    ]})
    assert frames == (frame(1, 10),)


def test_absent_animation_is_static():
    assert parse_animation({"id": 0}) == ()


def test_empty_shapes():
    assert parse_animation({"animation": []}) == ()
    # <animation/> with no frames
    assert parse_animation({"animation": [{}]}) == ()


def test_duration_is_a_time_quantity():
    (only,) = parse_animation({"animation": [{"tileid": 3, "duration": 1500}]})
    assert only.duration.total_seconds() == 1.5


def test_bad_duration_reports_path():
    with pytest.raises(CoercionError) as excinfo:
        parse_animation({"animation": [{"frame": [{"tileid": "0", "duration": "soon"}]}]}, "tile[0]")
    assert excinfo.value.path == "tile[0].animation[0].frame[0].duration"


def test_negative_duration_rejected():
    with pytest.raises(CoercionError):
        parse_animation({"animation": [{"tileid": 0, "duration": -1}]})


def test_frame_missing_tileid():
    with pytest.raises(DeserializationError):
        parse_animation({"animation": [{"duration": 100}]})


def test_not_a_sequence():
    with pytest.raises(DeserializationError):
        parse_animation({"animation": {"tileid": 0, "duration": 100}})
