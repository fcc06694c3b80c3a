import pytest

from vizmarkers.marker_helper import (
    append_marker_array,
    create_default_marker,
    create_deleted_default_marker,
    create_marker_color,
    create_marker_orientation,
    create_marker_position,
    create_marker_scale,
)
from vizmarkers.messages import Marker, MarkerAction, MarkerArray, MarkerType, Time


def test_create_position():
    r = create_marker_position(0.1, 0.2, 0.3)
    assert r.x == 0.1
    assert r.y == 0.2
    assert r.z == 0.3


def test_create_orientation():
    r = create_marker_orientation(0.1, 0.2, 0.3, 0.4)
    assert r.x == 0.1
    assert r.y == 0.2
    assert r.z == 0.3
    assert r.w == 0.4


def test_create_scale():
    r = create_marker_scale(0.1, 0.2, 0.3)
    assert r.x == 0.1
    assert r.y == 0.2
    assert r.z == 0.3


def test_create_color():
    r = create_marker_color(0.1, 0.2, 0.3, 0.4)
    assert r.r == pytest.approx(0.1, rel=1e-6)
    assert r.g == pytest.approx(0.2, rel=1e-6)
    assert r.b == pytest.approx(0.3, rel=1e-6)
    assert r.a == pytest.approx(0.4, rel=1e-6)


def test_create_default_marker():
    stamp = Time(12345, 67890)
    scale = create_marker_scale(0.1, 0.2, 0.3)
    color = create_marker_color(0.1, 0.2, 0.3, 0.4)

    m = create_default_marker("frame", stamp, "ns", 99, MarkerType.CUBE, scale, color)

    assert m.header.stamp.sec == 12345
    assert m.header.stamp.nanosec == 67890
    assert m.header.frame_id == "frame"
    assert m.ns == "ns"
    assert m.id == 99
    assert m.action == MarkerAction.ADD
    assert m.type == MarkerType.CUBE
    assert m.pose.position.x == 0.0
    assert m.pose.position.y == 0.0
    assert m.pose.position.z == 0.0
    assert m.pose.orientation.x == 0.0
    assert m.pose.orientation.y == 0.0
    assert m.pose.orientation.z == 0.0
    assert m.pose.orientation.w == 1.0
    assert m.scale.x == 0.1
    assert m.scale.y == 0.2
    assert m.scale.z == 0.3
    assert m.color.r == pytest.approx(0.1, rel=1e-6)
    assert m.color.g == pytest.approx(0.2, rel=1e-6)
    assert m.color.b == pytest.approx(0.3, rel=1e-6)
    assert m.color.a == pytest.approx(0.4, rel=1e-6)


def test_default_marker_lifetime_and_lock():
    m = create_default_marker(
        "frame",
        Time(1, 0),
        "ns",
        1,
        MarkerType.SPHERE,
        create_marker_scale(1.0, 1.0, 1.0),
        create_marker_color(1.0, 0.0, 0.0, 1.0),
    )
    assert m.lifetime.to_seconds() == pytest.approx(0.5)
    assert m.frame_locked is True


def test_create_delete_marker():
    stamp = Time(12345, 67890)
    m = create_deleted_default_marker(stamp, "ns", 99)
    assert m.header.stamp.sec == 12345
    assert m.header.stamp.nanosec == 67890
    assert m.ns == "ns"
    assert m.id == 99
    assert m.action == MarkerAction.DELETE


def test_append_marker_array():
    array1 = MarkerArray([Marker(id=10), Marker(id=11)])
    array2 = MarkerArray([Marker(id=20), Marker(id=21), Marker(id=22)])

    append_marker_array(array2, array1, None)

    assert len(array1.markers) == 5
    assert [m.id for m in array1.markers] == [10, 11, 20, 21, 22]


def test_append_marker_array_restamps_copies():
    original_stamp = Time(1, 0)
    new_stamp = Time(5, 7)
    source = MarkerArray([create_deleted_default_marker(original_stamp, "ns", 3)])
    target = MarkerArray()

    append_marker_array(source, target, new_stamp)

    assert target.markers[0].header.stamp == new_stamp
    assert source.markers[0].header.stamp == original_stamp
    assert target.markers[0] is not source.markers[0]
    assert target.markers[0].id == 3


def test_append_marker_array_default_keeps_stamp():
    stamp = Time(9, 9)
    source = MarkerArray([create_deleted_default_marker(stamp, "ns", 4)])
    target = MarkerArray()

    append_marker_array(source, target)

    assert target.markers[0].header.stamp == stamp