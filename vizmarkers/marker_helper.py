"""Helpers for building and combining visualization markers."""

from __future__ import annotations

import copy
from dataclasses import replace

from vizmarkers.messages import (
    ColorRGBA,
    Duration,
    Header,
    Marker,
    MarkerAction,
    MarkerArray,
    Point,
    Pose,
    Quaternion,
    Time,
    Vector3,
)

_DEFAULT_LIFETIME_SECONDS = 0.5


def create_marker_position(x: float, y: float, z: float) -> Point:
    """Return a point at the given coordinates."""
    return Point(x, y, z)


def create_marker_orientation(x: float, y: float, z: float, w: float) -> Quaternion:
    """Return a quaternion with the given components."""
    return Quaternion(x, y, z, w)


def create_marker_scale(x: float, y: float, z: float) -> Vector3:
    """Return a scale vector with the given components."""
    return Vector3(x, y, z)


def create_marker_color(r: float, g: float, b: float, a: float) -> ColorRGBA:
    """Return a colour with the given components."""
    return ColorRGBA(r, g, b, a)


def create_default_marker(
    frame_id: str,
    now: Time,
    ns: str,
    id: int,
    type: int,
    scale: Vector3,
    color: ColorRGBA,
) -> Marker:
    """Return a frame-locked marker to add, at the origin, living half a second."""
    return Marker(
        header=Header(stamp=now, frame_id=frame_id),
        ns=ns,
        id=id,
        type=type,
        action=MarkerAction.ADD,
        lifetime=Duration.from_seconds(_DEFAULT_LIFETIME_SECONDS),
        pose=Pose(
            position=create_marker_position(0.0, 0.0, 0.0),
            orientation=create_marker_orientation(0.0, 0.0, 0.0, 1.0),
        ),
        scale=copy.copy(scale),
        color=copy.copy(color),
        frame_locked=True,
    )


def create_deleted_default_marker(now: Time, ns: str, id: int) -> Marker:
    """Return a marker asking for the marker with this namespace and id to be deleted."""
    return Marker(header=Header(stamp=now), ns=ns, id=id, action=MarkerAction.DELETE)


def append_marker_array(
    additional_marker_array: MarkerArray,
    marker_array: MarkerArray,
    current_time: Time | None = None,
) -> None:
    """Append copies of the additional markers to ``marker_array``.

    When ``current_time`` is given, each appended copy is stamped with it.
    """
    for marker in additional_marker_array.markers:
        appended = copy.deepcopy(marker)
        if current_time is not None:
            appended.header = replace(appended.header, stamp=current_time)
        marker_array.markers.append(appended)