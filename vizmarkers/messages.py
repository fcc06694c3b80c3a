"""Message types used to describe visualization markers."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

_NANOS_PER_SECOND = 1_000_000_000


def _to_float32(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    return struct.unpack("f", struct.pack("f", float(value)))[0]


def _split_nanoseconds(total: int) -> tuple[int, int]:
    sec, nanosec = divmod(total, _NANOS_PER_SECOND)
    return sec, nanosec


@dataclass(frozen=True, order=True)
class Time:
    """A point in time as whole seconds plus nanoseconds."""

    sec: int = 0
    nanosec: int = 0

    def __post_init__(self) -> None:
        total = int(self.sec) * _NANOS_PER_SECOND + int(self.nanosec)
        if total < 0:
            raise ValueError("time cannot be negative")
        sec, nanosec = _split_nanoseconds(total)
        object.__setattr__(self, "sec", sec)
        object.__setattr__(self, "nanosec", nanosec)

    @classmethod
    def from_seconds(cls, seconds: float) -> Time:
        """Build a time from a number of seconds."""
        return cls(0, round(seconds * _NANOS_PER_SECOND))

    def to_seconds(self) -> float:
        """Return the time as a number of seconds."""
        return self.sec + self.nanosec / _NANOS_PER_SECOND


@dataclass(frozen=True, order=True)
class Duration:
    """A span of time as whole seconds plus non-negative nanoseconds."""

    sec: int = 0
    nanosec: int = 0

    def __post_init__(self) -> None:
        total = int(self.sec) * _NANOS_PER_SECOND + int(self.nanosec)
        sec, nanosec = _split_nanoseconds(total)
        object.__setattr__(self, "sec", sec)
        object.__setattr__(self, "nanosec", nanosec)

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        """Build a duration from a number of seconds."""
        return cls(0, round(seconds * _NANOS_PER_SECOND))

    def to_seconds(self) -> float:
        """Return the duration as a number of seconds."""
        return self.sec + self.nanosec / _NANOS_PER_SECOND


@dataclass
class Header:
    """Frame and time stamp of a message."""

    stamp: Time = field(default_factory=Time)
    frame_id: str = ""


@dataclass
class Point:
    """A position in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Quaternion:
    """An orientation in 3D space; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class ColorRGBA:
    """A colour with single-precision red, green, blue and alpha components."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def __setattr__(self, name: str, value: float) -> None:
        super().__setattr__(name, _to_float32(value))


@dataclass
class Pose:
    """A position together with an orientation."""

    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


class MarkerType(IntEnum):
    """Shapes a marker can take."""

    ARROW = 0
    CUBE = 1
    SPHERE = 2
    CYLINDER = 3
    LINE_STRIP = 4
    LINE_LIST = 5
    CUBE_LIST = 6
    SPHERE_LIST = 7
    POINTS = 8
    TEXT_VIEW_FACING = 9
    MESH_RESOURCE = 10
    TRIANGLE_LIST = 11


class MarkerAction(IntEnum):
    """What a viewer should do with a marker."""

    ADD = 0
    MODIFY = 0
    DELETE = 2
    DELETEALL = 3


@dataclass
class Marker:
    """A single visualization marker."""

    header: Header = field(default_factory=Header)
    ns: str = ""
    id: int = 0
    type: int = MarkerType.ARROW
    action: int = MarkerAction.ADD
    pose: Pose = field(default_factory=Pose)
    scale: Vector3 = field(default_factory=Vector3)
    color: ColorRGBA = field(default_factory=ColorRGBA)
    lifetime: Duration = field(default_factory=Duration)
    frame_locked: bool = False
    points: list[Point] = field(default_factory=list)
    colors: list[ColorRGBA] = field(default_factory=list)
    text: str = ""
    mesh_resource: str = ""
    mesh_use_embedded_materials: bool = False


@dataclass
class MarkerArray:
    """An ordered collection of markers."""

    markers: list[Marker] = field(default_factory=list)