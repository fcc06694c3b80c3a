# vizmarkers

Small helpers for building visualization markers: positions, orientations,
scales, colours, default "add" and "delete" markers, and a way to merge
marker arrays with an optional common timestamp.

## Installation

```
pip install vizmarkers
```

The package has no runtime dependencies.

## Message types

`vizmarkers.messages` provides plain data classes for the messages a marker
is made of: `Time`, `Duration`, `Header`, `Point`, `Quaternion`, `Vector3`,
`ColorRGBA`, `Pose`, `Marker` and `MarkerArray`, plus the enums `MarkerType`
and `MarkerAction`.

- `Time` and `Duration` are frozen and hold whole seconds and nanoseconds.
  Extra nanoseconds are carried into seconds, so `Time(0, 1_500_000_000)`
  equals `Time(1, 500_000_000)`. A negative `Time` raises `ValueError`.
  Use `Time.from_seconds(...)` or `Duration.from_seconds(...)` to build one
  from a float, and `to_seconds()` to convert it back.
- `Quaternion` defaults to the identity rotation (`w = 1.0`).
- `ColorRGBA` stores each component rounded to single precision.
- `MarkerAction.MODIFY` is the same value as `MarkerAction.ADD`.

## Building markers

```python
from vizmarkers.marker_helper import (
    append_marker_array,
    create_default_marker,
    create_deleted_default_marker,
    create_marker_color,
    create_marker_scale,
)
from vizmarkers.messages import MarkerArray, MarkerType, Time

stamp = Time(sec=12345, nanosec=67890)
scale = create_marker_scale(0.1, 0.2, 0.3)
color = create_marker_color(0.1, 0.2, 0.3, 0.4)

cube = create_default_marker("map", stamp, "obstacles", 1, MarkerType.CUBE, scale, color)
```

`create_marker_position`, `create_marker_orientation`, `create_marker_scale`
and `create_marker_color` return a `Point`, `Quaternion`, `Vector3` and
`ColorRGBA` with the given components.

`create_default_marker` returns an `ADD` marker with:

- an identity pose at the origin,
- a lifetime of 0.5 seconds,
- `frame_locked` set to true,
- copies of the given scale and colour.

`create_deleted_default_marker(now, ns, id)` returns a `DELETE` marker for
the given namespace and id, stamped with `now`.

## Merging arrays

```python
target = MarkerArray()
extra = MarkerArray(markers=[cube])

append_marker_array(extra, target, None)
append_marker_array(extra, target, Time.from_seconds(10.0))
```

`append_marker_array` adds deep copies of the extra markers to the end of the
target array, in order. If you pass a time, each appended marker gets that
time as its header stamp. If you pass `None` (the default), the appended
markers keep their own stamps. The extra array is left unchanged.

## What this package does not do

It only builds and combines marker objects in memory. It does not publish,
send, serialise or display markers; passing them to a viewer is up to you.

## Running the tests

```
pip install "vizmarkers[test]"
pytest
```