"""
Viewer-Relative Placement of Geolocated Markers.

Converts a target's geographic position into a scene offset from the user,
for the AR overlay. The user stands at the scene origin looking down −Z:

- +X is east, −Z is north, +Y is up.
- Horizontal offset: distance along the bearing, both from
  `geospatial.great_circle`.
- Vertical offset: altitude difference.

Everything is multiplied by `scale` (scene units per meter). The scale has
no default: a placement computed at the wrong zoom level is silently wrong,
so callers must pass it explicitly.

Offsets are not incrementally updatable. Whenever the user's fix or the
marker set changes, recompute every placement from scratch.
"""

from typing import Dict, Hashable, Iterable

import numpy as np

from common.types import GeoPoint, Marker, SceneVector3
from common.units import ScaleLike, scale_per_meter
from geospatial.great_circle import bearing_degrees, distance_meters


def relative_position(
    user: GeoPoint,
    target: GeoPoint,
    scale: ScaleLike
) -> SceneVector3:
    """Compute the scene offset of `target` as seen from `user`.

    Parameters
    ----------
    user : GeoPoint
        Viewer's current position fix.
    target : GeoPoint
        Point of interest.
    scale : float or pint.Quantity
        Scene units per meter. A quantity must be convertible to
        ``scene_unit / meter``.

    Returns
    -------
    SceneVector3
        (sin β · d · s, (alt_t − alt_u) · s, −cos β · d · s) where d is the
        great-circle distance and β the initial bearing. A missing altitude
        counts as 0.
    """
    s = scale_per_meter(scale)

    distance = distance_meters(user, target)
    bearing_rad = np.radians(bearing_degrees(user, target))

    x = np.sin(bearing_rad) * distance * s
    z = -np.cos(bearing_rad) * distance * s
    y = (target.altitude_or_zero - user.altitude_or_zero) * s

    return SceneVector3(float(x), float(y), float(z))


def place_markers(
    user: GeoPoint,
    markers: Iterable[Marker],
    scale: ScaleLike
) -> Dict[Hashable, SceneVector3]:
    """Recompute the scene offset of every marker.

    Returns a new mapping from marker id to offset on every call; nothing
    is cached between calls.
    """
    s = scale_per_meter(scale)
    return {
        marker.id: relative_position(user, marker.geo_point, s)
        for marker in markers
    }
