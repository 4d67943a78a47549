"""
Geospatial Module for Geo-Spatial Scene Projection.

This is the core of the system. Every conversion from geographic
coordinates or device orientation into scene space originates here, and
every function in it is pure: identical inputs always give identical
outputs, and nothing is cached or stored between calls.

This module provides:
- Spherical projection of lat/lon onto a globe
- Great-circle distance and initial bearing (haversine)
- Viewer-relative placement of geolocated markers
- Device orientation to camera rotation
"""

from geospatial.spherical_projection import (
    project,
    project_batch,
    rotate_about_vertical,
    focus_camera_position,
)

from geospatial.great_circle import (
    distance_meters,
    distance_meters_batch,
    bearing_degrees,
    ellipsoidal_distance_meters,
)

from geospatial.relative_positioning import (
    relative_position,
    place_markers,
)

from geospatial.orientation import (
    EULER_ORDER,
    IDENTITY_ROTATION,
    RotationTriple,
    camera_rotation,
)

__all__ = [
    # Spherical projection
    "project",
    "project_batch",
    "rotate_about_vertical",
    "focus_camera_position",
    # Great-circle math
    "distance_meters",
    "distance_meters_batch",
    "bearing_degrees",
    "ellipsoidal_distance_meters",
    # Relative positioning
    "relative_position",
    "place_markers",
    # Orientation
    "EULER_ORDER",
    "IDENTITY_ROTATION",
    "RotationTriple",
    "camera_rotation",
]
