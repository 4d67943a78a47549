"""
Session Configuration.

The projection core takes `scale` and `radius` as explicit arguments and
has no defaults. The sessions that call it own their settings here.

Values may be given as bare floats or as pint quantities; they are
normalised to floats in `__post_init__`:

>>> from common.units import Q_
>>> ARConfig(scale=Q_(100, 'scene_unit / kilometer')).scale
0.1
"""

from dataclasses import dataclass

from common.types import GeoPoint
from common.units import length_in_scene_units, scale_per_meter
from scene.errors import ConfigurationError


# Used when geolocation is denied, unavailable or times out
PARIS = GeoPoint(latitude=48.8566, longitude=2.3522)
PARIS_WITH_ALTITUDE = GeoPoint(latitude=48.8566, longitude=2.3522, altitude=35.0)


def _positive(value, name: str, convert) -> float:
    try:
        number = convert(value)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
    if not number > 0:
        raise ConfigurationError(f"{name} must be positive, got {number}")
    return number


@dataclass
class ARConfig:
    """Configuration for the AR overlay session.

    Attributes
    ----------
    scale : float
        Scene units per meter (default: 0.1, one scene unit per 10 m).
    default_position : GeoPoint
        Viewer position used when geolocation fails.
    """
    scale: float = 0.1
    default_position: GeoPoint = PARIS_WITH_ALTITUDE

    def __post_init__(self):
        self.scale = _positive(self.scale, "scale", scale_per_meter)


@dataclass
class GlobeConfig:
    """Configuration for the globe session.

    Attributes
    ----------
    radius : float
        Globe radius in scene units.
    marker_lift : float
        Height of markers above the globe surface, in scene units.
    camera_distance : float
        Distance of the camera from the globe center when focusing.
    min_camera_distance, max_camera_distance : float
        Orbit limits; `camera_distance` is clamped into them.
    spin_per_frame : float
        Globe rotation about the vertical axis per frame, in radians.
    map_sync : bool
        Mirror markers and selections onto the 2D tile map.
    focus_zoom : int
        Tile-map zoom level used when a globe marker is selected.
    default_position : GeoPoint
        User position used when geolocation fails.
    """
    radius: float = 5.0
    marker_lift: float = 0.1
    camera_distance: float = 15.0
    min_camera_distance: float = 8.0
    max_camera_distance: float = 30.0
    spin_per_frame: float = 0.001
    map_sync: bool = True
    focus_zoom: int = 6
    default_position: GeoPoint = PARIS

    def __post_init__(self):
        self.radius = _positive(self.radius, "radius", length_in_scene_units)
        self.camera_distance = _positive(
            self.camera_distance, "camera_distance", length_in_scene_units
        )
        self.min_camera_distance = _positive(
            self.min_camera_distance, "min_camera_distance", length_in_scene_units
        )
        self.max_camera_distance = _positive(
            self.max_camera_distance, "max_camera_distance", length_in_scene_units
        )
        try:
            self.marker_lift = length_in_scene_units(self.marker_lift)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        if self.min_camera_distance > self.max_camera_distance:
            raise ConfigurationError(
                f"min_camera_distance {self.min_camera_distance} exceeds "
                f"max_camera_distance {self.max_camera_distance}"
            )
        if self.marker_lift < 0:
            raise ConfigurationError(
                f"marker_lift must not be negative, got {self.marker_lift}"
            )

    @property
    def marker_radius(self) -> float:
        """Radius of the sphere markers sit on."""
        return self.radius + self.marker_lift

    def clamp_camera_distance(self, distance: float) -> float:
        return min(max(distance, self.min_camera_distance), self.max_camera_distance)
