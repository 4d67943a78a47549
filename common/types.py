"""
Type Definitions for Geo-Spatial Scene Projection.

This module defines the dataclasses exchanged between the sensor
collaborators, the projection core and the renderer. Geographic values are
kept in DEGREES and METERS, which is what the sensors report; scene values
are unit-agnostic floats.

Design Rationale
----------------
All types are frozen: a sample is immutable once taken, and a new sample
replaces the previous one rather than updating it.
"""

from dataclasses import dataclass
from typing import Hashable, Iterator, Optional, Tuple
import math

import numpy as np
from numpy.typing import NDArray


def _or_zero(value: Optional[float]) -> float:
    """Return 0.0 for a missing or NaN reading."""
    if value is None:
        return 0.0
    value = float(value)
    if math.isnan(value):
        return 0.0
    return value


@dataclass(frozen=True)
class GeoPoint:
    """A geographic position fix.

    Attributes
    ----------
    latitude : float
        Latitude in DEGREES. Range: [-90, 90], positive north.
    longitude : float
        Longitude in DEGREES. Range: [-180, 180], positive east.
    altitude : float, optional
        Altitude in METERS. None when the sensor did not report one.

    Notes
    -----
    Ranges are not enforced here. Out-of-range values still project to a
    valid (if odd) scene position; use `validation.ConsistencyChecker` to
    report them.

    Examples
    --------
    >>> paris = GeoPoint(48.8566, 2.3522)
    >>> paris.altitude_or_zero
    0.0
    """
    latitude: float  # degrees
    longitude: float  # degrees
    altitude: Optional[float] = None  # meters

    @property
    def altitude_or_zero(self) -> float:
        """Altitude in meters, 0 (ground level) when absent."""
        return _or_zero(self.altitude)

    def to_radians(self) -> Tuple[float, float]:
        """Return (latitude_rad, longitude_rad)."""
        return math.radians(self.latitude), math.radians(self.longitude)


@dataclass(frozen=True)
class SceneVector3:
    """A position in scene space.

    Produced by the projection core and never mutated by it. Callers
    translate or rotate downstream.
    """
    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def scaled(self, factor: float) -> 'SceneVector3':
        return SceneVector3(self.x * factor, self.y * factor, self.z * factor)

    @classmethod
    def from_array(cls, values: NDArray[np.float64]) -> 'SceneVector3':
        return cls(float(values[0]), float(values[1]), float(values[2]))


@dataclass(frozen=True)
class OrientationSample:
    """A device-orientation reading in DEGREES.

    Attributes
    ----------
    heading : float, optional
        Compass heading about the vertical axis. Range: [0, 360).
    pitch : float, optional
        Front/back tilt. Range: [-180, 180].
    roll : float, optional
        Left/right tilt. Range: [-90, 90].

    Notes
    -----
    Sensors may report partial data while starting up. Missing fields are
    kept as None here and read as 0 by the orientation mapper.
    """
    heading: Optional[float] = None
    pitch: Optional[float] = None
    roll: Optional[float] = None

    @classmethod
    def from_event(
        cls,
        alpha: Optional[float],
        beta: Optional[float],
        gamma: Optional[float]
    ) -> 'OrientationSample':
        """Build a sample from deviceorientation naming (alpha, beta, gamma)."""
        return cls(heading=alpha, pitch=beta, roll=gamma)

    def filled(self) -> Tuple[float, float, float]:
        """Return (heading, pitch, roll) with missing fields as 0."""
        return _or_zero(self.heading), _or_zero(self.pitch), _or_zero(self.roll)


@dataclass(frozen=True)
class Marker:
    """A labelled point of interest owned by the application.

    The scene position is not stored; it is recomputed whenever the user's
    position or the marker set changes.
    """
    id: Hashable
    geo_point: GeoPoint
    label: str = ""
