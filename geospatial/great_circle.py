"""
Great-Circle Distance and Bearing on a Spherical Earth.

This module provides the distance and initial bearing between two
geographic points, used to place AR markers around the viewer.

Scientific Context
------------------
Domain: Spherical trigonometry
Model: Sphere of fixed radius 6,371,000 m (haversine)

Why a Sphere
------------
Markers are placed at most a few kilometers from the viewer and drawn at a
reduced scale, so the spherical error (below 0.5%) is invisible on screen.
The fixed radius keeps placements reproducible. `ellipsoidal_distance_meters`
is provided to quantify that error against the WGS84 geodesic.

Bearing Asymmetry
-----------------
The initial bearing from A to B is in general NOT the reverse of the
initial bearing from B to A (great circles cross meridians at varying
angles). Callers must not assume bearing(a, b) == (bearing(b, a) + 180) % 360.

References
----------
- Sinnott, R.W. (1984). Virtues of the Haversine. Sky and Telescope, 68(2), 159.
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
"""

import numpy as np
from numpy.typing import NDArray

from pyproj import Geod

from common.constants import GeoConstants
from common.types import GeoPoint


_EARTH_RADIUS_M = GeoConstants.EARTH_RADIUS_HAVERSINE.value
_FULL_TURN_DEG = GeoConstants.FULL_TURN_DEG.value

# Create the geodesic calculator for WGS84
_wgs84_geod = Geod(
    a=GeoConstants.EARTH_SEMI_MAJOR_AXIS.value,
    f=GeoConstants.EARTH_FLATTENING.value
)


def _haversine(lat1_rad, lon1_rad, lat2_rad, lon2_rad):
    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = np.sin(dlat / 2)**2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlon / 2)**2
    # Rounding can push `a` just past 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return _EARTH_RADIUS_M * c


def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """Compute the great-circle distance between two points.

    Parameters
    ----------
    a, b : GeoPoint
        End points. Altitude is ignored.

    Returns
    -------
    float
        Distance in meters along the sphere's surface. 0 for identical
        points; symmetric in `a` and `b`.

    Examples
    --------
    >>> paris = GeoPoint(48.8566, 2.3522)
    >>> london = GeoPoint(51.5074, -0.1278)
    >>> round(distance_meters(paris, london), -4)
    340000.0
    """
    lat1, lon1 = a.to_radians()
    lat2, lon2 = b.to_radians()
    return float(_haversine(lat1, lon1, lat2, lon2))


def distance_meters_batch(
    origin: GeoPoint,
    latitudes_deg: NDArray[np.float64],
    longitudes_deg: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Compute great-circle distances from one origin to many points.

    Parameters
    ----------
    origin : GeoPoint
        Common start point.
    latitudes_deg, longitudes_deg : ndarray
        Target coordinates in degrees.

    Returns
    -------
    ndarray
        Distances in meters, same shape as the inputs.
    """
    lat1, lon1 = origin.to_radians()
    lat2 = np.radians(np.asarray(latitudes_deg, dtype=np.float64))
    lon2 = np.radians(np.asarray(longitudes_deg, dtype=np.float64))
    return np.asarray(_haversine(lat1, lon1, lat2, lon2), dtype=np.float64)


def bearing_degrees(a: GeoPoint, b: GeoPoint) -> float:
    """Compute the initial compass bearing from `a` toward `b`.

    Parameters
    ----------
    a : GeoPoint
        Start point.
    b : GeoPoint
        Destination.

    Returns
    -------
    float
        Bearing in degrees in [0, 360), clockwise from north.

    Notes
    -----
    θ = atan2(sin Δλ · cos φ2, cos φ1 · sin φ2 − sin φ1 · cos φ2 · cos Δλ)

    The bearing between identical points is undefined (atan2(0, 0)); 0 is
    returned instead. Rounding in the denominator would otherwise yield
    either 0 or 180 depending on the latitude.
    """
    if a.latitude == b.latitude and a.longitude == b.longitude:
        return 0.0

    lat1, lon1 = a.to_radians()
    lat2, lon2 = b.to_radians()
    dlon = lon2 - lon1

    y = np.sin(dlon) * np.cos(lat2)
    x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)
    theta = np.arctan2(y, x)

    bearing = (np.degrees(theta) + _FULL_TURN_DEG) % _FULL_TURN_DEG
    return float(bearing)


def ellipsoidal_distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """Compute the WGS84 geodesic distance between two points.

    This wraps `pyproj`, which uses the GeographicLib algorithms. It is
    used to measure the error of the spherical model, never for placement.
    """
    _, _, distance_m = _wgs84_geod.inv(
        a.longitude, a.latitude, b.longitude, b.latitude
    )
    return float(distance_m)
