"""
Spherical Projection of Geographic Coordinates into Scene Space.

This module places geographic points on a sphere centered at the scene
origin, as used by the globe view.

Convention
----------
With colatitude φ = 90° − latitude and azimuth θ = longitude + 180°:

    x = −r · sin φ · cos θ
    y =  r · cos φ
    z =  r · sin φ · sin θ

- The north pole maps to scene "up" (+Y).
- (0°, 0°) maps to +X and the antimeridian (0°, 180°) to −X, which places
  the texture seam where the globe texture expects it.
- Longitude 90°E maps to −Z, 90°W to +Z.

The +180° offset and the signs above must not be re-derived: the globe
texture and every marker rendered on it rely on them.
"""

import numpy as np
from numpy.typing import NDArray

from common.constants import GeoConstants
from common.types import GeoPoint, SceneVector3


_AZIMUTH_OFFSET = GeoConstants.AZIMUTH_OFFSET_DEG.value


def _polar_angles(latitude_deg, longitude_deg):
    phi = np.radians(90.0 - latitude_deg)
    theta = np.radians(longitude_deg + _AZIMUTH_OFFSET)
    return phi, theta


def project(point: GeoPoint, radius: float) -> SceneVector3:
    """Project a geographic point onto a sphere of the given radius.

    Parameters
    ----------
    point : GeoPoint
        Position to project. Altitude is ignored.
    radius : float
        Sphere radius in scene units.

    Returns
    -------
    SceneVector3
        Point at distance `radius` from the origin.

    Notes
    -----
    Never raises. Out-of-range latitude or longitude still yields a point
    on the sphere.

    Examples
    --------
    >>> v = project(GeoPoint(90.0, 0.0), radius=1.0)
    >>> round(v.y, 6)
    1.0
    """
    phi, theta = _polar_angles(point.latitude, point.longitude)

    sin_phi = np.sin(phi)
    x = -(radius * sin_phi * np.cos(theta))
    y = radius * np.cos(phi)
    z = radius * sin_phi * np.sin(theta)

    return SceneVector3(float(x), float(y), float(z))


def project_batch(
    latitudes_deg: NDArray[np.float64],
    longitudes_deg: NDArray[np.float64],
    radius: float
) -> NDArray[np.float64]:
    """Vectorized `project`.

    Parameters
    ----------
    latitudes_deg, longitudes_deg : ndarray
        Arrays of the same (or broadcastable) shape, in degrees.
    radius : float
        Sphere radius in scene units.

    Returns
    -------
    ndarray
        Array of shape (..., 3) holding (x, y, z).
    """
    phi, theta = _polar_angles(
        np.asarray(latitudes_deg, dtype=np.float64),
        np.asarray(longitudes_deg, dtype=np.float64)
    )

    sin_phi = np.sin(phi)
    x = -(radius * sin_phi * np.cos(theta))
    y = radius * np.cos(phi)
    z = radius * sin_phi * np.sin(theta)

    return np.stack(np.broadcast_arrays(x, y, z), axis=-1)


def rotate_about_vertical(
    vector: SceneVector3,
    yaw_rad: float
) -> SceneVector3:
    """Rotate a scene vector about the +Y axis.

    Uses the right-handed renderer convention:
    x' = x cos ψ + z sin ψ, z' = −x sin ψ + z cos ψ.
    """
    cos_yaw = np.cos(yaw_rad)
    sin_yaw = np.sin(yaw_rad)
    return SceneVector3(
        float(vector.x * cos_yaw + vector.z * sin_yaw),
        vector.y,
        float(-vector.x * sin_yaw + vector.z * cos_yaw),
    )


def focus_camera_position(
    point: GeoPoint,
    radius: float,
    camera_distance: float,
    globe_yaw_rad: float = 0.0
) -> SceneVector3:
    """Compute where to put a camera so that it faces `point` on the globe.

    The camera is placed on the ray from the globe center through the
    projected point, `camera_distance` away from the center, and is expected
    to look at the origin.

    Parameters
    ----------
    point : GeoPoint
        Location to bring to the front.
    radius : float
        Globe radius in scene units.
    camera_distance : float
        Distance from the globe center to the camera.
    globe_yaw_rad : float
        Current rotation of the globe about the vertical axis. The globe
        spins continuously, so the point's world position depends on it.

    Returns
    -------
    SceneVector3
        Camera position in world space.
    """
    local = project(point, radius)
    world = rotate_about_vertical(local, globe_yaw_rad)

    length = world.norm()
    if length == 0.0:
        # Zero radius: fall back to looking down the +Z axis.
        return SceneVector3(0.0, 0.0, float(camera_distance))

    return world.scaled(camera_distance / length)
