"""
Geometric Constants for Geo-Spatial Scene Projection.

This module provides the constants used by the projection and great-circle
code together with their provenance. All values are in SI units unless the
unit field says otherwise.

References
----------
- Haversine radius: mean Earth radius rounded to 6,371 km
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A constant with its unit and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    unit: str
    source: str
    description: str


class GeoConstants:
    """Registry of constants used throughout the system.

    Spherical Earth
    ---------------
    The great-circle math assumes a sphere of fixed radius. The value is
    fixed so that placements are reproducible across runs.

    Reference Ellipsoid
    -------------------
    The WGS84 parameters are used only to quantify the error of the
    spherical model; no placement depends on them.
    """

    # =========================================================================
    # Spherical Earth
    # =========================================================================

    EARTH_RADIUS_HAVERSINE: Final[Constant] = Constant(
        value=6_371_000.0,
        unit="m",
        source="Mean Earth radius, rounded",
        description="Sphere radius used by the haversine distance"
    )

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    EARTH_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    # =========================================================================
    # Scene Conventions
    # =========================================================================

    AZIMUTH_OFFSET_DEG: Final[Constant] = Constant(
        value=180.0,
        unit="degree",
        source="Globe texture alignment",
        description="Offset added to longitude before the polar-to-Cartesian mapping"
    )

    FULL_TURN_DEG: Final[Constant] = Constant(
        value=360.0,
        unit="degree",
        source="Definition",
        description="Compass bearings are normalized into [0, FULL_TURN_DEG)"
    )
