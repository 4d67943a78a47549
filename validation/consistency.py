"""
Consistency Checks for Geo-Spatial Scene Projection.

The projection core never rejects input. This module lets a host verify
readings and outputs when it wants to, e.g. during development or in tests.

Check Categories
----------------
1. Input bounds (latitude/longitude, orientation angles)
2. Geometric invariants (projected points lie on the sphere)
3. Model error (spherical distance against the WGS84 geodesic)
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

import numpy as np
from numpy.typing import NDArray

from common.logging_config import get_logger
from common.types import GeoPoint, OrientationSample
from geospatial.great_circle import distance_meters, ellipsoidal_distance_meters


class ValidationError(ValueError):
    """Raised by a strict checker when a check fails."""


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the check.
    passed : bool
        Whether the check passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class ConsistencyChecker:
    """Checker for readings and projected outputs.

    Parameters
    ----------
    strict_mode : bool
        If True, raise `ValidationError` on the first failed check.
    log_violations : bool
        Whether to log failed checks.
    """

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._logger = get_logger("ConsistencyChecker")

    def _report(self, result: ValidationResult) -> ValidationResult:
        if not result.passed:
            if self.log_violations:
                self._logger.warning(f"{result.test_name}: {result.message}")
            if self.strict_mode:
                raise ValidationError(f"{result.test_name}: {result.message}")
        return result

    def check_position_bounds(self, points: Iterable[GeoPoint]) -> ValidationResult:
        """Check that positions are finite lat/lon within their ranges."""
        coords = np.array([(p.latitude, p.longitude) for p in points], dtype=np.float64)
        if coords.size == 0:
            return ValidationResult("position_bounds", True, "No positions", {})

        lat = coords[:, 0]
        lon = coords[:, 1]

        # NaN compares False everywhere, so count it explicitly
        lat_violations = ~((lat >= -90) & (lat <= 90))
        lon_violations = ~((lon >= -180) & (lon <= 180))
        num_violations = int(np.sum(lat_violations) + np.sum(lon_violations))

        return self._report(ValidationResult(
            test_name="position_bounds",
            passed=num_violations == 0,
            message=f"Position bounds check: {num_violations} violations",
            details={
                'num_points': len(coords),
                'num_violations': num_violations,
            }
        ))

    def check_orientation_bounds(self, sample: OrientationSample) -> ValidationResult:
        """Check heading in [0, 360), pitch in [-180, 180], roll in [-90, 90]."""
        heading, pitch, roll = sample.filled()

        violations = []
        if not 0 <= heading < 360:
            violations.append('heading')
        if not -180 <= pitch <= 180:
            violations.append('pitch')
        if not -90 <= roll <= 90:
            violations.append('roll')

        return self._report(ValidationResult(
            test_name="orientation_bounds",
            passed=not violations,
            message=f"Orientation bounds check: {len(violations)} violations",
            details={
                'violations': violations,
                'missing': [
                    name for name, value in
                    (('heading', sample.heading), ('pitch', sample.pitch), ('roll', sample.roll))
                    if value is None
                ],
            }
        ))

    def check_on_sphere(
        self,
        positions: NDArray[np.float64],
        radius: float,
        tolerance: float = 1e-9
    ) -> ValidationResult:
        """Check that projected positions (N, 3) lie at `radius` from the origin."""
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        if len(positions) == 0:
            return ValidationResult("on_sphere", True, "No positions", {})

        norms = np.linalg.norm(positions, axis=1)
        max_error = float(np.max(np.abs(norms - abs(radius))))
        allowed = tolerance * max(abs(radius), 1.0)

        return self._report(ValidationResult(
            test_name="on_sphere",
            passed=max_error <= allowed,
            message=f"On-sphere check: max radial error {max_error:.3e}",
            details={
                'radius': radius,
                'max_error': max_error,
                'tolerance': allowed,
            }
        ))

    def check_spherical_error(
        self,
        a: GeoPoint,
        b: GeoPoint,
        max_relative_error: float = 0.005
    ) -> ValidationResult:
        """Compare the haversine distance with the WGS84 geodesic distance."""
        spherical = distance_meters(a, b)
        ellipsoidal = ellipsoidal_distance_meters(a, b)

        if ellipsoidal == 0.0:
            relative_error = 0.0 if spherical == 0.0 else float('inf')
        else:
            relative_error = abs(spherical - ellipsoidal) / ellipsoidal

        return self._report(ValidationResult(
            test_name="spherical_error",
            passed=relative_error <= max_relative_error,
            message=f"Spherical model error: {relative_error:.4%}",
            details={
                'spherical_m': spherical,
                'ellipsoidal_m': ellipsoidal,
                'relative_error': relative_error,
            }
        ))

    def check_all(
        self,
        points: List[GeoPoint],
        positions: NDArray[np.float64],
        radius: float,
        sample: OrientationSample
    ) -> List[ValidationResult]:
        """Run the bounds and invariant checks together."""
        return [
            self.check_position_bounds(points),
            self.check_on_sphere(positions, radius),
            self.check_orientation_bounds(sample),
        ]
