"""
Device Orientation to Camera Rotation.

Maps a device-orientation reading onto the Euler rotation of the AR
camera. The mapping is a raw passthrough: no smoothing, no filtering and
no state between calls.

Axis Convention
---------------
The rotation is returned as Euler angles applied in "YXZ" order:

1. heading about the vertical axis (Y),
2. pitch about the lateral axis (X),
3. roll about the depth axis (Z), with its sign inverted.

The roll inversion and the order together match the renderer's look
direction. Changing either makes the overlay appear mirrored or tilted
against the camera feed.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from common.types import OrientationSample, SceneVector3


EULER_ORDER = "YXZ"


def _rx(angle: float) -> NDArray[np.float64]:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def _ry(angle: float) -> NDArray[np.float64]:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def _rz(angle: float) -> NDArray[np.float64]:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


@dataclass(frozen=True)
class RotationTriple:
    """Euler rotation of the scene camera, in RADIANS.

    Attributes
    ----------
    x : float
        Rotation about X (pitch).
    y : float
        Rotation about Y (heading).
    z : float
        Rotation about Z (negated roll).
    order : str
        Axis application order, always "YXZ".
    """
    x: float
    y: float
    z: float
    order: str = EULER_ORDER

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def as_matrix(self) -> NDArray[np.float64]:
        """Return the 3x3 rotation matrix R = Ry(y) · Rx(x) · Rz(z)."""
        return _ry(self.y) @ _rx(self.x) @ _rz(self.z)

    def look_direction(self) -> SceneVector3:
        """Forward vector of a camera that looks down −Z when unrotated."""
        forward = self.as_matrix() @ np.array([0.0, 0.0, -1.0])
        return SceneVector3.from_array(forward)


IDENTITY_ROTATION = RotationTriple(0.0, 0.0, 0.0)


def camera_rotation(sample: OrientationSample) -> RotationTriple:
    """Convert an orientation sample into the camera's Euler rotation.

    Parameters
    ----------
    sample : OrientationSample
        Latest device reading in degrees. Missing or NaN fields count as 0.

    Returns
    -------
    RotationTriple
        (radians(pitch), radians(heading), −radians(roll)) in "YXZ" order.
        An all-zero sample gives the identity rotation.
    """
    heading_deg, pitch_deg, roll_deg = sample.filled()

    return RotationTriple(
        x=float(np.radians(pitch_deg)),
        y=float(np.radians(heading_deg)),
        z=0.0 - float(np.radians(roll_deg)),
    )
