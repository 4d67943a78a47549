"""
AR Overlay Session.

Owns the state that the AR exercise kept in globals: the latest position
fix, the latest orientation sample and the marker set. Sensor callbacks
push readings in; the render loop pulls a frame out.

Update Discipline
-----------------
Both streams are last-write-wins. A position fix immediately recomputes
every marker placement; an orientation sample immediately recomputes the
camera rotation. Nothing is queued, throttled or compared by timestamp.
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Optional

from common.logging_config import get_logger
from common.types import GeoPoint, Marker, OrientationSample, SceneVector3
from geospatial.orientation import IDENTITY_ROTATION, RotationTriple, camera_rotation
from geospatial.relative_positioning import place_markers
from scene.config import ARConfig
from scene.readout import describe_position_error, format_coordinate

logger = get_logger(__name__)


PARIS_LANDMARKS: List[Marker] = [
    Marker("tour-eiffel", GeoPoint(48.8584, 2.2945, 300.0), "Tour Eiffel"),
    Marker("arc-de-triomphe", GeoPoint(48.8738, 2.2950, 50.0), "Arc de Triomphe"),
    Marker("sacre-coeur", GeoPoint(48.8867, 2.3431, 130.0), "Sacré-Cœur"),
    Marker("notre-dame", GeoPoint(48.8530, 2.3499, 90.0), "Notre-Dame"),
]


@dataclass(frozen=True)
class ARFrame:
    """Everything the renderer needs for one AR frame.

    Attributes
    ----------
    placements : dict
        Marker id to scene offset from the viewer. Empty until the first
        position fix (or fallback) arrives.
    rotation : RotationTriple
        Camera rotation from the latest orientation sample.
    """
    placements: Dict[Hashable, SceneVector3] = field(default_factory=dict)
    rotation: RotationTriple = IDENTITY_ROTATION


class ARSession:
    """Host-side state for the AR overlay.

    Parameters
    ----------
    config : ARConfig, optional
        Scale and fallback position.
    markers : iterable of Marker, optional
        Points of interest (default: four Paris landmarks).

    Examples
    --------
    >>> session = ARSession()
    >>> placements = session.on_position_fix(GeoPoint(48.8566, 2.3522, 35.0))
    >>> sorted(placements)[0]
    'arc-de-triomphe'
    """

    def __init__(
        self,
        config: Optional[ARConfig] = None,
        markers: Optional[Iterable[Marker]] = None
    ):
        self.config = config or ARConfig()
        self._markers: List[Marker] = list(PARIS_LANDMARKS if markers is None else markers)
        self._user: Optional[GeoPoint] = None
        self._orientation = OrientationSample()
        self._placements: Dict[Hashable, SceneVector3] = {}
        self._rotation = IDENTITY_ROTATION
        self._status = "Starting"

    @property
    def user(self) -> Optional[GeoPoint]:
        return self._user

    @property
    def orientation(self) -> OrientationSample:
        return self._orientation

    @property
    def markers(self) -> List[Marker]:
        return list(self._markers)

    @property
    def status(self) -> str:
        return self._status

    def _set_status(self, message: str) -> None:
        self._status = message
        logger.info(f"Status: {message}")

    def _recompute(self) -> None:
        if self._user is None:
            self._placements = {}
            return
        self._placements = place_markers(self._user, self._markers, self.config.scale)

    def on_position_fix(self, point: GeoPoint) -> Dict[Hashable, SceneVector3]:
        """Replace the viewer position and return the recomputed placements."""
        self._user = point
        self._recompute()
        logger.debug(
            f"Position fix {format_coordinate(point.latitude)}, "
            f"{format_coordinate(point.longitude)}; "
            f"{len(self._placements)} markers placed"
        )
        self._set_status("GPS position acquired")
        return dict(self._placements)

    def on_position_error(self, code: int, message: str = "") -> Dict[Hashable, SceneVector3]:
        """Fall back to the default position and return the recomputed placements."""
        logger.warning(f"Geolocation failed: {describe_position_error(code, message)}")
        self._user = self.config.default_position
        self._recompute()
        self._set_status("GPS unavailable, using default position")
        return dict(self._placements)

    def on_orientation(self, sample: OrientationSample) -> RotationTriple:
        """Replace the orientation sample and return the new camera rotation."""
        self._orientation = sample
        self._rotation = camera_rotation(sample)
        return self._rotation

    def set_markers(self, markers: Iterable[Marker]) -> None:
        """Replace the marker set and recompute placements if the user is known."""
        self._markers = list(markers)
        self._recompute()

    def frame(self) -> ARFrame:
        """Snapshot of the latest placements and rotation."""
        return ARFrame(placements=dict(self._placements), rotation=self._rotation)
