"""
Globe Session with Optional Tile-Map Sync.

Owns the globe view's state: the user's marker, country markers, the
globe's spin angle and, when map sync is enabled, the requests sent to the
2D tile map.

Map Sync
--------
With `GlobeConfig.map_sync` on:
- every country added to the globe is queued as a `MapMarker`;
- selecting a globe marker returns a `MapView` centering the map on it;
- a click on the map queues a "Position: lat, lon" `MapMarker`.
A click on the map (or on a map marker) refocuses the camera with
`focus_on` whether sync is on or off.
"""

from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional

from common.logging_config import get_logger
from common.types import GeoPoint, Marker, SceneVector3
from geospatial.spherical_projection import focus_camera_position, project
from scene.config import GlobeConfig
from scene.countries import CountryRecord
from scene.readout import describe_position_error

logger = get_logger(__name__)

USER_MARKER_ID = "user"
USER_COLOR = 0xff0000
COUNTRY_COLOR = 0x00ff00
BASE_MARKER_SIZE = 0.1


@dataclass(frozen=True)
class GlobeMarker:
    """A marker placed on the globe, in the globe group's local frame."""
    marker: Marker
    position: SceneVector3
    color: int
    size: float
    texture_url: Optional[str] = None


@dataclass(frozen=True)
class MapMarker:
    """A circle marker to draw on the tile map."""
    latitude: float
    longitude: float
    label: str


@dataclass(frozen=True)
class MapView:
    """A request to center the tile map."""
    latitude: float
    longitude: float
    zoom: int
    popup: str = ""


class GlobeSession:
    """Host-side state for the globe view.

    Parameters
    ----------
    config : GlobeConfig, optional
        Globe geometry, camera limits and map-sync switch.
    """

    def __init__(self, config: Optional[GlobeConfig] = None):
        self.config = config or GlobeConfig()
        self._markers: Dict[Hashable, GlobeMarker] = {}
        self._pending_map_markers: List[MapMarker] = []
        self._yaw = 0.0

    @property
    def yaw(self) -> float:
        """Current rotation of the globe about the vertical axis, in radians."""
        return self._yaw

    @property
    def markers(self) -> List[GlobeMarker]:
        return list(self._markers.values())

    @property
    def user_marker(self) -> Optional[GlobeMarker]:
        return self._markers.get(USER_MARKER_ID)

    def _place(
        self,
        marker: Marker,
        color: int,
        scale: float,
        texture_url: Optional[str] = None
    ) -> GlobeMarker:
        placed = GlobeMarker(
            marker=marker,
            position=project(marker.geo_point, self.config.marker_radius),
            color=color,
            size=BASE_MARKER_SIZE * scale,
            texture_url=texture_url,
        )
        self._markers[marker.id] = placed
        return placed

    def on_position_fix(self, point: GeoPoint) -> GlobeMarker:
        """Place (or move) the user's marker."""
        logger.info(f"User position: {point.latitude:.4f}, {point.longitude:.4f}")
        return self._place(Marker(USER_MARKER_ID, point, "You"), USER_COLOR, 2.0)

    def on_position_error(self, code: int, message: str = "") -> GlobeMarker:
        """Place the user's marker at the default position."""
        logger.warning(f"Geolocation failed: {describe_position_error(code, message)}")
        return self._place(
            Marker(USER_MARKER_ID, self.config.default_position, "Paris (default)"),
            USER_COLOR,
            2.0,
        )

    def add_country(self, record: CountryRecord) -> GlobeMarker:
        """Add a country marker, mirroring it onto the map when synced."""
        placed = self._place(record.to_marker(), COUNTRY_COLOR, 1.5, record.flag_url)
        if self.config.map_sync:
            self._pending_map_markers.append(
                MapMarker(record.latitude, record.longitude, record.name)
            )
        logger.debug(f"Country marker {record.name} at ({record.latitude:.2f}, {record.longitude:.2f})")
        return placed

    def drain_map_markers(self) -> List[MapMarker]:
        """Return the map markers queued since the last call and clear the queue."""
        pending, self._pending_map_markers = self._pending_map_markers, []
        return pending

    def tick(self) -> float:
        """Advance the globe spin by one frame and return the new yaw."""
        self._yaw += self.config.spin_per_frame
        return self._yaw

    def focus_on(self, point: GeoPoint) -> SceneVector3:
        """Camera position that brings `point` to the front of the globe."""
        distance = self.config.clamp_camera_distance(self.config.camera_distance)
        position = focus_camera_position(point, self.config.radius, distance, self._yaw)
        logger.info(
            f"Focus on {point.latitude:.2f}, {point.longitude:.2f}: camera at "
            f"x={position.x:.2f}, y={position.y:.2f}, z={position.z:.2f}"
        )
        return position

    def on_map_click(self, point: GeoPoint) -> SceneVector3:
        """Mark the clicked map point (when synced) and focus the globe on it."""
        if self.config.map_sync:
            self._pending_map_markers.append(MapMarker(
                point.latitude,
                point.longitude,
                f"Position: {point.latitude:.2f}, {point.longitude:.2f}",
            ))
        return self.focus_on(point)

    def select_marker(self, marker_id: Hashable) -> Optional[MapView]:
        """Center the tile map on a clicked globe marker.

        Returns None when map sync is off.

        Raises
        ------
        KeyError
            If no marker has this id.
        """
        if marker_id not in self._markers:
            raise KeyError(f"No globe marker with ID {marker_id}")
        if not self.config.map_sync:
            return None

        marker = self._markers[marker_id].marker
        return MapView(
            latitude=marker.geo_point.latitude,
            longitude=marker.geo_point.longitude,
            zoom=self.config.focus_zoom,
            popup=marker.label or "Marker",
        )
