"""
Host Application Layer.

Sessions that own the state the browser exercises kept in globals (latest
position fix, latest orientation, marker sets, globe spin) and feed it into
the stateless `geospatial` core.
"""

from scene.errors import SceneError, ConfigurationError, CountryRecordError
from scene.config import ARConfig, GlobeConfig, PARIS, PARIS_WITH_ALTITUDE
from scene.countries import CountryRecord, parse_country_payload
from scene.ar_session import ARFrame, ARSession, PARIS_LANDMARKS
from scene.globe_session import GlobeMarker, GlobeSession, MapMarker, MapView

__all__ = [
    "SceneError",
    "ConfigurationError",
    "CountryRecordError",
    "ARConfig",
    "GlobeConfig",
    "PARIS",
    "PARIS_WITH_ALTITUDE",
    "CountryRecord",
    "parse_country_payload",
    "ARFrame",
    "ARSession",
    "PARIS_LANDMARKS",
    "GlobeMarker",
    "GlobeSession",
    "MapMarker",
    "MapView",
]
