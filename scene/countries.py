"""
Country records for the globe view.

Country data comes from a remote lookup service (REST Countries v3.1,
``/v3.1/alpha/{code}``). Fetching it is the host's job; this module only
turns one decoded JSON response into a `CountryRecord`.
"""

from dataclasses import dataclass
from typing import Any, Optional

from common.types import GeoPoint, Marker
from scene.errors import CountryRecordError


@dataclass(frozen=True)
class CountryRecord:
    """A country's representative position and flag.

    Attributes
    ----------
    code : str
        ISO 3166-1 alpha-2 code the record was requested with.
    name : str
        Common English name.
    latitude, longitude : float
        Representative position in DEGREES.
    flag_url : str, optional
        URL of a PNG flag image, used as the marker texture.
    """
    code: str
    name: str
    latitude: float
    longitude: float
    flag_url: Optional[str] = None

    @property
    def geo_point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    def to_marker(self) -> Marker:
        return Marker(id=self.code, geo_point=self.geo_point, label=self.name)


def parse_country_payload(code: str, payload: Any) -> Optional[CountryRecord]:
    """Parse a REST Countries alpha-code response.

    Parameters
    ----------
    code : str
        The requested country code.
    payload : list
        Decoded JSON body: a list whose first element carries ``latlng``,
        ``name.common`` and ``flags.png``.

    Returns
    -------
    CountryRecord or None
        None when the service returned no entry for the code.

    Raises
    ------
    CountryRecordError
        If the entry lacks a name or a two-element ``latlng``.
    """
    if not payload:
        return None
    if not isinstance(payload, list):
        raise CountryRecordError(
            f"Country payload for {code} must be a list, got {type(payload).__name__}"
        )

    entry = payload[0]
    try:
        lat, lon = entry["latlng"][:2]
        name = entry["name"]["common"]
    except (KeyError, TypeError, ValueError) as e:
        raise CountryRecordError(f"Malformed country payload for {code}: {e!r}") from e

    flags = entry.get("flags") or {}

    return CountryRecord(
        code=code,
        name=name,
        latitude=float(lat),
        longitude=float(lon),
        flag_url=flags.get("png"),
    )
