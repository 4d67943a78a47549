"""
Common utilities for the geo-spatial scene projection system.

This package provides foundational components used across all modules:
- Constants with provenance
- Geographic, scene and orientation data types
- Unit registry for scene scaling
- Logging infrastructure
"""

from common.constants import GeoConstants
from common.units import ureg, Q_, scale_per_meter, length_in_scene_units
from common.types import (
    GeoPoint,
    SceneVector3,
    OrientationSample,
    Marker,
)
from common.logging_config import get_logger

__all__ = [
    "GeoConstants",
    "ureg",
    "Q_",
    "scale_per_meter",
    "length_in_scene_units",
    "GeoPoint",
    "SceneVector3",
    "OrientationSample",
    "Marker",
    "get_logger",
]
