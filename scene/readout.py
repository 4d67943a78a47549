"""Human-readable readouts for position fixes and orientation samples."""

from datetime import datetime
from typing import Optional
import math

from common.types import OrientationSample

MISSING = "—"

POSITION_ERROR_MESSAGES = {
    1: "Permission denied.",
    2: "Position unavailable.",
    3: "Timed out.",
}


def _missing(value: Optional[float]) -> bool:
    return value is None or math.isnan(value)


def format_coordinate(value: Optional[float], digits: int = 6) -> str:
    return MISSING if _missing(value) else f"{value:.{digits}f}"


def format_altitude(value: Optional[float]) -> str:
    return MISSING if _missing(value) else f"{value:.1f} m"


def format_accuracy(value: Optional[float]) -> str:
    return MISSING if _missing(value) else f"{value:.1f}"


def format_speed(value: Optional[float]) -> str:
    return MISSING if _missing(value) else f"{value:.2f}"


def format_timestamp(epoch_ms: Optional[float]) -> str:
    """Format a fix timestamp given in milliseconds since the epoch (local time)."""
    if _missing(epoch_ms) or not epoch_ms:
        return MISSING
    return datetime.fromtimestamp(epoch_ms / 1000.0).strftime("%Y-%m-%d %H:%M:%S")


def format_orientation(sample: OrientationSample) -> str:
    """Tilt readout, e.g. ``"β=12° γ=-3°"``."""
    _, pitch, roll = sample.filled()
    return f"β={pitch:.0f}° γ={roll:.0f}°"


def format_heading(sample: OrientationSample) -> str:
    heading, _, _ = sample.filled()
    return f"{heading:.0f}°"


def describe_position_error(code: int, message: str = "") -> str:
    """Map a geolocation error code to a status message."""
    text = POSITION_ERROR_MESSAGES.get(code, "Error")
    if message:
        text += f" ({message})"
    return text
