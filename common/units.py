"""
Unit Registry for Scene Scaling.

This module provides a centralized unit system using the `pint` library so
that the scene scale and sphere radius can be given with explicit units.
Scene space has its own dimension, `[scene_length]`, measured in
`scene_unit`; it is deliberately incommensurable with meters so that a
scale cannot be confused with a length.

Example Usage
-------------
>>> from common.units import Q_, scale_per_meter
>>> scale_per_meter(Q_(100, 'scene_unit / kilometer'))
0.1
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

try:
    ureg.define("scene_unit = [scene_length]")
except pint.errors.RedefinitionError:
    pass

# Convenience alias for creating quantities
Q_ = ureg.Quantity

SCALE_UNIT = "scene_unit / meter"
SCENE_LENGTH_UNIT = "scene_unit"

ScaleLike = Union[float, int, pint.Quantity]


def _to_magnitude(value: ScaleLike, unit: str, name: str) -> float:
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(unit).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(
                f"Parameter '{name}' has incompatible units. "
                f"Expected {unit}, got {value.units}"
            ) from e
    return float(value)


def scale_per_meter(scale: ScaleLike) -> float:
    """Return a scene scale as a bare float in scene units per meter.

    Parameters
    ----------
    scale : float or pint.Quantity
        Either a bare number, taken as scene units per meter, or a quantity
        convertible to ``scene_unit / meter``.

    Raises
    ------
    ValueError
        If a quantity has incompatible units.
    """
    return _to_magnitude(scale, SCALE_UNIT, "scale")


def length_in_scene_units(length: ScaleLike) -> float:
    """Return a scene-space length (radius, camera distance) as a float."""
    return _to_magnitude(length, SCENE_LENGTH_UNIT, "length")
