# stlmesh/config.py

from dataclasses import dataclass
from enum import Enum


class UnitScale(Enum):
    """Unit the STL coordinates are authored in, valued by its factor to meters."""

    METER = 1.0
    MILLIMETER = 0.001

    @property
    def factor(self) -> float:
        return float(self.value)

    @classmethod
    def from_name(cls, name: str) -> "UnitScale":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(u.name.lower() for u in cls)
            raise ValueError(f"Unknown unit scale '{name}' (expected one of: {choices})")


# Default decode settings (can be overridden per call)
DEFAULT_CORRECT_FOR_PRINT_ORIENTATION = True
DEFAULT_UNIT_SCALE = UnitScale.METER


@dataclass(frozen=True)
class DecodeConfig:
    """Spatial corrections applied to a decoded mesh.

    correct_for_print_orientation
        Rotate +90 degrees about X so the Z-up build plate of a 3D printer
        becomes Y-up.
    unit_scale
        Uniform scale applied after the rotation.
    """

    correct_for_print_orientation: bool = DEFAULT_CORRECT_FOR_PRINT_ORIENTATION
    unit_scale: UnitScale = DEFAULT_UNIT_SCALE
