"""Data model definitions — explicit boundaries between parse, transform, and scene layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StarRecord:
    """One parsed Bright Star Catalog entry."""

    id: int  # Harvard Revised / BSC number
    right_ascension: float  # Right ascension (degrees, [0, 360))
    declination: float  # Declination (degrees, [-90, 90])
    magnitude: float  # Visual magnitude (lower = brighter)
    spectral_class: str  # First character of the spectral type ("" if absent)
    name: str  # Display name, possibly empty


@dataclass(frozen=True)
class MaterialDescriptor:
    """Emissive star material shared by every star of one spectral class."""

    spectral_class: str  # Class letter ("" for the fallback material)
    color: tuple[float, float, float]  # Contrast-boosted RGB, used as emissive and base color
    metallic: float = 0.0
    roughness: float = 1.0

    @property
    def base_color(self) -> tuple[float, float, float, float]:
        return (*self.color, 1.0)

    @property
    def extras(self) -> dict[str, str]:
        return {"cls": self.spectral_class}


@dataclass(frozen=True)
class StarTransform:
    """Placement of one star billboard on the unit sphere. Already precision-reduced."""

    rotation: tuple[float, float, float, float]  # Quaternion (x, y, z, w)
    scale: tuple[float, float, float]  # Uniform scale
    translation: tuple[float, float, float]  # Point on the unit sphere
