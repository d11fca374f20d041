"""Spectral class → star material palette."""

from starfield.models import MaterialDescriptor

# Every class letter that gets its own material. Wolf-Rayet (W) was once
# folded into O; C and S are carbon red giants.
SPECTRAL_CLASSES = "OWBAFGKMCS"

# Colors taken from the Harvard spectral classification table on Wikipedia.
_CLASS_COLORS: dict[str, tuple[float, float, float]] = {
    "O": (0.57, 0.71, 1.0),  # RGB(146, 181, 255)
    "W": (0.57, 0.71, 1.0),
    "B": (0.63, 0.75, 1.0),  # RGB(162, 192, 255)
    "A": (0.83, 0.875, 1.0),  # RGB(213, 224, 255)
    "F": (0.97, 0.95, 1.0),  # RGB(249, 245, 255)
    "G": (1.0, 0.92, 0.88),  # RGB(255, 237, 227)
    "K": (1.0, 0.85, 0.70),  # RGB(255, 218, 181)
    "M": (1.0, 0.70, 0.42),  # RGB(255, 181, 108)
    "C": (1.0, 0.70, 0.42),
    "S": (1.0, 0.70, 0.42),
}
_DEFAULT_COLOR = (1.0, 1.0, 1.0)  # N, p, d, ...


def spectral_class_to_color(cls: str) -> tuple[float, float, float]:
    """Return the contrast-boosted RGB color for a spectral class letter.

    Lookup is case-insensitive; unknown classes are white.
    """
    r, g, b = _CLASS_COLORS.get(cls.upper(), _DEFAULT_COLOR)
    # Squaring each channel increases the color contrast a bit.
    return (r * r, g * g, b * b)


DEFAULT_MATERIAL = MaterialDescriptor(spectral_class="", color=spectral_class_to_color(""))


def build_palette() -> dict[str, MaterialDescriptor]:
    """Create one material per known spectral class.

    Returns:
        Mapping from class letter to its MaterialDescriptor (10 entries).
    """
    return {
        cls: MaterialDescriptor(spectral_class=cls, color=spectral_class_to_color(cls))
        for cls in SPECTRAL_CLASSES
    }


def lookup_material(
    palette: dict[str, MaterialDescriptor], cls: str
) -> MaterialDescriptor:
    """Material for a star's spectral class, falling back to DEFAULT_MATERIAL."""
    return palette.get(cls.upper(), DEFAULT_MATERIAL)
