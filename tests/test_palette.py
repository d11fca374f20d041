import pytest

from starfield.palette import (
    DEFAULT_MATERIAL,
    SPECTRAL_CLASSES,
    build_palette,
    lookup_material,
    spectral_class_to_color,
)


def test_one_descriptor_per_class():
    palette = build_palette()

    assert sorted(palette) == sorted("OWBAFGKMCS")
    assert len(set(palette.values())) == 10
    for cls, descriptor in palette.items():
        assert descriptor.spectral_class == cls
        assert descriptor.extras == {"cls": cls}


def test_channels_in_unit_range():
    for descriptor in build_palette().values():
        assert all(0.0 <= c <= 1.0 for c in descriptor.color)
        assert descriptor.base_color == (*descriptor.color, 1.0)
        assert descriptor.metallic == 0.0
        assert descriptor.roughness == 1.0


@pytest.mark.parametrize(
    "cls, rgb",
    [
        ("O", (0.57, 0.71, 1.0)),
        ("W", (0.57, 0.71, 1.0)),
        ("B", (0.63, 0.75, 1.0)),
        ("A", (0.83, 0.875, 1.0)),
        ("F", (0.97, 0.95, 1.0)),
        ("G", (1.0, 0.92, 0.88)),
        ("K", (1.0, 0.85, 0.70)),
        ("M", (1.0, 0.70, 0.42)),
        ("C", (1.0, 0.70, 0.42)),
        ("S", (1.0, 0.70, 0.42)),
        ("N", (1.0, 1.0, 1.0)),
        ("", (1.0, 1.0, 1.0)),
    ],
)
def test_colors_are_squared(cls, rgb):
    assert spectral_class_to_color(cls) == pytest.approx(tuple(c * c for c in rgb))


def test_color_lookup_is_case_insensitive():
    assert spectral_class_to_color("k") == spectral_class_to_color("K")


def test_lookup_material():
    palette = build_palette()

    assert lookup_material(palette, "G") is palette["G"]
    assert lookup_material(palette, "g") is palette["G"]
    for cls in ("", "N", "p", "d", "?"):
        assert lookup_material(palette, cls) is DEFAULT_MATERIAL


def test_default_material_is_white():
    assert DEFAULT_MATERIAL.color == (1.0, 1.0, 1.0)
    assert DEFAULT_MATERIAL.extras == {"cls": ""}
    assert DEFAULT_MATERIAL not in build_palette().values()


def test_alphabet():
    assert SPECTRAL_CLASSES == "OWBAFGKMCS"
