"""Matplotlib static PNG preview of the catalog, colored like the glTF materials."""

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from starfield.models import MaterialDescriptor, StarRecord
from starfield.palette import lookup_material


def render_preview_chart(
    records: Sequence[StarRecord],
    palette: dict[str, MaterialDescriptor],
    chart_size: int = 12,
) -> Figure:
    """Render the parsed stars on an equirectangular RA/Dec map.

    Right ascension increases to the left, as on a sky chart seen from inside
    the sphere.

    Args:
        records: Parsed catalog entries.
        palette: Materials keyed by spectral class letter.
        chart_size: Output image width in inches (height is half).

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size / 2))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    ra = np.array([s.right_ascension for s in records])
    dec = np.array([s.declination for s in records])
    mags = np.array([s.magnitude for s in records])
    colors = [lookup_material(palette, s.spectral_class).base_color for s in records]

    marker_size = 100 * 10 ** (mags / -2.5)
    ax.scatter(ra, dec, s=marker_size, c=colors, marker=".", linewidths=0, zorder=2)

    ax.set_xlim(360, 0)
    ax.set_ylim(-90, 90)
    ax.axis("off")

    return fig


def save_preview_chart(
    records: Sequence[StarRecord],
    palette: dict[str, MaterialDescriptor],
    output_path: Path,
) -> Path:
    """Save the preview chart as a PNG file.

    Returns:
        Path to the saved file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_preview_chart(records, palette)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path
