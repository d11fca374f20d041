"""Star placement — right ascension / declination / magnitude to a billboard transform.

Axes follow the glTF convention (right-handed, +Y up, camera looking down -Z):
a star at RA 0°, Dec 0° sits at (0, 0, -1) and its octagon faces the origin.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from starfield.models import StarTransform

_UP = np.array([0.0, 1.0, 0.0])
_RIGHT = np.array([1.0, 0.0, 0.0])
_FORWARD = np.array([0.0, 0.0, -1.0])

# Precision kept in the output file; everything after this is noise at
# background-starfield distances and only inflates the glTF JSON.
_ROTATION_PLACES = 2
_SCALE_PLACES = 2
_TRANSLATION_PLACES = 3


def _axis_angle(axis: np.ndarray, degrees: float) -> np.ndarray:
    """Quaternion (x, y, z, w) for a rotation of `degrees` about a unit axis."""
    half = math.radians(degrees) / 2
    x, y, z = axis * math.sin(half)
    return np.array([x, y, z, math.cos(half)])


def _multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Hamilton product a * b (b is applied first)."""
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return np.array(
        [
            ax * bw + aw * bx + ay * bz - az * by,
            ay * bw + aw * by + az * bx - ax * bz,
            az * bw + aw * bz + ax * by - ay * bx,
            aw * bw - ax * bx - ay * by - az * bz,
        ]
    )


def _rotate(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Apply unit quaternion q to vector v."""
    u, w = q[:3], q[3]
    t = 2.0 * np.cross(u, v)
    return v + w * t + np.cross(u, t)


def _reduce_precision(value: float, places: int) -> float:
    """Round half away from zero on the exact binary value, like fixed-point formatting."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def magnitude_to_scale(magnitude: float) -> float:
    """Billboard size for a visual magnitude.

    Four magnitudes brighter is four times larger; magnitude 6 maps to 1/15.
    """
    return 4 ** ((6 - magnitude) / 4) / 15


def compute_transform(
    right_ascension: float, declination: float, magnitude: float
) -> StarTransform:
    """Compute the rotation, translation and scale of one star.

    Args:
        right_ascension: Right ascension in degrees.
        declination: Declination in degrees.
        magnitude: Visual magnitude.

    Returns:
        StarTransform with rotation/scale rounded to 2 places and
        translation rounded to 3 places. The quaternion is not renormalized.
    """
    q_ra = _axis_angle(_UP, right_ascension)
    q_de = _axis_angle(_RIGHT, declination)
    q = _multiply(q_ra, q_de)

    # The same rotation that carries the forward vector onto the star's
    # position also turns the octagon (facing +Z) toward the sphere center.
    position = _rotate(q, _FORWARD)
    scale = _reduce_precision(magnitude_to_scale(magnitude), _SCALE_PLACES)

    x, y, z, w = (_reduce_precision(float(c), _ROTATION_PLACES) for c in q)
    tx, ty, tz = (_reduce_precision(float(c), _TRANSLATION_PLACES) for c in position)
    return StarTransform(
        rotation=(x, y, z, w),
        scale=(scale, scale, scale),
        translation=(tx, ty, tz),
    )
