"""Constellation lines and the flat debug layout of the quadtree faces."""

from __future__ import annotations

import math

from starviewer.colour import deg_ams, ra_dec_to_xyz
from starviewer.quadtree import QuadtreeNode, SphericalQuadtree

SCR_WIDTH = 3840
SCR_HEIGHT = 2160

Matrix3 = tuple[tuple[float, float, float], ...]

# Ursa Minor drawn as a line strip: right ascension (h, m, s), declination (d, m, s).
_URSA_MINOR = (
    ((2.0, 31.0, 49.09), (89.0, 15.0, 50.8)),
    ((17.0, 32.0, 12.99671), (86.0, 35.0, 11.2584)),
    ((16.0, 45.0, 58.24168), (82.0, 2.0, 14.1233)),
    ((15.0, 44.0, 3.51892), (77.0, 47.0, 40.1788)),
    ((14.0, 50.0, 42.32580), (74.0, 9.0, 19.8142)),
    ((15.0, 20.0, 43.71604), (71.0, 50.0, 2.4596)),
    ((16.0, 17.0, 30.27025), (75.0, 45.0, 19.2351)),
    ((15.0, 44.0, 3.51892), (77.0, 47.0, 40.1788)),
)

_BASE_SCALE = (0.2, 0.2)
# Unfolded cube layout, one square per face in face order.
_BASE_POSITIONS = (
    (0.3, 0.4),
    (0.7, 0.4),
    (0.5, 0.4),
    (0.1, 0.4),
    (0.3, 0.6),
    (0.3, 0.2),
)


def ursa_minor_vertices() -> list[tuple[float, float, float]]:
    """Unit vectors of the Ursa Minor line strip."""
    return [
        ra_dec_to_xyz(
            math.radians(deg_ams(*ra) / 24.0 * 360.0),
            math.radians(deg_ams(*dec)),
        )
        for ra, dec in _URSA_MINOR
    ]


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division giving inf or nan where the divisor is zero."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def node_star_density(
    node: QuadtreeNode, max_side_stars: int, depth: int, max_depth: int
) -> float:
    """Share of stars per unit area in the part of ``node`` not drawn by its children.

    Children are only taken into account while ``depth`` is below ``max_depth``.
    """
    edge = abs(node.corners[1][0] - node.corners[0][0]) / 2.0
    area = edge * edge
    remaining = node.stars_in_children
    child_count = 0
    if depth < max_depth:
        for child in node.children:
            if child is not None:
                child_count += 1
                remaining -= child.stars_in_children
    share = _divide(float(remaining), float(max_side_stars))
    return _divide(share, area - (area / 4.0) * child_count)


def max_side_stars(quadtree: SphericalQuadtree) -> int:
    """Largest number of stars held by any one face."""
    return max(face.stars_in_children for face in quadtree.faces)


def _matmul(a: Matrix3, b: Matrix3) -> Matrix3:
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, column)) for column in columns)
        for row in a
    )


def _translation(x: float, y: float) -> Matrix3:
    return ((1.0, 0.0, x), (0.0, 1.0, y), (0.0, 0.0, 1.0))


def _scale(x: float, y: float) -> Matrix3:
    return ((x, 0.0, 0.0), (0.0, y, 0.0), (0.0, 0.0, 1.0))


def face_transformations() -> list[Matrix3]:
    """Row-major 2D transforms placing each face's unit square on screen."""
    screen = _matmul(
        _matmul(_scale(SCR_HEIGHT / SCR_WIDTH, 1.0), _scale(2.0, 2.0)),
        _translation(-0.5, -0.5),
    )
    return [
        _matmul(screen, _matmul(_translation(*position), _scale(*_BASE_SCALE)))
        for position in _BASE_POSITIONS
    ]