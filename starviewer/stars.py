"""Turning quadtree stars into coloured vertices for drawing."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from starviewer.colour import BlackbodyTable, ra_dec_to_xyz
from starviewer.quadtree import QuadtreeNode, SphericalQuadtree, StarData

Vertex = tuple[float, float, float, float, float, float]


def _leaf_stars(node: QuadtreeNode) -> Iterator[StarData]:
    if node.stars:
        yield from node.stars
        return
    for child in node.children:
        if child is not None:
            yield from _leaf_stars(child)


def star_list(quadtree: SphericalQuadtree) -> list[StarData]:
    """All stars in face order, with ra and dec converted to radians."""
    return [
        StarData(math.radians(star.ra), math.radians(star.dec), star.bt, star.vt)
        for face in quadtree.faces
        for star in _leaf_stars(face)
    ]


def star_color(star: StarData, table: BlackbodyTable) -> tuple[float, float, float]:
    """Linear RGB of a star from its colour index, scaled by its irradiance."""
    colour_index = star.bt - star.vt + 0.56
    temperature = 7000.0 / colour_index if colour_index != 0.0 else math.inf
    irradiance = 10.0 ** (0.4 * (-star.vt - 19.0 + 0.4))
    r, g, b = table.temp_to_xy(temperature).to_rgb()
    return r * irradiance, g * irradiance, b * irradiance


def star_vertices(stars: Iterable[StarData], table: BlackbodyTable) -> list[Vertex]:
    """Position and colour ``(x, y, z, r, g, b)`` of each star (angles in radians)."""
    return [ra_dec_to_xyz(star.ra, star.dec) + star_color(star, table) for star in stars]