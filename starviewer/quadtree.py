"""Cube-mapped spherical quadtree holding catalogue stars."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

MAX_DEPTH = 10

Point = tuple[float, float]

# (axes projected onto the face, axis perpendicular to the face) for each face.
_FACE_AXES: tuple[tuple[tuple[int, int], int], ...] = (
    ((1, 2), 0),
    ((1, 2), 0),
    ((0, 2), 1),
    ((0, 2), 1),
    ((0, 1), 2),
    ((0, 1), 2),
)

_FULL_FACE: tuple[Point, Point] = ((-1.0, -1.0), (1.0, 1.0))


class ParseStarDataError(ValueError):
    """Raised when text does not hold four numeric star fields."""


@dataclass(frozen=True)
class StarData:
    """Position and Tycho photometry of a single star."""

    ra: float
    dec: float
    bt: float
    vt: float

    @classmethod
    def parse(cls, text: str) -> StarData:
        """Parse whitespace-separated ``ra dec bt vt``; extra fields are ignored."""
        tokens = text.split()
        values = []
        for token in tokens[:4]:
            try:
                values.append(float(token))
            except ValueError as exc:
                raise ParseStarDataError(f"invalid star field {token!r}") from exc
        if len(values) < 4:
            raise ParseStarDataError(f"expected four star fields, got {len(values)}")
        return cls(*values)


@dataclass
class QuadtreeNode:
    """A square cell on one cube face, with up to four child cells."""

    corners: tuple[Point, Point]
    midpoint: Point
    axes: tuple[int, int]
    inactive_axis: int
    stars: list[StarData] = field(default_factory=list)
    children: list[QuadtreeNode | None] = field(default_factory=lambda: [None] * 4)
    stars_in_children: int = 0

    @classmethod
    def create(cls, corners, axes, inactive_axis) -> QuadtreeNode:
        """Build a node from two opposite corners given in any order."""
        (ax, ay), (bx, by) = corners
        low = (min(ax, bx), min(ay, by))
        high = (max(ax, bx), max(ay, by))
        midpoint = ((ax + bx) / 2.0, (ay + by) / 2.0)
        return cls(
            corners=(low, high),
            midpoint=midpoint,
            axes=tuple(axes),
            inactive_axis=inactive_axis,
        )

    def child_index(self, point) -> int:
        """Quadrant of ``point``: bit 0 set right of the midpoint, bit 1 above it."""
        x, y = point
        return (int(y > self.midpoint[1]) << 1) | int(x > self.midpoint[0])

    def _child(self, index: int) -> QuadtreeNode:
        child = self.children[index]
        if child is None:
            far_corner = (self.corners[index & 1][0], self.corners[index >> 1][1])
            child = QuadtreeNode.create(
                (self.midpoint, far_corner), self.axes, self.inactive_axis
            )
            self.children[index] = child
        return child


def face_for(star: StarData) -> tuple[int, Point]:
    """Cube face a star falls on and its coordinates projected onto that face."""
    position = (
        math.cos(star.dec) * math.cos(star.ra),
        math.cos(star.dec) * math.sin(star.ra),
        math.sin(star.dec),
    )
    greatest = abs(position[0])
    face = int(position[0] >= 0.0)
    if abs(position[1]) > greatest:
        greatest = abs(position[1])
        face = int(position[1] >= 0.0) + 2
    if abs(position[2]) > greatest:
        face = int(position[2] >= 0.0) + 4
    axes, _ = _FACE_AXES[face]
    return face, (position[axes[0]], position[axes[1]])


class SphericalQuadtree:
    """Six face quadtrees covering the sphere; stars are stored at fixed depth."""

    def __init__(self) -> None:
        self.faces: list[QuadtreeNode] = [
            QuadtreeNode.create(_FULL_FACE, axes, inactive)
            for axes, inactive in _FACE_AXES
        ]
        self.star_count = 0

    def add(self, star: StarData) -> None:
        """Insert a star, creating cells down to ``MAX_DEPTH`` as needed."""
        face, point = face_for(star)
        node = self.faces[face]
        for _ in range(MAX_DEPTH):
            index = node.child_index(point)
            child = node._child(index)
            node.stars_in_children += 1
            node = child
        node.stars.append(star)
        node.stars_in_children += 1
        self.star_count += 1

    def __len__(self) -> int:
        return self.star_count