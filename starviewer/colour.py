"""Blackbody colour lookup and sky coordinate helpers."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TABLE_PATH = Path("data/tables/bbr_color.txt")

_HEADER_LINES = 20
_LAST_TEMPERATURE = "40000"

# Linear sRGB from CIE XYZ, stored row by row.
_XYZ_TO_RGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)


@dataclass(frozen=True)
class XYColor:
    """A CIE xy chromaticity."""

    x: float
    y: float

    def __add__(self, other: XYColor) -> XYColor:
        return XYColor(self.x + other.x, self.y + other.y)

    def __sub__(self, other: XYColor) -> XYColor:
        return XYColor(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> XYColor:
        return XYColor(self.x * factor, self.y * factor)

    def to_rgb(self) -> tuple[float, float, float]:
        """Linear RGB of this chromaticity at unit luminance."""
        z = 1.0 - self.x - self.y
        luminance = 1.0
        xyz = (luminance / self.y * self.x, luminance, luminance / self.y * z)
        r, g, b = (sum(m * c for m, c in zip(row, xyz)) for row in _XYZ_TO_RGB)
        return r, g, b


@dataclass(frozen=True)
class BlackbodyTable:
    """Blackbody chromaticities in 100 K steps starting at 1000 K."""

    table: tuple[XYColor, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> BlackbodyTable:
        """Read a table: skip the header, then use the second line of each pair."""
        rows = iter(lines)
        for _ in itertools.islice(rows, _HEADER_LINES):
            pass
        entries = []
        for _skipped in rows:
            fields = next(rows, "").split()
            if len(fields) < 5:
                raise ValueError(f"malformed blackbody table line: {fields!r}")
            entries.append(XYColor(float(fields[3]), float(fields[4])))
            if fields[0] == _LAST_TEMPERATURE:
                break
        return cls(tuple(entries))

    def temp_to_xy(self, temperature: float) -> XYColor:
        """Chromaticity at ``temperature`` kelvin, linearly interpolated."""
        steps = (temperature - 1000.0) / 100.0
        floor = math.floor(steps) if math.isfinite(steps) else steps
        if math.isnan(floor):
            index = 0
        elif floor == math.inf:
            raise IndexError(f"temperature {temperature} is outside the table")
        else:
            index = max(0, int(floor))
        if index + 1 >= len(self.table):
            raise IndexError(f"temperature {temperature} is outside the table")
        below = self.table[index]
        above = self.table[index + 1]
        return below + (above - below) * (steps - floor)


def load_blackbody_table(path=DEFAULT_TABLE_PATH) -> BlackbodyTable:
    """Load a blackbody colour table from a file."""
    with open(path, encoding="utf-8") as handle:
        return BlackbodyTable.from_lines(handle)


def ra_dec_to_xyz(ra: float, dec: float) -> tuple[float, float, float]:
    """Unit vector for right ascension and declination in radians (y is up)."""
    return (
        math.cos(dec) * math.sin(ra),
        math.sin(dec),
        math.cos(dec) * math.cos(ra),
    )


def deg_ams(deg: float, minutes: float, seconds: float) -> float:
    """Combine degrees, arc minutes and arc seconds into decimal degrees."""
    return deg + minutes / 60.0 + seconds / 3600.0