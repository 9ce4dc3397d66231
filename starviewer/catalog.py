"""Fetching, unpacking and pruning the Tycho-2 catalogue into a star cache."""

from __future__ import annotations

import gzip
import shutil
import struct
import tarfile
import time
import urllib.request
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from starviewer.quadtree import SphericalQuadtree, StarData

TYCHO_2_URL = "https://cdsarc.u-strasbg.fr/viz-bin/nph-Cat/tar.gz?I/259"
DEFAULT_MIN_MAGNITUDE = 10.0

SUPPLEMENT_FILES = ("index.dat", "suppl_1.dat")
TYCHO_FILES = tuple(f"tyc2.dat.{i:02d}" for i in range(20))

# One pruned star: ra, dec, BT and VT as 32-bit floats.
_RECORD = struct.Struct("<4f")

_PFLAG, _MRA, _MDE, _BT, _VT, _RA, _DEC = 1, 2, 3, 17, 19, 24, 25


@dataclass(frozen=True)
class DataPaths:
    """Locations of the downloaded, extracted and cached catalogue data."""

    root: Path = Path("data")

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))

    @property
    def download_dir(self) -> Path:
        return self.root / "download"

    @property
    def archive(self) -> Path:
        return self.download_dir / "I_259.tar.gz"

    @property
    def extract_dir(self) -> Path:
        return self.download_dir / "extract"

    @property
    def tmp_dir(self) -> Path:
        return self.download_dir / "tmp"

    @property
    def cache_dir(self) -> Path:
        return self.root / "cache"

    @property
    def pruned(self) -> Path:
        return self.cache_dir / "pruned_stars.dat"


def download_data(paths: DataPaths, url: str = TYCHO_2_URL) -> None:
    """Download the catalogue archive to ``paths.archive``."""
    paths.download_dir.mkdir(parents=True, exist_ok=True)
    with urllib.request.urlopen(url) as response, open(paths.archive, "wb") as out:
        shutil.copyfileobj(response, out)
    print("Successfully downloaded data")


def extract_data(paths: DataPaths) -> None:
    """Unpack the archive and decompress its data files into ``extract_dir``."""
    shutil.rmtree(paths.extract_dir, ignore_errors=True)
    shutil.rmtree(paths.tmp_dir, ignore_errors=True)
    paths.tmp_dir.mkdir(parents=True, exist_ok=True)
    paths.extract_dir.mkdir(parents=True, exist_ok=True)

    with tarfile.open(paths.archive, "r:*") as archive:
        if hasattr(tarfile, "data_filter"):
            archive.extractall(paths.tmp_dir, filter="data")
        else:
            archive.extractall(paths.tmp_dir)
    print("Finished unpacking archive")

    for name in SUPPLEMENT_FILES + TYCHO_FILES:
        source = paths.tmp_dir / f"{name}.gz"
        with gzip.open(source, "rb") as src, open(paths.extract_dir / name, "wb") as dst:
            shutil.copyfileobj(src, dst)
    print("Finished decompressing data files")

    shutil.rmtree(paths.tmp_dir, ignore_errors=True)


def parse_tycho_line(line: str, min_magnitude: float = DEFAULT_MIN_MAGNITUDE) -> StarData | None:
    """Star from a Tycho-2 record, or None if it is filtered out.

    A record is kept when it has a mean position, both magnitudes, a VT
    brighter than ``min_magnitude`` and no 'P' or 'X' flag.
    """
    fields = [field.strip() for field in line.split("|")]
    try:
        if not (fields[_MRA] and fields[_MDE] and fields[_BT] and fields[_VT]):
            return None
        vt = float(fields[_VT])
        if not vt < min_magnitude:
            return None
        if "P" in fields[_PFLAG] or "X" in fields[_PFLAG]:
            return None
        ra_text, dec_text = fields[_RA], fields[_DEC]
    except IndexError as exc:
        raise ValueError(f"Tycho-2 record has too few fields: {line!r}") from exc
    return StarData(float(ra_text), float(dec_text), float(fields[_BT]), vt)


def prune_stars(paths: DataPaths, min_magnitude: float = DEFAULT_MIN_MAGNITUDE) -> tuple[int, int]:
    """Write stars brighter than ``min_magnitude`` to the cache.

    Returns the number of records read and the number written.
    """
    paths.cache_dir.mkdir(parents=True, exist_ok=True)
    star_count = 0
    pruned_count = 0
    start = time.monotonic()
    with open(paths.pruned, "wb") as out:
        for name in TYCHO_FILES:
            with open(paths.extract_dir / name, encoding="latin-1") as source:
                for line in source:
                    star_count += 1
                    star = parse_tycho_line(line, min_magnitude)
                    if star is not None:
                        out.write(_RECORD.pack(star.ra, star.dec, star.bt, star.vt))
                        pruned_count += 1
    elapsed = time.monotonic() - start
    print(f"Pruned list of {star_count} stars into {pruned_count} entries in {elapsed} seconds")
    return star_count, pruned_count


def read_pruned(path) -> Iterator[StarData]:
    """Stars stored in a pruned cache file; a trailing partial record is ignored."""
    data = Path(path).read_bytes()
    usable = len(data) - len(data) % _RECORD.size
    for ra, dec, bt, vt in _RECORD.iter_unpack(data[:usable]):
        yield StarData(ra, dec, bt, vt)


def build_quadtree(paths: DataPaths, quadtree: SphericalQuadtree) -> int:
    """Add every cached star to ``quadtree``; returns how many were added."""
    start = time.monotonic()
    count = 0
    for star in read_pruned(paths.pruned):
        quadtree.add(star)
        count += 1
    elapsed = time.monotonic() - start
    print(f"Created quadtree from {count} stars in {elapsed} seconds")
    return count


def setup(
    paths: DataPaths | None = None,
    force_download: bool = False,
    force_extract: bool = False,
    force_prune: bool = False,
    quadtree: SphericalQuadtree | None = None,
) -> SphericalQuadtree:
    """Bring the data up to date as needed and fill a quadtree from the cache."""
    paths = paths if paths is not None else DataPaths()
    quadtree = quadtree if quadtree is not None else SphericalQuadtree()

    if force_download or not paths.archive.exists():
        download_data(paths)
    if force_download or force_extract or not paths.extract_dir.exists():
        extract_data(paths)
    if force_prune or force_download or force_extract or not paths.pruned.exists():
        prune_stars(paths, DEFAULT_MIN_MAGNITUDE)

    build_quadtree(paths, quadtree)
    return quadtree