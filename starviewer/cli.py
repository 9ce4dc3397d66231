"""Command line entry point: prepare the star data and the vertices to draw."""

from __future__ import annotations

import argparse
from pathlib import Path

from starviewer.catalog import DataPaths, setup
from starviewer.colour import DEFAULT_TABLE_PATH, load_blackbody_table
from starviewer.overlay import max_side_stars, ursa_minor_vertices
from starviewer.stars import star_list, star_vertices


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starviewer",
        description="Build the star quadtree from the Tycho-2 catalogue.",
    )
    parser.add_argument("--data-dir", type=Path, default=Path("data"),
                        help="directory holding downloaded and cached data")
    parser.add_argument("--table", type=Path, default=DEFAULT_TABLE_PATH,
                        help="blackbody colour table")
    parser.add_argument("--force-download", action="store_true")
    parser.add_argument("--force-extract", action="store_true")
    parser.add_argument("--force-prune", action="store_true")
    return parser


def main(argv=None) -> int:
    """Run the data setup and report the prepared star vertices."""
    args = _parser().parse_args(argv)
    quadtree = setup(
        DataPaths(args.data_dir),
        force_download=args.force_download,
        force_extract=args.force_extract,
        force_prune=args.force_prune,
    )
    table = load_blackbody_table(args.table)
    vertices = star_vertices(star_list(quadtree), table)
    print(f"{len(vertices)} stars ready to draw")
    print(f"Busiest face holds {max_side_stars(quadtree)} stars")
    print(f"{len(ursa_minor_vertices())} constellation vertices")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())