# starviewer

Tools for preparing a view of the night sky from the Tycho-2 star catalogue.

The package:

- downloads the Tycho-2 archive and unpacks it, including its gzip-compressed
  data files (`starviewer.catalog.download_data`, `extract_data`),
- prunes the catalogue to the stars with a VT magnitude brighter than a chosen
  limit (10 by default), dropping records without a mean position or without
  both magnitudes and records flagged `P` or `X`, and caches them in a compact
  binary file of 16 bytes per star (`prune_stars`, `read_pruned`),
- indexes the stars in a spherical quadtree built on the six faces of a cube,
  storing each star in a cell ten levels deep
  (`starviewer.quadtree.SphericalQuadtree`),
- works out each star's position on the unit sphere and its linear RGB colour
  from its BT − VT colour index, using a blackbody chromaticity table and
  scaled by the star's irradiance (`starviewer.stars`, `starviewer.colour`),
- produces overlay data: the Ursa Minor line strip, per-node star densities
  and the screen transforms of an unfolded-cube layout for inspecting the
  quadtree (`starviewer.overlay`).

Downloading and unpacking use only the Python standard library; downloading
needs network access.

## Installation

```
pip install .
```

## Command line

```
starviewer
```

This downloads the archive if `./data/download/I_259.tar.gz` is missing,
unpacks it if `./data/download/extract/` is missing, prunes it if
`./data/cache/pruned_stars.dat` is missing, builds the quadtree from the
cached stars and computes every star's vertex. It then prints how many stars
are ready to draw, how many stars the busiest cube face holds and how many
constellation vertices there are.

Options:

- `--data-dir DIR`: directory holding downloaded and cached data (default `data`)
- `--table FILE`: blackbody colour table (default `data/tables/bbr_color.txt`)
- `--force-download`: download again, then unpack and prune again
- `--force-extract`: unpack again, then prune again
- `--force-prune`: prune again

## Library use

```python
from starviewer.catalog import DataPaths, setup
from starviewer.colour import load_blackbody_table
from starviewer.stars import star_list, star_vertices

quadtree = setup(DataPaths("data"))

stars = star_list(quadtree)          # ra and dec in radians
table = load_blackbody_table("data/tables/bbr_color.txt")
vertices = star_vertices(stars, table)
```

Each vertex is `(x, y, z, r, g, b)`: the star's unit-sphere position (y up)
followed by its linear RGB colour, already scaled by its apparent brightness.

Individual pieces can be used on their own, for example
`StarData.parse("37.95 89.26 2.7 2.0")`, `SphericalQuadtree().add(star)`,
`parse_tycho_line(line)` or `BlackbodyTable.from_lines(lines)`.

## Data layout

Under the data directory (`./data` by default):

- `download/I_259.tar.gz`: the downloaded archive
- `download/extract/`: the unpacked catalogue files
- `cache/pruned_stars.dat`: the pruned stars, four little-endian 32-bit floats
  (ra, dec, BT, VT) per star
- `tables/bbr_color.txt`: blackbody colour table, which you provide; after a
  20-line header, every second line holds a temperature in its first column and
  the x and y chromaticity in its fourth and fifth, in 100 K steps from 1000 K
  up to 40000 K

## What it does not do

The package does not open a window or draw anything. It prepares the star
vertices, colours and overlay geometry that a renderer would need, but has no
interactive sky view, camera control or shaders of its own.

## Tests

```
pip install ".[test]"
pytest
```