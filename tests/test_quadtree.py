import math

import pytest

from starviewer.quadtree import (
    MAX_DEPTH,
    ParseStarDataError,
    QuadtreeNode,
    SphericalQuadtree,
    StarData,
    face_for,
)


def _leaf_for(tree, star):
    face, point = face_for(star)
    node = tree.faces[face]
    depth = 0
    while not node.stars:
        node = node.children[node.child_index(point)]
        depth += 1
    return node, depth, point


def _star(ra, dec):
    return StarData(ra=ra, dec=dec, bt=9.0, vt=8.5)


def test_parse_reads_four_fields():
    star = StarData.parse("  1.5 2.5\t3.5 4.5 ")
    assert star == StarData(1.5, 2.5, 3.5, 4.5)


def test_parse_ignores_extra_fields():
    assert StarData.parse("1 2 3 4 5 junk") == StarData(1.0, 2.0, 3.0, 4.0)


@pytest.mark.parametrize("text", ["", "1 2 3", "1 2 x 4", "a b c d"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(ParseStarDataError):
        StarData.parse(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        StarData.parse("1 2")


def test_create_orders_corners():
    node = QuadtreeNode.create(((1.0, 0.5), (-1.0, -0.5)), (0, 1), 2)
    assert node.corners == ((-1.0, -0.5), (1.0, 0.5))
    assert node.midpoint == (0.0, 0.0)
    assert node.children == [None] * 4
    assert node.stars_in_children == 0


def test_child_index_covers_each_quadrant_once():
    node = QuadtreeNode.create(((-1.0, -1.0), (1.0, 1.0)), (1, 2), 0)
    points = [(-0.5, -0.5), (0.5, -0.5), (-0.5, 0.5), (0.5, 0.5)]
    indices = [node.child_index(p) for p in points]
    assert indices == list(range(4))


def test_child_index_midpoint_goes_to_lower_left():
    node = QuadtreeNode.create(((-1.0, -1.0), (1.0, 1.0)), (1, 2), 0)
    assert node.child_index(node.midpoint) == node.child_index((-0.5, -0.5))


@pytest.mark.parametrize("ra", [i * 0.4 for i in range(16)])
@pytest.mark.parametrize("dec", [-1.4, -0.7, 0.0, 0.3, 1.1, 1.5])
def test_face_for_picks_dominant_axis(ra, dec):
    face, point = face_for(_star(ra, dec))
    position = (
        math.cos(dec) * math.cos(ra),
        math.cos(dec) * math.sin(ra),
        math.sin(dec),
    )
    dominant = face // 2
    assert abs(position[dominant]) == max(abs(c) for c in position)
    assert (position[dominant] >= 0) == bool(face % 2)
    assert all(-1.0 <= c <= 1.0 for c in point)
    others = [c for axis, c in enumerate(position) if axis != dominant]
    assert list(point) == pytest.approx(others)


def test_face_for_poles_use_z_faces():
    north, _ = face_for(_star(0.0, math.pi / 2))
    south, _ = face_for(_star(0.0, -math.pi / 2))
    assert {north, south} == {4, 5}
    assert north > south


def test_new_tree_is_empty():
    tree = SphericalQuadtree()
    assert len(tree) == 0
    assert len(tree.faces) == 6
    assert all(face.corners == ((-1.0, -1.0), (1.0, 1.0)) for face in tree.faces)


def test_add_places_star_at_max_depth():
    tree = SphericalQuadtree()
    star = _star(0.3, 0.2)
    tree.add(star)
    leaf, depth, point = _leaf_for(tree, star)
    assert depth == MAX_DEPTH
    assert leaf.stars == [star]
    assert leaf.stars_in_children == 1
    (x0, y0), (x1, y1) = leaf.corners
    assert x0 <= point[0] <= x1
    assert y0 <= point[1] <= y1


def test_add_counts_along_path():
    tree = SphericalQuadtree()
    stars = [_star(ra * 0.37, dec * 0.21) for ra in range(10) for dec in range(-7, 8)]
    for star in stars:
        tree.add(star)
    assert len(tree) == len(stars)
    assert sum(face.stars_in_children for face in tree.faces) == len(stars)
    for face in tree.faces:
        children_total = sum(c.stars_in_children for c in face.children if c)
        assert children_total == face.stars_in_children


def test_identical_stars_share_leaf():
    tree = SphericalQuadtree()
    star = _star(2.0, -0.4)
    tree.add(star)
    tree.add(star)
    leaf, _, _ = _leaf_for(tree, star)
    assert leaf.stars == [star, star]
    assert len(tree) == 2


def test_children_halve_parent_cells():
    tree = SphericalQuadtree()
    star = _star(1.0, 0.1)
    tree.add(star)
    face, point = face_for(star)
    node = tree.faces[face]
    while not node.stars:
        child = node.children[node.child_index(point)]
        parent_width = node.corners[1][0] - node.corners[0][0]
        child_width = child.corners[1][0] - child.corners[0][0]
        assert child_width == pytest.approx(parent_width / 2)
        assert child.axes == node.axes
        assert child.inactive_axis == node.inactive_axis
        node = child