import pytest

from labworks.geometry import Point, PolyLine, PolyLineFullError

EPSILON = 0.0009765625


def _filled(points):
    line = PolyLine()
    for x, y in points:
        line.add_point(x, y)
    return line


def test_point_addition():
    p1 = Point(1.3, 2.1)
    p2 = Point(3.4, 4.5)
    p3 = p1 + p2
    assert p3 == Point(4.7, 6.6)


def test_point_addition_and_subtraction_with_integers():
    p1 = Point(0, 0)
    p2 = Point(1, 2)
    assert p1 + p2 == Point(1, 2)
    assert p1 - p2 == Point(-1, -2)
    assert p1 == Point(0, 0)
    assert p2 == Point(1, 2)


def test_point_multiplication_both_sides():
    p1 = Point(1.2, 2.5)
    assert p1 * 4.0 == Point(4.8, 10.0)
    assert 5.0 * p1 == Point(6.0, 12.5)


def test_point_dot_product():
    assert Point(1.0, 2.0).dot(Point(1.0, 4.0)) == 9.0


def test_point_operations_within_epsilon():
    p1 = Point(2, 3)
    p2 = Point(-1, 4)

    p3 = p1 + p2
    assert abs(p3.x - 1) <= EPSILON
    assert abs(p3.y - 7) <= EPSILON

    p4 = p2 - p1
    assert abs(p4.x - (-3)) <= EPSILON
    assert abs(p4.y - 1) <= EPSILON

    assert abs(p1.dot(p2) - 10) <= EPSILON

    p5 = p1 * 5
    assert abs(p5.x - 10) <= EPSILON
    assert abs(p5.y - 15) <= EPSILON

    p6 = 2 * p2
    assert abs(p6.x - (-2)) <= EPSILON
    assert abs(p6.y - 8) <= EPSILON


def test_point_equality_and_hash_agree():
    assert Point(1.5, -2.0) == Point(1.5, -2.0)
    assert hash(Point(1.5, -2.0)) == hash(Point(1.5, -2.0))
    assert Point(1.5, -2.0) != Point(-2.0, 1.5)


def test_point_multiplied_by_non_number_raises():
    with pytest.raises(TypeError):
        Point(1, 2) * "x"


def test_polyline_holds_ten_points():
    line = PolyLine()
    line.add_point(1.0, 2.0)
    line.add(Point(2.0, 3.0))
    for x, y in [(2.2, 1.9), (5.2, 8.9), (2.2, 1.4), (10.1, 11.9),
                 (7.5, 1.9), (6.6, 4.5), (3.1, 0.9), (0.1, 0.1)]:
        line.add_point(x, y)
    assert len(line) == 10
    with pytest.raises(PolyLineFullError):
        line.add_point(2.2, 1.9)
    assert len(line) == 10
    assert line[9] == Point(0.1, 0.1)


def test_polyline_copies_are_independent():
    pl2 = PolyLine()
    p1 = Point(2.2, 3.3)
    pl2.add_point(1.1, 2.2)
    pl2.add(p1)
    assert p1.x == Point(2.2, 3.3).x and p1.y == Point(2.2, 3.3).y

    pl3 = pl2.copy()
    p2 = Point(22.22, 33.33)
    pl3.add_point(11.11, 22.22)
    pl3.add(p2)
    assert len(pl2) == 2
    assert len(pl3) == 4

    pl4 = pl3.copy()
    pl4.add_point(11.11, 22.22)
    pl4.add(Point(222.22, 333.33))
    for _ in range(4):
        pl4.add_point(11.11, 22.22)
    with pytest.raises(PolyLineFullError):
        pl4.add_point(11.11, 22.22)
    with pytest.raises(PolyLineFullError):
        pl4.add_point(11.11, 22.22)
    assert len(pl3) == 4

    pl6 = pl3.copy()
    pl6.add_point(11.11, 22.22)
    pl6.add_point(11.11, 22.22)
    pl6.add(Point(55.5, 66.6))
    assert len(pl6) == 7
    assert list(pl6)[:4] == list(pl3)


def test_polyline_remove_point():
    line = PolyLine()
    line.add_point(1.0, 2.0)
    line.add(Point(2.0, 3.0))
    line.add_point(2.2, 1.9)

    line.remove_point(1)
    assert list(line) == [Point(1.0, 2.0), Point(2.2, 1.9)]
    with pytest.raises(IndexError):
        line.remove_point(3)
    with pytest.raises(IndexError):
        line.remove_point(-1)
    line.remove_point(0)
    line.remove_point(0)
    with pytest.raises(IndexError):
        line.remove_point(0)
    assert len(line) == 0

    line.add_point(1.0, 2.0)
    line.add_point(1.1, 2.1)
    line.add_point(1.2, 2.2)
    line.add_point(1.3, 2.3)
    line.remove_point(1)
    assert line[1].x == Point(1.2, 2.2).x and line[1].y == Point(1.2, 2.2).y
    assert line[2] == Point(1.3, 2.3)
    with pytest.raises(IndexError):
        line[3]
    with pytest.raises(IndexError):
        line.remove_point(3)


def test_polyline_bounding_rectangle():
    line = PolyLine()
    with pytest.raises(ValueError):
        line.min_bounding_rectangle()
    line.add_point(1.4, 2.8)
    assert line.min_bounding_rectangle() == (Point(1.4, 2.8), Point(1.4, 2.8))
    for x, y in [(3.7, 2.5), (5.5, 5.5), (-2.9, 4.1), (4.3, -1.0), (6.2, 4.4)]:
        line.add_point(x, y)
    min_p, max_p = line.min_bounding_rectangle()
    assert min_p == Point(-2.9, -1.0)
    assert max_p == Point(6.2, 5.5)


def test_polyline_bounding_rectangle_after_removal():
    line = _filled([(1, 2), (3, 2), (5, 5), (-2, 4), (4, -1), (6, 4)])
    line.remove_point(4)
    min_p, max_p = line.min_bounding_rectangle()
    assert (min_p.x, min_p.y) == (-2, 2)
    assert (max_p.x, max_p.y) == (6, 5)


def test_polyline_bounding_rectangle_contains_all_points():
    line = _filled([(1.7, 2.4), (3.9, 2.1), (5.3, 5.5), (-2.1, 4.0)])
    min_p, max_p = line.min_bounding_rectangle()
    for point in line:
        assert min_p.x <= point.x <= max_p.x
        assert min_p.y <= point.y <= max_p.y


def test_polyline_indexing():
    line = _filled([(1.7, 2.4), (3.9, 2.1), (5.3, 5.5), (-2.1, 4.0)])
    assert line[0] == Point(1.7, 2.4)
    assert line[3] == Point(-2.1, 4.0)
    with pytest.raises(IndexError):
        line[6]

    pl3 = line.copy()
    p2 = Point(10.1, 20.1)
    pl3.add(p2)
    pl3.add_point(50.2, 25.4)
    pl3.add_point(150.2, 25.4)
    pl3.add_point(250.2, 25.4)
    assert p2 == Point(10.1, 20.1)
    assert pl3[0] == Point(1.7, 2.4)
    assert pl3[4] == Point(10.1, 20.1)
    assert pl3[5] == Point(50.2, 25.4)
    for bad in (10, -4, 20):
        with pytest.raises(IndexError):
            pl3[bad]

    pl4 = line.copy()
    pl4.add(Point(10.1, 20.1))
    pl4.add_point(50.2, 25.4)
    pl4.add(Point(40.1, 30.1))
    assert pl4[0] == Point(1.7, 2.4)
    assert pl4[4] == Point(10.1, 20.1)
    assert pl4[5] == Point(50.2, 25.4)
    assert pl4[6] == Point(40.1, 30.1)
    for bad in (7, 10, -4):
        with pytest.raises(IndexError):
            pl4[bad]
    assert len(line) == 4


def test_polyline_remove_single_point():
    line = PolyLine()
    with pytest.raises(IndexError):
        line.remove_point(0)
    line.add(Point(1, 2))
    with pytest.raises(IndexError):
        line.remove_point(1)
    line.remove_point(0)
    assert len(line) == 0