from types import SimpleNamespace

import pytest
from mathutils import Vector

from lib.GreinerHormann.Polygon import Polygon
from lib.GreinerHormann.Vertex import Vertex

def intersection(x, y, alpha):
    v = Vertex(x, y)
    v.intersect = True
    v.alpha = alpha
    return v

def test_add_single_vertex():
    poly = Polygon()
    v = Vertex(1,2)
    poly.add(v)
    assert poly.first is v
    assert v.next is v and v.prev is v
    assert len(poly) == 1

def test_add_keeps_order(square):
    poly = Polygon.fromPointlist(square)
    assert poly.points() == square
    assert len(poly) == 4
    assert poly.first.prev.point() == (0.,10.)
    # links form one cycle in both directions
    backward = []
    v = poly.first
    for _ in range(4):
        backward.append(v.point())
        v = v.prev
    assert v is poly.first
    assert backward == [square[0]] + square[:0:-1]

def test_empty_polygon():
    poly = Polygon()
    assert poly.iter() == []
    assert len(poly) == 0
    assert not poly.unprocessed()
    assert poly.firstIntersect() is None

def test_insert_sorted_by_alpha(square):
    poly = Polygon.fromPointlist(square)
    start = poly.first
    end = start.next
    poly.insert(intersection(7,0,0.7), start, end)
    poly.insert(intersection(3,0,0.3), start, end)
    poly.insert(intersection(5,0,0.5), start, end)
    assert poly.points()[:5] == [(0.,0.), (3.,0.), (5.,0.), (7.,0.), (10.,0.)]

def test_insert_on_closing_edge(square):
    poly = Polygon.fromPointlist(square)
    last = poly.first.prev
    poly.insert(intersection(0,5,0.5), last, poly.first)
    assert poly.first.point() == (0.,0.)
    assert poly.points()[-1] == (0.,5.)

def test_next_skips_intersections(square):
    poly = Polygon.fromPointlist(square)
    start = poly.first
    end = start.next
    poly.insert(intersection(3,0,0.3), start, end)
    poly.insert(intersection(7,0,0.7), start, end)
    assert poly.next(start) is start
    assert poly.next(start.next) is end

def test_iter_is_snapshot(square):
    poly = Polygon.fromPointlist(square)
    snapshot = poly.iter()
    poly.insert(intersection(5,0,0.5), poly.first, poly.first.next)
    assert len(snapshot) == 4
    assert len(poly.iter()) == 5

def test_unprocessed_and_first_intersect(square):
    poly = Polygon.fromPointlist(square)
    assert not poly.unprocessed()
    a = intersection(3,0,0.3)
    b = intersection(10,5,0.5)
    poly.insert(a, poly.first, poly.first.next)
    second = poly.next(poly.first.next)
    poly.insert(b, second, second.next)
    assert poly.unprocessed()
    assert poly.firstIntersect() is a
    a.checked = True
    assert poly.firstIntersect() is b
    b.checked = True
    assert not poly.unprocessed()

def test_remove(square):
    poly = Polygon.fromPointlist(square)
    poly.remove(poly.first)
    assert poly.points() == square[1:]
    poly.remove(poly.first.next)
    assert poly.points() == [square[1], square[3]]

def test_remove_last_vertex():
    poly = Polygon.fromPointlist([(1,1)])
    poly.remove(poly.first)
    assert poly.first is None

def test_from_point_types():
    points = [Vector((0,0)), [4,0], SimpleNamespace(x=4, y=3), (0,3)]
    poly = Polygon.fromPointlist(points)
    assert poly.points() == [(0.,0.), (4.,0.), (4.,3.), (0.,3.)]

def test_from_unexpected_type():
    with pytest.raises(TypeError):
        Polygon.fromPointlist([(0,0), object(), (1,1)])

def test_vectors(square):
    vectors = Polygon.fromPointlist(square).vectors()
    assert all(v.is_frozen for v in vectors)
    assert [tuple(v) for v in vectors] == square

def test_area_and_orientation(square):
    poly = Polygon.fromPointlist(square)
    assert poly.area() == pytest.approx(100.)
    assert not poly.isClockwise()
    cw = Polygon.fromPointlist(square[::-1])
    assert cw.area() == pytest.approx(100.)
    assert cw.isClockwise()

def test_copy_is_independent(square):
    poly = Polygon.fromPointlist(square)
    poly.first.checked = True
    dup = poly.copy()
    assert dup.points() == square
    assert all(a is not b for a, b in zip(poly.iter(), dup.iter()))
    assert not dup.first.checked
