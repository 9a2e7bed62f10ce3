import pytest

from citygen.geometry import Point
from citygen.segment import Segment


def make_highway():
    return Segment(Point(0, 0), Point(200, 0), highway=True, id=0)


def test_length_is_measured_on_creation():
    assert make_highway().length == 200.0


def test_length_is_symmetric():
    a = Segment(Point(1.5, -2), Point(-7, 9))
    b = Segment(Point(-7, 9), Point(1.5, -2))
    assert a.length == pytest.approx(b.length)


def test_length_not_updated_when_end_moves():
    seg = make_highway()
    seg.end = Point(0, 0)
    assert seg.length == 200.0


def test_new_segment_has_no_connections():
    assert make_highway().connections == []


def test_add_connection_keeps_order():
    root = make_highway()
    first = Segment(Point(200, 0), Point(300, 0), id=1)
    second = Segment(Point(200, 0), Point(200, 100), id=2)
    root.add_connection(first)
    root.add_connection(second)
    assert root.connections == [first, second]
    assert first.connections == []


def test_describe_highway():
    assert (
        make_highway().describe()
        == "Segment 0: (0.0, 0.0) -> (200.0, 0.0), highway=1, links=0"
    )


def test_describe_counts_links():
    root = make_highway()
    root.add_connection(Segment(Point(200, 0), Point(300, 50), id=1))
    assert root.describe().endswith("highway=1, links=1")


def test_describe_local_road_rounds_coordinates():
    seg = Segment(Point(200, 0), Point(300, 50), highway=False, id=1)
    assert seg.describe() == "Segment 1: (200.0, 0.0) -> (300.0, 50.0), highway=0, links=0"


def test_segments_compare_by_identity():
    a = Segment(Point(0, 0), Point(1, 1))
    b = Segment(Point(0, 0), Point(1, 1))
    assert a != b
    assert a == a