import pytest

from trigsketch.catalog import TriangleCatalog
from trigsketch.model import Triangle


def _triangles(count):
    return [Triangle(hyp=5.0 + i, opp=3.0, adj=4.0, ang=30.0) for i in range(count)]


@pytest.fixture
def filled():
    catalog = TriangleCatalog()
    items = _triangles(3)
    for item in items:
        catalog.add(item)
    return catalog, items


def test_insertion_order_is_kept(filled):
    catalog, items = filled

    assert len(catalog) == catalog.size() == 3
    assert list(catalog) == items
    assert [catalog.get(i) for i in range(3)] == items


def test_out_of_range_get_returns_first(filled):
    catalog, items = filled

    assert catalog.get(99) is items[0]
    assert catalog.get(-1) is items[0]


def test_get_on_empty_catalog_raises():
    with pytest.raises(IndexError):
        TriangleCatalog().get(0)


def test_lookup_is_by_identity(filled):
    catalog, items = filled
    twin = Triangle(hyp=5.0, opp=3.0, adj=4.0, ang=30.0)

    assert catalog.find(items[1]) == 1
    assert catalog.find(twin) is None
    assert twin not in catalog
    assert items[2] in catalog
    # lenient lookup reports 0 for a missing triangle
    assert catalog.index_of(twin) == 0


def test_remove_absent_triangle_is_noop(filled):
    catalog, items = filled

    catalog.remove(_triangles(1)[0])

    assert list(catalog) == items


def test_remove_and_clear(filled):
    catalog, items = filled

    catalog.remove(items[1])
    assert list(catalog) == [items[0], items[2]]

    catalog.clear()
    assert catalog.size() == 0


def test_neighbours(filled):
    catalog, items = filled

    assert catalog.previous_of(items[0]) is None
    assert catalog.next_of(items[0]) is items[1]
    assert catalog.previous_of(items[2]) is items[1]
    assert catalog.next_of(items[2]) is None
    assert catalog.next_of(_triangles(1)[0]) is None
