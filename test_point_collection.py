import pytest

import point_collection
from exceptions import GeometryError, PointIndexError, ResourceExhaustedError
from geometry import DERIVED_GROUP, Point, Primary
from point_collection import PointCollection, partition_by_group


@pytest.fixture
def collection():
    c = PointCollection()
    c.insert(0, 0, 1)
    c.insert(10, 0, 1)
    c.insert(5, 8, 2)
    c.insert(3, 3)
    c.insert(7, 1, 2)
    return c


def test_insert_returns_index(collection):
    assert collection.insert(1.5, 2.5, 2) == 5
    assert collection[5] == Point(1.5, 2.5, Primary(2))
    assert len(collection) == 6


def test_iteration_keeps_insertion_order(collection):
    assert [(p.x, p.y) for p in collection] == [(0, 0), (10, 0), (5, 8), (3, 3), (7, 1)]
    assert collection.points == tuple(collection)


@pytest.mark.parametrize("index", [5, 100, -1])
def test_out_of_range(collection, index):
    with pytest.raises(PointIndexError) as excinfo:
        collection[index]
    assert isinstance(excinfo.value, IndexError)
    assert isinstance(excinfo.value, GeometryError)
    assert excinfo.value.size == 5

    with pytest.raises(IndexError):
        collection.move(index, 1, 1)
    with pytest.raises(IndexError):
        collection.remove(index)


def test_insert_out_of_memory(monkeypatch):
    def exhausted(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(point_collection, "Point", exhausted)
    c = PointCollection()
    with pytest.raises(ResourceExhaustedError):
        c.insert(1, 1)
    assert len(c) == 0


def test_move_keeps_group(collection):
    snapshot = collection.points
    collection.move(2, 50, 60)
    assert collection[2] == Point(50, 60, Primary(2))
    # earlier snapshots are not affected
    assert snapshot[2] == Point(5, 8, Primary(2))


def test_translate_group(collection):
    collection.translate_group(2, 1, -1)
    assert [(p.x, p.y) for p in collection] == [(0, 0), (10, 0), (6, 7), (3, 3), (8, 0)]


def test_translate_indices(collection):
    collection.translate([0, 3], 2, 2)
    assert (collection[0].x, collection[0].y) == (2, 2)
    assert (collection[3].x, collection[3].y) == (5, 5)

    with pytest.raises(PointIndexError):
        collection.translate([9], 1, 1)


def test_remove_and_clear(collection):
    removed = collection.remove(3)
    assert removed == Point(3, 3)
    assert len(collection) == 4
    assert collection[3] == Point(7, 1, Primary(2))

    collection.clear()
    assert len(collection) == 0


def test_insert_rejects_derived_group():
    c = PointCollection()
    with pytest.raises(ValueError):
        c.insert(1, 1, DERIVED_GROUP)
    assert len(c) == 0


def test_hit_test_picks_topmost(collection):
    collection.insert(12, 1, 1)
    # (10, 0) and (12, 1) both cover (11, 0); the later one is on top
    assert collection.hit_test(11, 0) == 5
    assert collection.hit_test(11, 0, radius=1.0) == 1
    assert collection.hit_test(5, 8, radius=1.0) == 2


def test_hit_test_boundary_and_miss(collection):
    assert collection.hit_test(5, 18) == 2
    assert collection.hit_test(5, 18.5) is None
    assert collection.hit_test(100, 100) is None
    assert PointCollection().hit_test(0, 0) is None


def test_hit_test_then_move(collection):
    index = collection.hit_test(3.5, 3.5, radius=1.0)
    assert index == 3
    collection.move(index, 40, 40)
    assert collection.hit_test(3.5, 3.5, radius=1.0) is None
    assert collection.hit_test(40, 40) == 3


def test_indices_of_group(collection):
    assert collection.indices_of_group(1) == [0, 1]
    assert collection.indices_of_group(2) == [2, 4]
    assert collection.indices_of_group(0) == [3]
    assert collection.indices_of_group(7) == []


def test_partition_by_group(collection):
    first, second = partition_by_group(collection.points, 1, 2)
    assert first == [0, 1]
    assert second == [2, 4]

    first, second = partition_by_group(collection.points, 2, 0)
    assert first == [2, 4]
    assert second == [3]


def test_partition_empty():
    assert partition_by_group([], 1, 2) == ([], [])
