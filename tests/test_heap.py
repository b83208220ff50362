import pytest

from sgvm.heap import Heap
from sgvm.operations import InternalError
from sgvm.values import (
    Object,
    ObjectType,
    value_from_number,
    value_from_object,
)


def string_obj(text):
    return Object(ObjectType.STRING, text)


def array_obj(items):
    return Object(ObjectType.ARRAY, list(items))


def test_add_object_tracks():
    heap = Heap()
    a = string_obj("a")
    b = array_obj([])
    heap.add_object(a)
    heap.add_object(b)
    assert len(heap) == 2
    assert a in heap and b in heap
    assert heap.size > 0


def test_adding_twice_counts_once():
    heap = Heap()
    a = string_obj("a")
    heap.add_object(a)
    size = heap.size
    heap.add_object(a)
    assert len(heap) == 1
    assert heap.size == size


def test_namespace_cannot_be_added():
    heap = Heap()
    with pytest.raises(InternalError, match="compile-time constant namespace"):
        heap.add_object(Object(ObjectType.NAMESPACE_CONSTANT, {}))
    assert len(heap) == 0


def test_collect_without_roots_frees_everything():
    heap = Heap()
    for text in ("x", "yy", "zzz"):
        heap.add_object(string_obj(text))
    assert heap.collect([]) == 3
    assert len(heap) == 0
    assert heap.size == 0


def test_collect_keeps_roots():
    heap = Heap()
    kept = string_obj("keep")
    dropped = string_obj("drop")
    heap.add_object(kept)
    heap.add_object(dropped)
    freed = heap.collect([value_from_object(kept), value_from_number(1)])
    assert freed == 1
    assert kept in heap
    assert dropped not in heap
    assert kept.marked_for_save is True


def test_collect_follows_arrays():
    heap = Heap()
    inner = string_obj("inner")
    nested = array_obj([value_from_object(inner)])
    outer = array_obj([value_from_object(nested), value_from_number(2)])
    for obj in (inner, nested, outer):
        heap.add_object(obj)
    assert heap.collect([value_from_object(outer)]) == 0
    assert len(heap) == 3


def test_cyclic_array_is_handled():
    heap = Heap()
    cyclic = array_obj([])
    cyclic.data.append(value_from_object(cyclic))
    heap.add_object(cyclic)
    assert heap.collect([value_from_object(cyclic)]) == 0
    assert heap.collect([]) == 1
    assert len(heap) == 0


def test_untracked_root_array_marks_children_each_time():
    heap = Heap()
    child = string_obj("child")
    heap.add_object(child)
    constant = array_obj([value_from_object(child)])
    root = [value_from_object(constant)]
    assert heap.collect(root) == 0
    assert heap.collect(root) == 0
    assert child in heap


def test_size_returns_to_previous_after_collect():
    heap = Heap()
    kept = string_obj("abc")
    heap.add_object(kept)
    before = heap.size
    heap.add_object(string_obj("a much longer string"))
    heap.add_object(array_obj([]))
    assert heap.size > before
    heap.collect([value_from_object(kept)])
    assert heap.size == before


def test_iteration_lists_tracked_objects():
    heap = Heap()
    objs = [string_obj("a"), string_obj("b")]
    for obj in objs:
        heap.add_object(obj)
    assert set(map(id, heap)) == set(map(id, objs))