"""Mark-and-sweep bookkeeping of objects allocated while a program runs."""

from __future__ import annotations

from typing import Iterable, Iterator

from .operations import InternalError
from .values import Object, ObjectType, Value, safe_get_value_object

_POINTER_SIZE = 8
_CONTAINER_SIZE = 24
_STRING_HEADER_SIZE = 32


def _estimate_size(obj: Object) -> int:
    if obj.type is ObjectType.ARRAY:
        return _POINTER_SIZE + _POINTER_SIZE + _CONTAINER_SIZE
    if obj.type is ObjectType.STRING:
        return _POINTER_SIZE + _POINTER_SIZE + _STRING_HEADER_SIZE + len(obj.data)
    raise InternalError("Tried to allocate at runtime a compile-time constant namespace")


class Heap:
    """Tracks runtime objects and frees those no root can reach."""

    def __init__(self) -> None:
        self._objects: dict[Object, int] = {}
        self.size = 0

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Object]:
        return iter(list(self._objects))

    def __contains__(self, obj: object) -> bool:
        return obj in self._objects

    def add_object(self, obj: Object) -> None:
        """Start tracking an object allocated at runtime."""
        if obj in self._objects:
            return
        estimate = _estimate_size(obj)
        self._objects[obj] = estimate
        self.size += estimate

    def _mark(self, roots: Iterable[Value]) -> None:
        for obj in self._objects:
            obj.marked_for_save = False

        seen: set[int] = set()
        pending = list(roots)
        while pending:
            obj = safe_get_value_object(pending.pop())
            if obj is None or id(obj) in seen:
                continue
            seen.add(id(obj))
            obj.marked_for_save = True
            if obj.type is ObjectType.ARRAY:
                pending.extend(obj.data)

    def collect(self, roots: Iterable[Value]) -> int:
        """Drop every tracked object not reachable from ``roots``; return how many."""
        self._mark(roots)
        freed = [obj for obj in self._objects if not obj.marked_for_save]
        for obj in freed:
            self.size -= self._objects.pop(obj)
        return len(freed)