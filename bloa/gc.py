"""A mark-and-sweep heap for objects the virtual machine allocates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

INITIAL_GC_THRESHOLD = 1024
OBJECT_SIZE = 32


@dataclass(eq=False)
class HeapObject:
    """An object living on the heap; ``value`` may refer to another object."""

    value: object
    size: int = OBJECT_SIZE
    marked: bool = False


class Heap:
    """Tracks allocated objects and frees those no root can reach."""

    def __init__(self, threshold: int = INITIAL_GC_THRESHOLD) -> None:
        if threshold < 0:
            raise ValueError(f"threshold must not be negative: {threshold}")
        self.objects: list[HeapObject] = []
        self.bytes_allocated = 0
        self.next_gc = threshold

    def allocate(
        self,
        value: object,
        size: int = OBJECT_SIZE,
        roots: Iterable[object] | None = None,
    ) -> HeapObject:
        """Create an object, collecting first if the threshold would be passed."""
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        if self.bytes_allocated + size > self.next_gc:
            self.collect(roots)
        obj = HeapObject(value, size)
        self.objects.append(obj)
        self.bytes_allocated += size
        return obj

    def collect(self, roots: Iterable[object] | None = None) -> int:
        """Free every object not reachable from ``roots``; return how many."""
        self._mark(roots or ())
        freed = self._sweep()
        self.next_gc = self.bytes_allocated * 2
        return freed

    def free(self, obj: HeapObject) -> None:
        """Release ``obj`` at once."""
        for index, candidate in enumerate(self.objects):
            if candidate is obj:
                del self.objects[index]
                self.bytes_allocated -= obj.size
                return
        raise ValueError("object does not belong to this heap")

    def _mark(self, roots: Iterable[object]) -> None:
        pending = [root for root in roots if isinstance(root, HeapObject)]
        while pending:
            obj = pending.pop()
            if obj.marked:
                continue
            obj.marked = True
            if isinstance(obj.value, HeapObject):
                pending.append(obj.value)

    def _sweep(self) -> int:
        survivors = []
        freed = 0
        for obj in self.objects:
            if obj.marked:
                obj.marked = False
                survivors.append(obj)
            else:
                self.bytes_allocated -= obj.size
                freed += 1
        self.objects = survivors
        return freed

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[HeapObject]:
        return iter(self.objects)

    def __contains__(self, obj: object) -> bool:
        return any(candidate is obj for candidate in self.objects)