"""Ordered list of the triangles solved during a session."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .model import Triangle


class TriangleCatalog:
    """Insertion-ordered triangles, compared by identity.

    ``get`` and ``index_of`` are lenient
    (first element for an out-of-range index, ``0`` for a missing
    triangle); ``find`` is the strict lookup.
    """

    def __init__(self) -> None:
        self._triangles: List[Triangle] = []

    def __len__(self) -> int:
        return len(self._triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(list(self._triangles))

    def __contains__(self, triangle: object) -> bool:
        return self.find(triangle) is not None  # type: ignore[arg-type]

    def size(self) -> int:
        return len(self._triangles)

    def add(self, triangle: Triangle) -> None:
        self._triangles.append(triangle)

    def remove(self, triangle: Triangle) -> None:
        index = self.find(triangle)
        if index is not None:
            del self._triangles[index]

    def clear(self) -> None:
        self._triangles.clear()

    def get(self, index: int) -> Triangle:
        if not self._triangles:
            raise IndexError("catalog is empty")
        if 0 <= index < len(self._triangles):
            return self._triangles[index]
        return self._triangles[0]

    def find(self, triangle: Triangle) -> Optional[int]:
        for idx, candidate in enumerate(self._triangles):
            if candidate is triangle:
                return idx
        return None

    def index_of(self, triangle: Triangle) -> int:
        index = self.find(triangle)
        return 0 if index is None else index

    def previous_of(self, triangle: Triangle) -> Optional[Triangle]:
        index = self.find(triangle)
        if index is None or index == 0:
            return None
        return self._triangles[index - 1]

    def next_of(self, triangle: Triangle) -> Optional[Triangle]:
        index = self.find(triangle)
        if index is None or index >= len(self._triangles) - 1:
            return None
        return self._triangles[index + 1]


__all__ = ["TriangleCatalog"]
