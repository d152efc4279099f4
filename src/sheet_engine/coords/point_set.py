"""Immutable sparse set of grid points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, Iterator, TypeVar

from .point import Field, Point

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PointSet:
    """Set of unique ``Point`` values.

    Instances never change; every operation that would mutate the set
    returns a new one. Iteration and ``to_list`` are row-major so callers
    get a stable order regardless of how the set was built.
    """

    _points: FrozenSet[Point] = field(default_factory=frozenset)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "PointSet":
        return cls(frozenset(points))

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def __iter__(self) -> Iterator[Point]:
        return iter(sorted(self._points))

    def __len__(self) -> int:
        return len(self._points)

    def __bool__(self) -> bool:
        return bool(self._points)

    def is_empty(self) -> bool:
        return not self._points

    def has(self, point: Point) -> bool:
        return point in self._points

    def add(self, point: Point) -> "PointSet":
        if point in self._points:
            return self
        return PointSet(self._points | {point})

    def remove(self, point: Point) -> "PointSet":
        if point not in self._points:
            return self
        return PointSet(self._points - {point})

    def filter(self, predicate: Callable[[Point], bool]) -> "PointSet":
        return PointSet(frozenset(p for p in self._points if predicate(p)))

    def reduce(self, func: Callable[[T, Point], T], initial: T) -> T:
        acc = initial
        for point in self:
            acc = func(acc, point)
        return acc

    def min(self) -> Point:
        """Top-left corner of the bounding box."""

        if not self._points:
            raise ValueError("min() of an empty PointSet")
        return Point(
            min(p.row for p in self._points),
            min(p.column for p in self._points),
        )

    def max(self) -> Point:
        """Bottom-right corner of the bounding box."""

        if not self._points:
            raise ValueError("max() of an empty PointSet")
        return Point(
            max(p.row for p in self._points),
            max(p.column for p in self._points),
        )

    def _edge(self, field: Field, delta: int) -> int:
        corner = self.max() if delta > 0 else self.min()
        return corner[field]

    def extend_edge(self, field: Field, delta: int) -> "PointSet":
        """Copy every point on the ``delta``-side edge, shifted by ``delta``.

        A positive ``delta`` grows the max edge, a negative one the min edge.
        """

        if not self._points:
            return self
        edge = self._edge(field, delta)
        added = {
            p.with_field(field, edge + delta) for p in self._points if p[field] == edge
        }
        return PointSet(self._points | added)

    def shrink_edge(self, field: Field, delta: int) -> "PointSet":
        """Drop every point on the max (``delta > 0``) or min edge."""

        if not self._points:
            return self
        edge = self._edge(field, delta)
        return PointSet(frozenset(p for p in self._points if p[field] != edge))

    def to_list(self) -> list[Point]:
        return sorted(self._points)


__all__ = ["PointSet"]
