"""Immutable sparse mapping keyed by grid points."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Callable,
    Generic,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from .point import Point
from .point_set import PointSet

V = TypeVar("V")
W = TypeVar("W")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PointMap(Generic[V]):
    """Mapping of unique ``Point`` keys to values.

    Same discipline as ``PointSet``: nothing is modified in place, and
    iteration yields ``(point, value)`` pairs in row-major order.
    """

    _entries: Mapping[Point, V] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_entries", MappingProxyType(dict(self._entries)))

    @classmethod
    def from_entries(cls, entries: Iterable[Tuple[Point, V]]) -> "PointMap[V]":
        return cls(dict(entries))

    @classmethod
    def from_matrix(cls, grid: Sequence[Sequence[Optional[V]]]) -> "PointMap[V]":
        """Key every defined cell of ``grid`` by its position."""

        entries = {}
        for row_index, row in enumerate(grid):
            for column_index, value in enumerate(row):
                if value is not None:
                    entries[Point(row_index, column_index)] = value
        return cls(entries)

    def __contains__(self, point: object) -> bool:
        return point in self._entries

    def __iter__(self) -> Iterator[Tuple[Point, V]]:
        for point in sorted(self._entries):
            yield point, self._entries[point]

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointMap):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    def has(self, point: Point) -> bool:
        return point in self._entries

    def get(self, point: Point, default: Optional[V] = None) -> Optional[V]:
        return self._entries.get(point, default)

    def set(self, point: Point, value: V) -> "PointMap[V]":
        entries = dict(self._entries)
        entries[point] = value
        return PointMap(entries)

    def remove(self, point: Point) -> "PointMap[V]":
        if point not in self._entries:
            return self
        entries = dict(self._entries)
        del entries[point]
        return PointMap(entries)

    def filter(self, predicate: Callable[[V, Point], bool]) -> "PointMap[V]":
        return PointMap(
            {point: value for point, value in self if predicate(value, point)}
        )

    def map(self, func: Callable[[V], W]) -> "PointMap[W]":
        return PointMap({point: func(value) for point, value in self})

    def reduce(self, func: Callable[[T, V, Point], T], initial: T) -> T:
        acc = initial
        for point, value in self:
            acc = func(acc, value, point)
        return acc

    def points(self) -> PointSet:
        return PointSet.from_points(self._entries)

    def min(self) -> Point:
        return self.points().min()

    def max(self) -> Point:
        return self.points().max()


__all__ = ["PointMap"]
