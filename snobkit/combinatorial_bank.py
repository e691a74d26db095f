"""Cached enumeration of integer partitions and standard Young tableaux.

Partitions of n are built from the partitions of n-1. The standard tableaux
of a shape are built from the tableaux of the shapes obtained by removing one
corner box. Both are computed once per bank and then reused.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Iterator, Optional

from snobkit.integer_partition import IntegerPartition
from snobkit.young_tableau import StandardYoungTableau


class PartitionNode:
    """A shape together with its parent shapes (one box fewer) and its tableaux."""

    def __init__(self, shape: Iterable[int]) -> None:
        self.shape = IntegerPartition(shape)
        self.n = self.shape.getn()
        self.parents: list[PartitionNode] = []
        self._tableaux: Optional[list[StandardYoungTableau]] = None

    def young_tableaux(self) -> tuple[StandardYoungTableau, ...]:
        """All standard Young tableaux of this shape, built on first use."""
        if self._tableaux is None:
            self._tableaux = self._make_tableaux()
        return tuple(self._tableaux)

    def _make_tableaux(self) -> list[StandardYoungTableau]:
        if self.n == 1:
            return [StandardYoungTableau.single_row(1)]
        tableaux = []
        for parent in self.parents:
            k = parent.shape.height()
            row = next(
                (j for j in range(k) if parent.shape[j] < self.shape[j]),
                k,
            )
            for sub in parent.young_tableaux():
                tableaux.append(sub.copy().add(row, self.n))
        return tableaux

    def __repr__(self) -> str:
        return f"PartitionNode({self.shape})"


class CombinatorialBankLevel:
    """Partitions of one fixed n and the nodes of those shapes."""

    def __init__(self, n: int = 1, sub: Optional["CombinatorialBankLevel"] = None) -> None:
        if n > 1 and sub is None:
            raise ValueError("A level above 1 needs the level below it.")
        self.n = n
        self.sub = sub
        self._partitions: Optional[list[IntegerPartition]] = None
        self._nodes: dict[IntegerPartition, PartitionNode] = {}

    def integer_partitions(self) -> tuple[IntegerPartition, ...]:
        """All partitions of n, built from those of n-1 on first use."""
        if self._partitions is None:
            self._partitions = self._make_partitions()
        return tuple(self._partitions)

    def young_tableaux(self, shape: Iterable[int]) -> tuple[StandardYoungTableau, ...]:
        return self._node(IntegerPartition(shape)).young_tableaux()

    def _node(self, shape: IntegerPartition) -> PartitionNode:
        if shape.getn() != self.n:
            raise ValueError(f"Shape {shape} is not a partition of {self.n}.")
        node = self._nodes.get(shape)
        if node is not None:
            return node
        node = PartitionNode(shape)
        if self.n > 1:
            for i in range(shape.height() - 1, -1, -1):
                if shape.shortenable(i):
                    mu = shape.copy().remove(i)
                    node.parents.append(self.sub._node(mu))
        self._nodes[node.shape.copy()] = node
        return node

    def _make_partitions(self) -> list[IntegerPartition]:
        if self.n == 1:
            return [IntegerPartition([1])]
        partitions = []
        for p in self.sub.integer_partitions():
            k = p.height()
            if k == 1 or p[k - 2] > p[k - 1]:
                partitions.append(p.copy().add(k - 1))
            partitions.append(p.copy().add(k))
        return partitions


class CombinatorialBank:
    """A growing stack of levels, one for each n = 1, 2, ..."""

    def __init__(self) -> None:
        self.levels: list[CombinatorialBankLevel] = []

    def integer_partitions(self, n: int) -> tuple[IntegerPartition, ...]:
        return self._level(n).integer_partitions()

    def young_tableaux(self, shape: Iterable[int]) -> tuple[StandardYoungTableau, ...]:
        shape = IntegerPartition(shape)
        return self._level(shape.getn()).young_tableaux(shape)

    def _level(self, n: int) -> CombinatorialBankLevel:
        if n < 1:
            raise ValueError(f"n must be at least 1, got {n}.")
        while len(self.levels) < n:
            m = len(self.levels) + 1
            if m == 1:
                self.levels.append(CombinatorialBankLevel())
            else:
                self.levels.append(CombinatorialBankLevel(m, self.levels[-1]))
        return self.levels[n - 1]


@lru_cache(maxsize=None)
def default_bank() -> CombinatorialBank:
    """The bank shared by views created without an explicit one."""
    return CombinatorialBank()


class IntegerPartitions:
    """All integer partitions of n, as a read-only sequence."""

    def __init__(self, n: int, bank: Optional[CombinatorialBank] = None) -> None:
        self.n = n
        self._partitions = (bank or default_bank()).integer_partitions(n)

    def __len__(self) -> int:
        return len(self._partitions)

    def __getitem__(self, i: int) -> IntegerPartition:
        return self._partitions[i].copy()

    def __iter__(self) -> Iterator[IntegerPartition]:
        return (p.copy() for p in self._partitions)

    def __repr__(self) -> str:
        return f"IntegerPartitions({self.n})"


class YoungTableaux:
    """All standard Young tableaux of a given shape, as a read-only sequence."""

    def __init__(self, shape: Iterable[int], bank: Optional[CombinatorialBank] = None) -> None:
        self.shape = IntegerPartition(shape)
        self._tableaux = (bank or default_bank()).young_tableaux(self.shape)

    def __len__(self) -> int:
        return len(self._tableaux)

    def __getitem__(self, i: int) -> StandardYoungTableau:
        return self._tableaux[i].copy()

    def __iter__(self) -> Iterator[StandardYoungTableau]:
        return (t.copy() for t in self._tableaux)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.shape})"


class StandardYoungTableaux(YoungTableaux):
    """Standard Young tableaux of a given shape."""

    def __str__(self) -> str:
        return "StandardYoungTableaux" + str(self.shape)