"""The cyclic group Z_n, its elements and its irreps."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass

import numpy as np

from snobkit.group import Group, GroupElement, GroupIrrep


@dataclass(frozen=True)
class CyclicGroupElement(GroupElement):
    """The element i of Z_n."""

    n: int
    i: int = 0

    def index(self) -> int:
        return self.i

    def inverse(self) -> "CyclicGroupElement":
        return CyclicGroupElement(self.n, (-self.i + self.n) % self.n)

    def _group_size(self) -> int:
        return self.n

    def __mul__(self, other: object) -> GroupElement:
        if isinstance(other, CyclicGroupElement):
            if other.n != self.n:
                raise ValueError("Elements of different cyclic groups.")
            return CyclicGroupElement(self.n, (self.i + other.i) % self.n)
        return super().__mul__(other)

    def __str__(self) -> str:
        return f"Cyclic({self.n},{self.i})"


@dataclass(frozen=True)
class CyclicGroupIrrep(GroupIrrep):
    """The character i -> exp(2 pi i k i / n) of Z_n."""

    n: int
    k: int

    def dim(self) -> int:
        return 1

    def _group_size(self) -> int:
        return self.n

    def __call__(self, x) -> np.ndarray:
        i = x.i if isinstance(x, CyclicGroupElement) else operator.index(x)
        angle = 2 * math.pi / self.n * self.k * i
        return np.array([[complex(math.cos(angle), math.sin(angle))]])

    def __str__(self) -> str:
        return f"CyclicGroupIrrep({self.n},{self.k})"


@dataclass(frozen=True)
class CyclicGroup(Group):
    """The cyclic group of order n."""

    n: int

    def size(self) -> int:
        return self.n

    def identity(self) -> CyclicGroupElement:
        return CyclicGroupElement(self.n, 0)

    def element(self, i: int) -> CyclicGroupElement:
        return CyclicGroupElement(self.n, i)

    def index(self, x: CyclicGroupElement) -> int:
        return x.i

    def n_irreps(self) -> int:
        return self.n

    def irrep(self, i: int) -> CyclicGroupIrrep:
        return CyclicGroupIrrep(self.n, i)

    def __str__(self) -> str:
        return f"CyclicGroup({self.n})"