"""The dihedral group of order 2n, its elements and its irreps."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass

import numpy as np

from snobkit.group import Group, GroupElement, GroupIrrep


@dataclass(frozen=True)
class DihedralGroupElement(GroupElement):
    """A rotation by i (s=1) or a reflection (s=-1) of the regular n-gon."""

    n: int
    i: int = 0
    s: int = 1

    def index(self) -> int:
        return self.i if self.s == 1 else self.n + self.i

    def inverse(self) -> "DihedralGroupElement":
        return DihedralGroupElement(self.n, (self.s * (-self.i) + self.n) % self.n, self.s)

    def _group_size(self) -> int:
        return 2 * self.n

    def __mul__(self, other: object) -> GroupElement:
        if isinstance(other, DihedralGroupElement):
            if other.n != self.n:
                raise ValueError("Elements of different dihedral groups.")
            return DihedralGroupElement(
                self.n, (self.i + self.s * other.i) % self.n, self.s * other.s
            )
        return super().__mul__(other)

    def __str__(self) -> str:
        return f"Dihedral({self.n},{self.i},{self.s})"


def _scalar(value: complex) -> np.ndarray:
    return np.array([[complex(value)]])


@dataclass(frozen=True)
class DihedralGroupIrrep(GroupIrrep):
    """The k'th irrep of the dihedral group of order 2n.

    The first irreps are one dimensional (two for odd n, four for even n);
    the rest are two dimensional.
    """

    n: int
    k: int

    def dim(self) -> int:
        return 1 if self.k < 2 * (1 + (self.n % 2 == 0)) else 2

    def _group_size(self) -> int:
        return 2 * self.n

    def __call__(self, x) -> np.ndarray:
        i = x.index() if isinstance(x, DihedralGroupElement) else operator.index(x)
        n, k = self.n, self.k
        reflection_sign = -1 if i >= n else 1

        if k == 0:
            return _scalar(1)
        if k == 1:
            return _scalar(reflection_sign)
        if n % 2 == 0:
            parity = -1 if i % 2 else 1
            if k == 2:
                return _scalar(parity)
            if k == 3:
                return _scalar(parity * reflection_sign)

        p = k - 1 - 2 * (n % 2 == 0)
        angle = 2 * math.pi / n * p * i
        a = complex(math.cos(angle), math.sin(angle))
        b = a.conjugate()
        r = np.zeros((2, 2), dtype=complex)
        if i < n:
            r[0, 0] = a
            r[1, 1] = b
        else:
            r[0, 1] = a
            r[1, 0] = b
        return r

    def __str__(self) -> str:
        return f"DihedralGroupIrrep({self.n},{self.k})"


@dataclass(frozen=True)
class DihedralGroup(Group):
    """The symmetry group of the regular n-gon, of order 2n."""

    n: int

    def size(self) -> int:
        return 2 * self.n

    def identity(self) -> DihedralGroupElement:
        return DihedralGroupElement(self.n, 0, 1)

    def element(self, i: int) -> DihedralGroupElement:
        if i < self.n:
            return DihedralGroupElement(self.n, i, 1)
        return DihedralGroupElement(self.n, i - self.n, -1)

    def r(self, i: int) -> DihedralGroupElement:
        """Rotation by i steps."""
        return DihedralGroupElement(self.n, i, 1)

    def s(self) -> DihedralGroupElement:
        """The generating reflection."""
        return DihedralGroupElement(self.n, 1, -1)

    def index(self, x: DihedralGroupElement) -> int:
        return x.i + self.n * (x.s == -1)

    def n_irreps(self) -> int:
        if self.n % 2 == 0:
            return self.n // 2 + 3
        return (self.n - 1) // 2 + 2

    def irrep(self, i: int) -> DihedralGroupIrrep:
        return DihedralGroupIrrep(self.n, i)

    def __str__(self) -> str:
        return f"DihedralGroup({self.n})"