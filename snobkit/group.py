"""Abstract groups, their elements and irreps, and direct products of groups."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np


class GroupElement(ABC):
    """An element of a finite group."""

    @abstractmethod
    def index(self) -> int:
        """Position of the element in its group's enumeration."""

    @abstractmethod
    def inverse(self) -> "GroupElement":
        """The inverse element."""

    @abstractmethod
    def _group_size(self) -> int:
        """Order of the group the element belongs to."""

    def __mul__(self, other: object) -> "GroupElement":
        """Pair with an element of a different kind of group."""
        if not isinstance(other, GroupElement):
            return NotImplemented
        return gpair(self, other)


class GroupIrrep(ABC):
    """An irreducible unitary representation of a finite group."""

    @abstractmethod
    def dim(self) -> int:
        """Dimension of the representation."""

    @abstractmethod
    def __call__(self, x) -> np.ndarray:
        """The representation matrix of an element or of an element index."""

    @abstractmethod
    def _group_size(self) -> int:
        """Order of the group being represented."""

    def __mul__(self, other: object) -> "ProductGroupIrrep":
        """The outer tensor product of two irreps."""
        if not isinstance(other, GroupIrrep):
            return NotImplemented
        return ProductGroupIrrep(self, other)


class Group(ABC):
    """A finite group with its elements and irreps enumerated."""

    @abstractmethod
    def size(self) -> int:
        """Order of the group."""

    @abstractmethod
    def identity(self) -> GroupElement:
        """The identity element."""

    @abstractmethod
    def element(self, i: int) -> GroupElement:
        """The i'th element."""

    @abstractmethod
    def index(self, x: GroupElement) -> int:
        """Position of x in the enumeration of elements."""

    @abstractmethod
    def n_irreps(self) -> int:
        """Number of irreducible representations."""

    @abstractmethod
    def irrep(self, i: int) -> GroupIrrep:
        """The i'th irreducible representation."""

    def __len__(self) -> int:
        return self.size()

    def elements(self) -> Iterator[GroupElement]:
        """All elements in index order."""
        for i in range(self.size()):
            yield self.element(i)

    def __mul__(self, other: object) -> "ProductGroup":
        """The direct product of two groups."""
        if not isinstance(other, Group):
            return NotImplemented
        return ProductGroup(self, other)


@dataclass(frozen=True, eq=False)
class ProductGroupElement(GroupElement):
    """A pair (e1, e2) in a direct product; size2 is the order of the second factor."""

    e1: GroupElement
    e2: GroupElement
    size2: int

    def index(self) -> int:
        return self.e1.index() * self.size2 + self.e2.index()

    def inverse(self) -> "ProductGroupElement":
        return ProductGroupElement(self.e1.inverse(), self.e2.inverse(), self.size2)

    def _group_size(self) -> int:
        return self.e1._group_size() * self.size2

    def __mul__(self, other: object) -> GroupElement:
        if isinstance(other, ProductGroupElement):
            return ProductGroupElement(self.e1 * other.e1, self.e2 * other.e2, self.size2)
        return super().__mul__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductGroupElement):
            return NotImplemented
        return (self.e1, self.e2, self.size2) == (other.e1, other.e2, other.size2)

    def __hash__(self) -> int:
        return hash((self.e1, self.e2, self.size2))

    def __str__(self) -> str:
        return f"({self.e1},{self.e2})"


def gpair(e1: GroupElement, e2: GroupElement, size2: Optional[int] = None) -> ProductGroupElement:
    """Pair two elements into an element of the direct product of their groups."""
    if size2 is None:
        size2 = e2._group_size()
    return ProductGroupElement(e1, e2, size2)


@dataclass(frozen=True)
class ProductGroupIrrep(GroupIrrep):
    """The outer tensor product of an irrep of each factor."""

    rho1: GroupIrrep
    rho2: GroupIrrep

    def dim(self) -> int:
        return self.rho1.dim() * self.rho2.dim()

    def _group_size(self) -> int:
        return self.rho1._group_size() * self.rho2._group_size()

    def __call__(self, x) -> np.ndarray:
        if isinstance(x, ProductGroupElement):
            return np.kron(self.rho1(x.e1), self.rho2(x.e2))
        i = operator.index(x)
        size2 = self.rho2._group_size()
        return np.kron(self.rho1(i // size2), self.rho2(i % size2))

    def __str__(self) -> str:
        return f"Product<{self.rho1},{self.rho2}>"


class ProductGroup(Group):
    """The direct product g1 x g2 of two finite groups."""

    def __init__(self, g1: Group, g2: Group) -> None:
        self.g1 = g1
        self.g2 = g2

    def size(self) -> int:
        return self.g1.size() * self.g2.size()

    def identity(self) -> ProductGroupElement:
        return gpair(self.g1.identity(), self.g2.identity(), self.g2.size())

    def element(self, i: int) -> ProductGroupElement:
        size2 = self.g2.size()
        return gpair(self.g1.element(i // size2), self.g2.element(i % size2), size2)

    def index(self, x: ProductGroupElement) -> int:
        return x.index()

    def n_irreps(self) -> int:
        return self.g1.n_irreps() * self.g2.n_irreps()

    def irrep(self, i: int) -> ProductGroupIrrep:
        m2 = self.g2.n_irreps()
        return ProductGroupIrrep(self.g1.irrep(i // m2), self.g2.irrep(i % m2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductGroup):
            return NotImplemented
        return self.g1 == other.g1 and self.g2 == other.g2

    def __hash__(self) -> int:
        return hash((self.g1, self.g2))

    def __str__(self) -> str:
        return f"Product<{self.g1},{self.g2}>"

    def __repr__(self) -> str:
        return f"ProductGroup({self.g1!r}, {self.g2!r})"