"""Permutations of (1, 2, ..., n) and contiguous cycles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class Permutation:
    """A permutation sigma of (1, ..., n), stored as the list sigma(1), ..., sigma(n)."""

    __slots__ = ("_p",)

    def __init__(self, values: Iterable[int]) -> None:
        self._p = [int(v) for v in values]
        if not self.check_valid():
            raise ValueError("Invalid permutation")

    @classmethod
    def identity(cls, n: int) -> "Permutation":
        return cls(range(1, n + 1))

    @property
    def n(self) -> int:
        return len(self._p)

    def __len__(self) -> int:
        return len(self._p)

    def _check_position(self, i: int) -> None:
        if not 1 <= i <= len(self._p):
            raise IndexError(f"position {i} out of range 1..{len(self._p)}")

    def __call__(self, i: int) -> int:
        """sigma(i), with i counted from 1."""
        self._check_position(i)
        return self._p[i - 1]

    def __getitem__(self, i: int) -> int:
        return self(i)

    def __setitem__(self, i: int, value: int) -> None:
        self.set_value(i, value)

    def set_value(self, i: int, j: int) -> None:
        """Set sigma(i)=j without checking that the result stays a permutation."""
        self._check_position(i)
        self._p[i - 1] = int(j)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._p == other._p

    def __hash__(self) -> int:
        return hash(tuple(self._p))

    def __invert__(self) -> "Permutation":
        return self.inverse()

    def _require_same_n(self, other: "Permutation") -> None:
        if len(other) != len(self):
            raise ValueError("Permutations act on different numbers of items.")

    def __mul__(self, other: "Permutation") -> "Permutation":
        """Composition: (self*other)(i) = self(other(i))."""
        if not isinstance(other, Permutation):
            return NotImplemented
        self._require_same_n(other)
        return Permutation(self._p[x - 1] for x in other._p)

    def __imul__(self, other: "Permutation") -> "Permutation":
        """Replace self by other composed after self, i.e. i -> other(self(i))."""
        if not isinstance(other, Permutation):
            return NotImplemented
        self._require_same_n(other)
        self._p = [other._p[x - 1] for x in self._p]
        return self

    def inverse(self) -> "Permutation":
        result = [0] * len(self._p)
        for i, v in enumerate(self._p, start=1):
            result[v - 1] = i
        return Permutation(result)

    def inv(self) -> "Permutation":
        return self.inverse()

    def check_valid(self) -> bool:
        """True if the values are exactly 1..n, each once."""
        n = len(self._p)
        seen = [False] * n
        for v in self._p:
            if v < 1 or v > n or seen[v - 1]:
                return False
            seen[v - 1] = True
        return True

    def __str__(self) -> str:
        return "[ " + "".join(f"{v} " for v in self._p) + "]"

    def __repr__(self) -> str:
        return f"Permutation({self._p!r})"


@dataclass(frozen=True)
class ContiguousCycle:
    """The cycle on the contiguous range a..b."""

    a: int
    b: int

    def __str__(self) -> str:
        return f"CCycle({self.a},{self.b})"