"""Integer partitions (p_1, p_2, ..., p_k) of n."""

from __future__ import annotations

from math import factorial
from typing import Iterable, Iterator


class IntegerPartition:
    """A weakly decreasing sequence of positive parts summing to n."""

    __slots__ = ("_parts",)

    def __init__(self, parts: Iterable[int] = ()) -> None:
        self._parts = [int(v) for v in parts]

    # ---- access ---------------------------------------------------------

    def height(self) -> int:
        """Number of parts, k."""
        return len(self._parts)

    def getn(self) -> int:
        """The integer n being partitioned."""
        return sum(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __getitem__(self, r: int) -> int:
        return self._parts[r]

    def __setitem__(self, r: int, x: int) -> None:
        self._parts[r] = int(x)

    def __iter__(self) -> Iterator[int]:
        return iter(self._parts)

    # ---- combinatorics --------------------------------------------------

    def hooklength(self) -> int:
        """Number of standard Young tableaux of this shape (hook length formula)."""
        parts = self._parts
        product = 1
        for r, row in enumerate(parts):
            for c in range(1, row + 1):
                right = row - c
                below = sum(1 for lower in parts[r + 1:] if lower >= c)
                product *= right + below + 1
        return factorial(self.getn()) // product

    def extendable(self, i: int) -> bool:
        """Whether a box can be added to row i and keep a valid shape."""
        k = len(self._parts)
        if i == k or i == 0:
            return True
        return self._parts[i - 1] > self._parts[i]

    def shortenable(self, i: int) -> bool:
        """Whether a box can be removed from row i and keep a valid shape."""
        if i == len(self._parts) - 1:
            return True
        return self._parts[i + 1] < self._parts[i]

    def add(self, r: int, m: int = 1) -> "IntegerPartition":
        """Add m boxes to row r, opening a new row if r is past the last one."""
        if r < len(self._parts):
            self._parts[r] += m
        else:
            self._parts.append(m)
        return self

    def remove(self, r: int, m: int = 1) -> "IntegerPartition":
        """Remove m boxes from row r, dropping the last row if it empties."""
        self._parts[r] -= m
        if self._parts and self._parts[-1] == 0:
            self._parts.pop()
        return self

    def subpartitions(self) -> Iterator["IntegerPartition"]:
        """Yield every partition of n-1 obtained by removing one corner box."""
        parts = self._parts
        k = len(parts)
        if k == 0:
            raise ValueError("The empty partition has no subpartitions.")
        last = parts[:]
        last[-1] -= 1
        if last[-1] == 0:
            last.pop()
        yield IntegerPartition(last)
        for i in range(k - 2, -1, -1):
            if parts[i + 1] < parts[i]:
                shorter = parts[:]
                shorter[i] -= 1
                yield IntegerPartition(shorter)

    def copy(self) -> "IntegerPartition":
        return IntegerPartition(self._parts)

    # ---- comparison -----------------------------------------------------

    def _stripped(self) -> tuple[int, ...]:
        parts = list(self._parts)
        while parts and parts[-1] == 0:
            parts.pop()
        return tuple(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegerPartition):
            return NotImplemented
        return self._stripped() == other._stripped()

    def __lt__(self, other: "IntegerPartition") -> bool:
        if not isinstance(other, IntegerPartition):
            return NotImplemented
        if self.getn() != other.getn():
            raise ValueError("Comparing partition of n with partition of m<>n.")
        for a, b in zip(self._parts, other._parts):
            if a > b:
                return True
            if a < b:
                return False
        return False

    def __hash__(self) -> int:
        return hash(self._stripped())

    # ---- I/O ------------------------------------------------------------

    def __str__(self) -> str:
        return "[" + ",".join(str(v) for v in self._parts) + "]"

    def __repr__(self) -> str:
        return f"IntegerPartition({self._parts!r})"