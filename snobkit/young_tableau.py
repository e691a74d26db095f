"""Young tableaux: integers arranged in left-justified rows."""

from __future__ import annotations

from typing import Iterable

from snobkit.integer_partition import IntegerPartition


class YoungTableau:
    """A Young tableau stored as a list of rows."""

    __slots__ = ("rows",)

    def __init__(self, rows: Iterable[Iterable[int]] = ()) -> None:
        self.rows: list[list[int]] = [[int(v) for v in row] for row in rows]

    @classmethod
    def from_shape(cls, shape: Iterable[int]) -> "YoungTableau":
        """Tableau of the given shape filled with 1, ..., n row by row."""
        rows = []
        t = 1
        for length in shape:
            rows.append(list(range(t, t + length)))
            t += length
        return cls(rows)

    @classmethod
    def single_row(cls, n: int) -> "YoungTableau":
        return cls([range(1, n + 1)])

    # ---- access ---------------------------------------------------------

    def k(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def shape(self) -> IntegerPartition:
        return IntegerPartition(len(row) for row in self.rows)

    def _check(self, r: int, c: int | None = None) -> None:
        if not 0 <= r < len(self.rows):
            raise IndexError(f"row {r} out of range")
        if c is not None and not 0 <= c < len(self.rows[r]):
            raise IndexError(f"column {c} out of range in row {r}")

    def row(self, r: int) -> list[int]:
        self._check(r)
        return list(self.rows[r])

    def at(self, r: int, c: int) -> int:
        self._check(r, c)
        return self.rows[r][c]

    def __call__(self, r: int, c: int) -> int:
        return self.at(r, c)

    def __getitem__(self, key: tuple[int, int]) -> int:
        r, c = key
        return self.at(r, c)

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        r, c = key
        self._check(r, c)
        self.rows[r][c] = int(value)

    def index(self, m: int) -> tuple[int, int]:
        """(row, column) of the entry m."""
        for r, row in enumerate(self.rows):
            for c, v in enumerate(row):
                if v == m:
                    return r, c
        raise ValueError(f"{m} is not in the tableau")

    # ---- modification ---------------------------------------------------

    def add(self, r: int, j: int) -> "YoungTableau":
        """Append j to row r, or start a new row if r is past the last one."""
        if r < len(self.rows):
            self.rows[r].append(j)
        else:
            self.rows.append([j])
        return self

    def remove(self, r: int) -> "YoungTableau":
        """Drop the last entry of row r; if it is the only one, drop the last row."""
        self._check(r)
        if len(self.rows[r]) > 1:
            self.rows[r].pop()
        else:
            self.rows.pop()
        return self

    def apply_transp(self, i: int, j: int | None = None) -> int:
        """Swap entries i and j (default i+1); return the change in axial distance."""
        if j is None:
            j = i + 1
        r1, c1 = self.index(i)
        r2, c2 = self.index(j)
        self.rows[r1][c1] = j
        self.rows[r2][c2] = i
        return (c2 - r2) - (c1 - r1)

    def copy(self) -> "YoungTableau":
        return type(self)(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YoungTableau):
            return NotImplemented
        return self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    # ---- I/O ------------------------------------------------------------

    def __str__(self) -> str:
        return "".join("".join(f"{v} " for v in row) + "\n" for row in self.rows)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows!r})"


class StandardYoungTableau(YoungTableau):
    """A Young tableau whose rows and columns increase."""

    __slots__ = ()