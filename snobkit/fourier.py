"""Fourier transforms of functions on finite groups.

The transform of f is the collection of matrices F(rho) = sum_g f(g) rho(g),
one for each irrep rho. The inverse transform is
f(g) = sum_rho d_rho/|G| <rho(g), F(rho)>, where <A, B> = sum conj(A_ab) B_ab.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from snobkit.group import Group


class FourierOnGroup:
    """The Fourier transform of a function on a finite group, one matrix per irrep."""

    def __init__(self, group: Group, parts: Iterable) -> None:
        matrices = tuple(np.array(p, dtype=complex) for p in parts)
        n_irreps = group.n_irreps()
        if len(matrices) != n_irreps:
            raise ValueError(
                f"Expected {n_irreps} Fourier components, got {len(matrices)}."
            )
        for i, part in enumerate(matrices):
            d = group.irrep(i).dim()
            if part.shape != (d, d):
                raise ValueError(
                    f"Component {i} should be {d}x{d}, got shape {part.shape}."
                )
        self.group = group
        self.parts = matrices

    @property
    def n_irreps(self) -> int:
        return len(self.parts)

    @classmethod
    def transform(cls, group: Group, values: Sequence[complex]) -> "FourierOnGroup":
        """Fourier transform of the function whose value at element j is values[j]."""
        f = np.asarray(values, dtype=complex)
        size = group.size()
        if f.ndim != 1 or f.shape[0] != size:
            raise ValueError(
                f"Expected {size} function values, got an array of shape {f.shape}."
            )
        parts = []
        for i in range(group.n_irreps()):
            rho = group.irrep(i)
            matrices = np.stack([np.asarray(rho(j), dtype=complex) for j in range(size)])
            parts.append(np.einsum("j,jab->ab", f, matrices))
        return cls(group, parts)

    def to_function(self) -> np.ndarray:
        """The function on the group whose transform this is, indexed by element."""
        size = self.group.size()
        f = np.zeros(size, dtype=complex)
        for i, part in enumerate(self.parts):
            rho = self.group.irrep(i)
            c = rho.dim() / size
            for j in range(size):
                f[j] += np.vdot(np.asarray(rho(j), dtype=complex), part) * c
        return f

    def left(self, t) -> "FourierOnGroup":
        """Transform of the left translate h -> f(t^-1 h)."""
        return FourierOnGroup(
            self.group,
            (self.group.irrep(i)(t) @ part for i, part in enumerate(self.parts)),
        )

    def right(self, t) -> "FourierOnGroup":
        """Transform of the right translate h -> f(h t^-1)."""
        return FourierOnGroup(
            self.group,
            (part @ self.group.irrep(i)(t) for i, part in enumerate(self.parts)),
        )

    def inv(self) -> "FourierOnGroup":
        """Transform of h -> conj(f(h^-1)), i.e. each component's conjugate transpose."""
        return FourierOnGroup(self.group, (part.conj().T for part in self.parts))

    def __str__(self) -> str:
        blocks = []
        for part in self.parts:
            lines = str(part).splitlines()
            blocks.append("\n".join("  " + line for line in lines) + "\n")
        return "".join(blocks)

    def __repr__(self) -> str:
        return f"FourierOnGroup({self.group!r}, {len(self.parts)} parts)"


def fourier(group: Group, values: Sequence[complex]) -> FourierOnGroup:
    """Fourier transform of a function on group given by its values in index order."""
    return FourierOnGroup.transform(group, values)


def inverse_fourier(transform: FourierOnGroup) -> np.ndarray:
    """The function values recovered from a Fourier transform."""
    return transform.to_function()