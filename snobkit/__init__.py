"""Partitions, Young tableaux, permutations and Fourier analysis on cyclic, dihedral and product groups."""

__version__ = "0.1.0"

__all__ = [
    "combinatorial_bank",
    "cyclic_group",
    "dihedral_group",
    "fourier",
    "group",
    "indexed_map",
    "integer_partition",
    "permutation",
    "young_tableau",
]