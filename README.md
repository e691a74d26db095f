# snobkit

Combinatorics and harmonic analysis on small finite groups. The package
covers integer partitions, standard Young tableaux and permutations. It also
covers cyclic, dihedral and direct-product groups, with their irreducible
representations and Fourier transforms.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Integer partitions

`snobkit.integer_partition.IntegerPartition` holds the parts
(p_1, ..., p_k) of n.

```python
from snobkit.integer_partition import IntegerPartition

lam = IntegerPartition([4, 3, 1])
print(lam)               # [4,3,1]
print(lam.getn())        # 8
print(lam.height())      # 3
print(lam.hooklength())  # number of standard tableaux of this shape

for mu in lam.subpartitions():   # shapes with one corner box removed
    print(mu)
```

Other operations:

- `add(r, m=1)` adds boxes to a row, or opens a new row when `r` is past the last one.
- `remove(r, m=1)` takes boxes from a row and drops the last row if it becomes empty.
- `extendable(i)` and `shortenable(i)` check the shape before you change it.

Partitions compare equal when they agree up to trailing zeros, and they are
hashable. `<` orders partitions of the same n, with larger leading parts
first. Comparing partitions of different n raises `ValueError`.

## Young tableaux

```python
from snobkit.young_tableau import YoungTableau

t = YoungTableau.from_shape([4, 3, 1])   # filled 1..8 row by row
print(t)
print(t.shape())       # [4,3,1]
print(t[0, 2])         # 3
print(t.index(5))      # (1, 0)
delta = t.apply_transp(4)   # swap 4 and 5, return the change in axial distance
```

`StandardYoungTableau` is the subclass used for standard tableaux.

## Enumerating partitions and standard tableaux

```python
from snobkit.combinatorial_bank import IntegerPartitions, StandardYoungTableaux

for p in IntegerPartitions(5):
    print(p)

T = StandardYoungTableaux([2, 2, 1])
print(len(T))
for t in T:
    print(t)
```

The partitions of n are built from those of n-1. The tableaux of a shape are
built from the tableaux of its parent shapes. Results are computed once and
kept in a `CombinatorialBank`. By default that is the shared bank returned by
`default_bank()`. Pass `bank=` to `IntegerPartitions` or to `YoungTableaux` /
`StandardYoungTableaux` to use a separate cache. Items handed out are copies,
so changing them does not alter the cache.

## Permutations

```python
from snobkit.permutation import Permutation

sigma = Permutation([2, 3, 1])
tau = Permutation.identity(3)
print(sigma * tau == sigma)   # True
print(sigma.inverse())        # [ 3 1 2 ]
print(~sigma == sigma.inv())  # True
print(sigma(1))               # 2  (positions count from 1)
```

Constructing a permutation from values that are not exactly 1..n raises
`ValueError`. `a * b` is the map i -> a(b(i)). `a *= b` replaces `a` by the
map i -> b(a(i)). `ContiguousCycle(a, b)` is a small record for the cycle on
the range a..b.

## Finite groups and their irreps

```python
from snobkit.cyclic_group import CyclicGroup
from snobkit.dihedral_group import DihedralGroup

C5 = CyclicGroup(5)
for g in C5.elements():
    print(g)                  # Cyclic(5,0), Cyclic(5,1), ...
rho = C5.irrep(2)
print(rho(C5.element(2)))     # 1x1 complex matrix

D5 = DihedralGroup(5)
print(D5.s() * D5.r(2) * D5.s())
print([D5.irrep(k).dim() for k in range(D5.n_irreps())])   # [1, 1, 2, 2]

G = CyclicGroup(3) * CyclicGroup(4)   # a ProductGroup
print(G.identity())                    # (Cyclic(3,0),Cyclic(4,0))
print(G.size())                        # 12
print(G.irrep(3)(5))                   # Kronecker product of the factor irreps
```

The base classes live in `snobkit.group`:

- `Group`, `GroupElement` and `GroupIrrep` are the abstract types.
- Multiplying two groups gives a `ProductGroup`.
- Multiplying two irreps gives a `ProductGroupIrrep`.
- `gpair` pairs two elements into a `ProductGroupElement`.

Irreps return NumPy arrays. Each accepts either an element or an element index.

## Fourier transforms on groups

```python
import numpy as np
from snobkit.cyclic_group import CyclicGroup
from snobkit.fourier import fourier, inverse_fourier

G = CyclicGroup(5)
f = np.random.default_rng(0).normal(size=G.size())

F = fourier(G, f)          # one matrix per irrep: sum_g f(g) rho(g)
print(F)
print(np.allclose(inverse_fourier(F), f))   # True

shifted = inverse_fourier(F.left(G.element(2)))
reflected = inverse_fourier(F.inv())
```

`FourierOnGroup.transform` and `FourierOnGroup.to_function` are the method
forms of `fourier` and `inverse_fourier`. `right(t)` multiplies each
component by rho(t) on the right. Building a `FourierOnGroup` directly checks
that there is one component per irrep, of the right size.

## Indexed maps

`snobkit.indexed_map.IndexedMap` keeps objects in insertion order and by key:

- `at(i)` and iteration go by position.
- `map[key]` and `key in map` go by key.
- `insert(key, obj)` adds an object under a key.
- `append(obj)` files an object under `obj.key()`.
- `copy()` copies every stored object.

## What is not included

The package enumerates partitions and standard tableaux, and it has
permutations. It does not build representations of the symmetric group, its
characters, or a fast Fourier transform on it. Fourier transforms are
available only for the cyclic, dihedral and product groups above, and they
are computed directly from the definition. There is no command-line tool.