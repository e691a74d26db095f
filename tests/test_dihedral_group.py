import cmath

import numpy as np
import pytest

from snobkit.dihedral_group import DihedralGroup, DihedralGroupElement, DihedralGroupIrrep


def _coefficient_matrix(group):
    rows = []
    for k in range(group.n_irreps()):
        rho = group.irrep(k)
        d = rho.dim()
        mats = [rho(g) for g in group.elements()]
        for a in range(d):
            for b in range(d):
                rows.append([np.sqrt(d) * m[a, b] for m in mats])
    return np.array(rows)


def test_elements_of_d5():
    group = DihedralGroup(5)
    assert [str(e) for e in group.elements()] == [
        "Dihedral(5,0,1)",
        "Dihedral(5,1,1)",
        "Dihedral(5,2,1)",
        "Dihedral(5,3,1)",
        "Dihedral(5,4,1)",
        "Dihedral(5,0,-1)",
        "Dihedral(5,1,-1)",
        "Dihedral(5,2,-1)",
        "Dihedral(5,3,-1)",
        "Dihedral(5,4,-1)",
    ]


def test_conjugating_rotation_by_reflection():
    group = DihedralGroup(5)
    result = group.s() * group.r(2) * group.s()
    assert str(result) == "Dihedral(5,3,1)"
    assert result == group.r(2).inverse()


def test_group_basics():
    group = DihedralGroup(5)
    assert group.size() == 10
    assert len(group) == 10
    assert str(group) == "DihedralGroup(5)"
    assert group.identity() == DihedralGroupElement(5, 0, 1)


def test_index_roundtrip():
    group = DihedralGroup(6)
    assert [group.index(group.element(i)) for i in range(12)] == list(range(12))
    assert [e.index() for e in group.elements()] == list(range(12))


def test_inverse():
    group = DihedralGroup(5)
    for x in group.elements():
        assert x * x.inverse() == group.identity()
        assert x.inverse() * x == group.identity()


def test_mismatched_orders_raise():
    with pytest.raises(ValueError):
        DihedralGroupElement(3, 1) * DihedralGroupElement(4, 1)


@pytest.mark.parametrize(
    "n, dims",
    [(5, [1, 1, 2, 2]), (6, [1, 1, 1, 1, 2, 2]), (4, [1, 1, 1, 1, 2])],
)
def test_irrep_dimensions(n, dims):
    group = DihedralGroup(n)
    assert group.n_irreps() == len(dims)
    assert [group.irrep(k).dim() for k in range(group.n_irreps())] == dims
    assert sum(d * d for d in dims) == group.size()


def test_irrep_two_of_d5():
    rho = DihedralGroup(5).irrep(2)
    assert str(rho) == "DihedralGroupIrrep(5,2)"
    w = cmath.exp(2j * cmath.pi / 5)
    assert np.allclose(rho(0), np.eye(2))
    assert np.allclose(rho(1), [[w, 0], [0, w.conjugate()]])
    assert np.allclose(rho(5), [[0, 1], [1, 0]])
    assert np.allclose(rho(6), [[0, w], [w.conjugate(), 0]])
    assert [rho(i).shape for i in range(10)] == [(2, 2)] * 10


def test_one_dimensional_irreps_of_d6():
    group = DihedralGroup(6)
    sign = group.irrep(1)
    assert sign(2)[0, 0] == pytest.approx(1)
    assert sign(7)[0, 0] == pytest.approx(-1)
    parity = group.irrep(2)
    assert parity(1)[0, 0] == pytest.approx(-1)
    assert parity(7)[0, 0] == pytest.approx(-1)
    assert parity(8)[0, 0] == pytest.approx(1)
    both = group.irrep(3)
    assert both(1)[0, 0] == pytest.approx(-1)
    assert both(6)[0, 0] == pytest.approx(-1)
    assert both(7)[0, 0] == pytest.approx(1)


def test_irrep_accepts_element():
    group = DihedralGroup(5)
    rho = DihedralGroupIrrep(5, 3)
    for i in range(10):
        assert np.allclose(rho(group.element(i)), rho(i))


@pytest.mark.parametrize("n", [3, 4, 5, 6])
def test_irreps_are_homomorphisms(n):
    group = DihedralGroup(n)
    elements = list(group.elements())
    for k in range(group.n_irreps()):
        rho = group.irrep(k)
        for x in elements:
            for y in elements:
                assert np.allclose(rho(x * y), rho(x) @ rho(y))


@pytest.mark.parametrize("n", [3, 4, 5, 6])
def test_irreps_orthogonal(n):
    group = DihedralGroup(n)
    m = _coefficient_matrix(group)
    size = group.size()
    assert m.shape == (size, size)
    assert np.allclose(m @ m.conj().T / size, np.eye(size))