import pytest

from snobkit.permutation import ContiguousCycle, Permutation


def test_identity_str():
    assert str(Permutation.identity(3)) == "[ 1 2 3 ]"


def test_identity_fixes_everything():
    e = Permutation.identity(5)
    assert all(e(i) == i for i in range(1, 6))
    assert e.n == 5
    assert len(e) == 5


def test_invalid_values_raise():
    with pytest.raises(ValueError):
        Permutation([1, 1, 2])
    with pytest.raises(ValueError):
        Permutation([0, 1, 2])
    with pytest.raises(ValueError):
        Permutation([1, 2, 4])


def test_call_and_getitem_are_one_based():
    p = Permutation([2, 3, 1])
    assert p(1) == 2
    assert p[3] == 1
    with pytest.raises(IndexError):
        p(0)
    with pytest.raises(IndexError):
        p[4]


def test_composition_matches_pointwise():
    p = Permutation([2, 3, 1, 4])
    q = Permutation([1, 2, 4, 3])
    pq = p * q
    assert all(pq(i) == p(q(i)) for i in range(1, 5))


def test_inverse_gives_identity():
    p = Permutation([3, 1, 4, 2])
    e = Permutation.identity(4)
    assert p * p.inverse() == e
    assert p.inv() * p == e
    assert ~p == p.inverse()


def test_inverse_is_involution():
    p = Permutation([4, 3, 1, 2])
    assert p.inverse().inverse() == p


def test_imul_composes_other_after_self():
    p = Permutation([2, 3, 1])
    q = Permutation([1, 3, 2])
    expected = q * p
    p *= q
    assert p == expected


def test_mismatched_sizes_raise():
    with pytest.raises(ValueError):
        Permutation([1, 2]) * Permutation([1, 2, 3])


def test_set_value_and_check_valid():
    p = Permutation.identity(3)
    p[1] = 2
    assert p(1) == 2
    assert not p.check_valid()
    p.set_value(2, 1)
    assert p.check_valid()
    assert p == Permutation([2, 1, 3])


def test_hash_consistent_with_eq():
    assert hash(Permutation([2, 1, 3])) == hash(Permutation([2, 1, 3]))
    assert len({Permutation([2, 1]), Permutation([2, 1])}) == 1


def test_contiguous_cycle_str():
    assert str(ContiguousCycle(2, 5)) == "CCycle(2,5)"