import pytest

from snobkit.integer_partition import IntegerPartition


def test_str_of_431():
    assert str(IntegerPartition([4, 3, 1])) == "[4,3,1]"


def test_height_and_n():
    lam = IntegerPartition([4, 3, 1])
    assert lam.height() == 3
    assert lam.getn() == 8
    assert len(lam) == 3
    assert list(lam) == [4, 3, 1]


def test_getitem_setitem():
    lam = IntegerPartition([4, 3, 1])
    assert lam[1] == 3
    lam[1] = 2
    assert list(lam) == [4, 2, 1]


@pytest.mark.parametrize(
    "parts, expected",
    [([2, 2, 1], 5), ([1], 1), ([3], 1), ([1, 1, 1], 1), ([4, 3, 1], 70)],
)
def test_hooklength(parts, expected):
    assert IntegerPartition(parts).hooklength() == expected


def test_hooklength_sums_to_factorial_for_n4():
    # sum of squared dimensions of irreps of S4 equals 4! = 24
    shapes = [[4], [3, 1], [2, 2], [2, 1, 1], [1, 1, 1, 1]]
    assert sum(IntegerPartition(s).hooklength() ** 2 for s in shapes) == 24


def test_extendable():
    lam = IntegerPartition([3, 3, 1])
    assert lam.extendable(0)
    assert not lam.extendable(1)
    assert lam.extendable(2)
    assert lam.extendable(3)


def test_shortenable():
    lam = IntegerPartition([3, 3, 1])
    assert not lam.shortenable(0)
    assert lam.shortenable(1)
    assert lam.shortenable(2)


def test_add_existing_and_new_row():
    lam = IntegerPartition([3, 1])
    assert lam.add(0) is lam
    assert list(lam) == [4, 1]
    lam.add(2)
    assert list(lam) == [4, 1, 1]
    lam.add(1, 2)
    assert list(lam) == [4, 3, 1]


def test_remove_drops_empty_last_row():
    lam = IntegerPartition([3, 1])
    lam.remove(1)
    assert list(lam) == [3]
    lam.remove(0, 2)
    assert list(lam) == [1]


def test_subpartitions_order():
    subs = [list(p) for p in IntegerPartition([4, 3, 1]).subpartitions()]
    assert subs == [[4, 3], [4, 2, 1], [3, 3, 1]]


def test_subpartitions_have_n_minus_one():
    lam = IntegerPartition([5, 2, 2, 1])
    subs = list(lam.subpartitions())
    assert all(s.getn() == lam.getn() - 1 for s in subs)
    assert list(lam) == [5, 2, 2, 1]


def test_subpartitions_of_empty_raises():
    with pytest.raises(ValueError):
        list(IntegerPartition([]).subpartitions())


def test_equality_ignores_trailing_zeros():
    assert IntegerPartition([3, 1]) == IntegerPartition([3, 1, 0])
    assert hash(IntegerPartition([3, 1])) == hash(IntegerPartition([3, 1, 0]))
    assert IntegerPartition([3, 1]) != IntegerPartition([2, 2])


def test_less_than_is_reverse_lexicographic():
    assert IntegerPartition([4, 1]) < IntegerPartition([3, 2])
    assert not IntegerPartition([3, 2]) < IntegerPartition([4, 1])
    assert not IntegerPartition([3, 2]) < IntegerPartition([3, 2])


def test_less_than_different_n_raises():
    with pytest.raises(ValueError):
        IntegerPartition([3, 1]) < IntegerPartition([3])


def test_copy_is_independent():
    lam = IntegerPartition([2, 1])
    mu = lam.copy()
    mu.add(0)
    assert list(lam) == [2, 1]
    assert list(mu) == [3, 1]


def test_usable_as_dict_key():
    d = {IntegerPartition([2, 1]): "x"}
    assert d[IntegerPartition([2, 1])] == "x"