import pytest

from edakit.knapsack import Item, knapsack


def _check(items, capacity, value, chosen):
    assert len(chosen) == len(items)
    assert sum(i.weight for i, c in zip(items, chosen) if c) <= capacity
    assert sum(i.value for i, c in zip(items, chosen) if c) == value


def test_classic_example():
    items = [Item(10, 60), Item(20, 100), Item(30, 120)]
    value, chosen = knapsack(items, 50)
    assert value == 220
    assert chosen == [False, True, True]


def test_everything_fits():
    items = [Item(1, 3), Item(2, 4)]
    value, chosen = knapsack(items, 10)
    assert chosen == [True, True]
    _check(items, 10, value, chosen)


def test_nothing_fits():
    items = [Item(5, 3), Item(6, 4)]
    value, chosen = knapsack(items, 4)
    assert value == 0
    assert chosen == [False, False]


def test_empty():
    assert knapsack([], 10) == (0, [])


@pytest.mark.parametrize("capacity", [0, 3, 7, 11, 15])
def test_solution_is_feasible(capacity):
    items = [Item(4, 5), Item(3, 4), Item(5, 7), Item(2, 2), Item(6, 8)]
    value, chosen = knapsack(items, capacity)
    _check(items, capacity, value, chosen)


def test_more_capacity_never_hurts():
    items = [Item(4, 5), Item(3, 4), Item(5, 7), Item(2, 2)]
    values = [knapsack(items, c)[0] for c in range(0, 16)]
    assert values == sorted(values)


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        knapsack([Item(1, 1)], -1)