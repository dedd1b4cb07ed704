import pytest

from edakit.treasure import Chest, best_treasure, run

CHESTS = [Chest(1, 5), Chest(2, 6), Chest(3, 10), Chest(4, 7), Chest(1, 2)]


def test_no_chests():
    assert best_treasure([], 50) == (0, [])


def test_no_air_no_gold():
    assert best_treasure(CHESTS, 0) == (0, [])


def test_chosen_chests_fit_and_sum_to_value():
    for air in range(0, 40):
        value, chosen = best_treasure(CHESTS, air)
        assert sum(chest.cost for chest in chosen) <= air
        assert sum(chest.gold for chest in chosen) == value


def test_value_grows_with_air():
    values = [best_treasure(CHESTS, air)[0] for air in range(0, 40)]
    assert values == sorted(values)


def test_at_least_best_single_chest():
    for air in range(0, 40):
        affordable = [c.gold for c in CHESTS if c.cost <= air]
        assert best_treasure(CHESTS, air)[0] >= max(affordable, default=0)


def test_everything_fits():
    total_cost = sum(c.cost for c in CHESTS)
    value, chosen = best_treasure(CHESTS, total_cost)
    assert chosen == CHESTS
    assert value == sum(c.gold for c in CHESTS)


def test_negative_air_rejected():
    with pytest.raises(ValueError):
        best_treasure(CHESTS, -1)


def test_run_format():
    assert run("10 3\n1 5\n2 6\n3 10\n") == "11\n2\n1 5\n2 6\n---\n"