import pytest

from evmkit.precompiles.cost import calc_linear_cost


def test_empty_input_costs_base():
    assert calc_linear_cost(0, 15, 3) == 15


@pytest.mark.parametrize("base,word", [(15, 3), (60, 12), (600, 120)])
def test_partial_word_costs_full_word(base, word):
    assert calc_linear_cost(1, base, word) == calc_linear_cost(32, base, word)
    assert calc_linear_cost(1, base, word) == base + word


@pytest.mark.parametrize("base,word", [(15, 3), (60, 12), (600, 120)])
def test_each_new_word_adds_word_cost(base, word):
    assert calc_linear_cost(33, base, word) - calc_linear_cost(32, base, word) == word
    assert calc_linear_cost(64, base, word) == calc_linear_cost(33, base, word)


def test_cost_is_monotonic():
    costs = [calc_linear_cost(n, 60, 12) for n in range(200)]
    assert costs == sorted(costs)