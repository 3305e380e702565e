import itertools
import random

import pytest

from monty_hall import (
    Strategy,
    final_choice,
    play_trial,
    reveal_door,
    strategy_for_trial,
)

DOORS = range(3)
ALL_PAIRS = list(itertools.product(DOORS, DOORS))


@pytest.mark.parametrize("prize,choice", ALL_PAIRS)
def test_reveal_is_never_prize_or_pick(prize, choice):
    revealed = reveal_door(prize, choice)
    assert revealed != prize
    assert revealed != choice


def test_reveal_prefers_door_after_prize():
    assert reveal_door(0, 0) == 1
    assert reveal_door(0, 2) == 1
    # door after the prize is the pick, so fall back to the next one
    assert reveal_door(0, 1) == 2
    assert reveal_door(2, 0) == 1


@pytest.mark.parametrize("prize,choice", ALL_PAIRS)
def test_switch_and_stay_cover_remaining_doors(prize, choice):
    revealed = reveal_door(prize, choice)
    switched = final_choice(choice, revealed, Strategy.SWITCH)
    stayed = final_choice(choice, revealed, Strategy.STAY)

    assert stayed == choice
    assert switched != stayed
    assert {switched, stayed, revealed} == {0, 1, 2}


@pytest.mark.parametrize("prize,choice", ALL_PAIRS)
def test_exactly_one_strategy_wins(prize, choice):
    revealed = reveal_door(prize, choice)
    wins = [
        final_choice(choice, revealed, s) == prize
        for s in (Strategy.SWITCH, Strategy.STAY)
    ]
    assert wins.count(True) == 1


def test_door_out_of_range_rejected():
    with pytest.raises(ValueError):
        reveal_door(3, 0)
    with pytest.raises(ValueError):
        reveal_door(0, -1)
    with pytest.raises(ValueError):
        final_choice(0, 0, Strategy.SWITCH)


def test_strategy_alternates_by_parity():
    assert [strategy_for_trial(i) for i in range(4)] == [
        Strategy.SWITCH, Strategy.STAY, Strategy.SWITCH, Strategy.STAY,
    ]


def test_play_trial_invariants_over_many_seeds():
    for seed in range(50):
        rng = random.Random(seed)
        for strategy in Strategy:
            t = play_trial(rng, strategy)
            assert t.revealed not in (t.prize, t.initial_choice)
            assert t.strategy is strategy
            assert t.won == (t.final_choice == t.prize)


def test_play_trial_is_reproducible():
    a = [play_trial(random.Random(7), Strategy.SWITCH) for _ in range(3)]
    b = [play_trial(random.Random(7), Strategy.SWITCH) for _ in range(3)]
    assert a == b
