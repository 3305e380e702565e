# simulations/methods.py

from __future__ import annotations

import random
from typing import Callable, Dict

from monty_hall.doors import Strategy, play_trial, strategy_for_trial

from .common import BatchSpec, BatchResult, Timer


SimFn = Callable[[BatchSpec, random.Random], BatchResult]


def simulate_interleaved(spec: BatchSpec, rng: random.Random) -> BatchResult:
    """
    One loop over all trials; the strategy alternates by trial index.

    Even indices switch and odd indices stay, which gives switch the extra
    trial when the total is odd.
    """
    wins = {Strategy.SWITCH: 0, Strategy.STAY: 0}

    with Timer() as t:
        for i in range(spec.trials):
            outcome = play_trial(rng, strategy_for_trial(i))
            if outcome.won:
                wins[outcome.strategy] += 1

    return BatchResult(
        method="interleaved",
        spec=spec,
        switch_wins=wins[Strategy.SWITCH],
        stay_wins=wins[Strategy.STAY],
        runtime_s=t.elapsed_s,
        meta={},
    )


def simulate_two_pass(spec: BatchSpec, rng: random.Random) -> BatchResult:
    """
    Two explicit loops: every switch trial first, then every stay trial.

    Both passes draw from the same generator, so the stay pass continues
    the sequence where the switch pass left off.
    """
    switch_wins = 0
    stay_wins = 0

    with Timer() as t:
        for _ in range(spec.switch_trials):
            if play_trial(rng, Strategy.SWITCH).won:
                switch_wins += 1
        for _ in range(spec.stay_trials):
            if play_trial(rng, Strategy.STAY).won:
                stay_wins += 1

    return BatchResult(
        method="two_pass",
        spec=spec,
        switch_wins=switch_wins,
        stay_wins=stay_wins,
        runtime_s=t.elapsed_s,
        meta={"order": ["switch", "stay"]},
    )


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> SimFn:
    key = name.strip().lower()
    try:
        return METHODS[key]
    except KeyError:
        raise ValueError(
            f"no batch method called '{key}'; choose one of {', '.join(sorted(METHODS))}"
        ) from None


# Names accepted by --method.
METHODS: Dict[str, SimFn] = {
    "interleaved": simulate_interleaved,
    "two_pass": simulate_two_pass,
}
