"""
Monty Hall game rules: door placement, the host's reveal, and one trial.
"""

from .doors import (
    NUM_DOORS,
    Strategy,
    TrialOutcome,
    final_choice,
    play_trial,
    reveal_door,
    strategy_for_trial,
)

__all__ = [
    "NUM_DOORS",
    "Strategy",
    "TrialOutcome",
    "final_choice",
    "play_trial",
    "reveal_door",
    "strategy_for_trial",
]
