import random
from dataclasses import dataclass
from enum import Enum


NUM_DOORS = 3


class Strategy(Enum):
    SWITCH = "switch"
    STAY = "stay"


@dataclass(frozen=True)
class TrialOutcome:
    """
    Everything that happened in a single round of the game.

    Doors are numbered 0, 1, 2. Exactly one of them hides the prize.
    """
    prize: int
    initial_choice: int
    revealed: int
    final_choice: int
    strategy: Strategy

    @property
    def won(self) -> bool:
        return self.final_choice == self.prize


def _check_door(name: str, door: int) -> None:
    if door < 0 or door >= NUM_DOORS:
        raise ValueError(f"{name} must be in [0, {NUM_DOORS - 1}], got {door}")


# ------------------------------------------------------------
# Game rules
# ------------------------------------------------------------

def reveal_door(prize: int, initial_choice: int) -> int:
    """
    Pick the losing door the host opens.

    The host always tries the door after the prize first and falls back to
    the one after that when the first candidate is the contestant's pick.
    """
    _check_door("prize", prize)
    _check_door("initial_choice", initial_choice)

    revealed = (prize + 1) % NUM_DOORS
    if revealed == initial_choice:
        revealed = (prize + 2) % NUM_DOORS
    return revealed


def final_choice(initial_choice: int, revealed: int, strategy: Strategy) -> int:
    """
    Door the contestant ends up with.

    SWITCH takes the only door that is neither the pick nor the revealed one.
    Door indices sum to 3, so that door is 3 - pick - revealed.
    """
    _check_door("initial_choice", initial_choice)
    _check_door("revealed", revealed)
    if revealed == initial_choice:
        raise ValueError("revealed door cannot be the contestant's pick")

    if strategy is Strategy.SWITCH:
        return 3 - initial_choice - revealed
    return initial_choice


def strategy_for_trial(index: int) -> Strategy:
    # even -> switch, odd -> stay
    return Strategy.SWITCH if index % 2 == 0 else Strategy.STAY


def play_trial(rng: random.Random, strategy: Strategy) -> TrialOutcome:
    """
    Play one round with the given random source.

    The caller owns the generator; it is never reseeded here.
    """
    prize = rng.randrange(NUM_DOORS)
    choice = rng.randrange(NUM_DOORS)
    revealed = reveal_door(prize, choice)

    return TrialOutcome(
        prize=prize,
        initial_choice=choice,
        revealed=revealed,
        final_choice=final_choice(choice, revealed, strategy),
        strategy=strategy,
    )
