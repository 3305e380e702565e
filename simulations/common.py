# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time


MIN_TRIALS = 2


@dataclass(frozen=True)
class BatchSpec:
    """
    One requested batch: a total trial count split between the strategies.

    SWITCH gets the ceiling half and STAY the floor half, so an odd total
    gives switch one extra trial.
    """
    trials: int

    def __post_init__(self) -> None:
        if self.trials < MIN_TRIALS:
            raise ValueError(f"trials must be >= {MIN_TRIALS}")

    @property
    def switch_trials(self) -> int:
        return self.trials // 2 + self.trials % 2

    @property
    def stay_trials(self) -> int:
        return self.trials // 2


@dataclass
class BatchResult:
    """
    Common return type for all simulation methods.
    """
    method: str
    spec: BatchSpec
    switch_wins: int
    stay_wins: int

    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: a strategy cannot win more trials than it played
        if not 0 <= self.switch_wins <= self.spec.switch_trials:
            raise ValueError(
                f"switch_wins out of range: {self.switch_wins} "
                f"(played {self.spec.switch_trials})"
            )
        if not 0 <= self.stay_wins <= self.spec.stay_trials:
            raise ValueError(
                f"stay_wins out of range: {self.stay_wins} "
                f"(played {self.spec.stay_trials})"
            )

    @property
    def switch_rate(self) -> float:
        return self.switch_wins / self.spec.switch_trials

    @property
    def stay_rate(self) -> float:
        return self.stay_wins / self.spec.stay_trials


class Timer:
    """Wall-clock time spent in a batch loop, stored on `elapsed_s`."""
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


# --- Reporting ---------------------------------------------------------------

def format_summary(r: BatchResult) -> List[str]:
    """
    Two labeled lines for a single batch.
    """
    return [
        f"Switch: {r.switch_rate:.4f}",
        f"Stay:   {r.stay_rate:.4f}",
    ]


def format_table(results: List[BatchResult]) -> List[str]:
    """
    Aligned comparison table, one row per batch, rates as percentages.
    """
    if not results:
        raise ValueError("results must be non-empty")

    width = max(len("Trials"), max(len(str(r.spec.trials)) for r in results))
    lines = [f"{'Trials':>{width}}  {'Switch':>8}  {'Stay':>8}"]
    for r in results:
        lines.append(
            f"{r.spec.trials:>{width}}  "
            f"{r.switch_rate * 100:>7.2f}%  "
            f"{r.stay_rate * 100:>7.2f}%"
        )
    return lines


def format_results(results: List[BatchResult]) -> List[str]:
    if len(results) == 1:
        return format_summary(results[0])
    return format_table(results)
