# simulations/run.py

from __future__ import annotations

import logging
import random
from typing import List, Sequence

from .common import BatchSpec, BatchResult
from .methods import get_method

logger = logging.getLogger(__name__)


def run_batch(
    trials: int,
    rng: random.Random,
    method: str = "interleaved",
) -> BatchResult:
    """
    Run a single batch and return a BatchResult.

    Parameters
    ----------
    trials:
        Total number of trials, split between switch and stay.
    rng:
        Random source shared by the caller. It is consumed, not reseeded.
    method:
        Name of the method ('interleaved' or 'two_pass').

    Returns
    -------
    BatchResult
    """
    spec = BatchSpec(trials=trials)
    fn = get_method(method)

    result = fn(spec, rng)
    logger.debug(
        "batch trials=%d method=%s switch_wins=%d stay_wins=%d runtime=%.3fs",
        trials, result.method, result.switch_wins, result.stay_wins,
        result.runtime_s or 0.0,
    )
    return result


def run_batches(
    trial_counts: Sequence[int],
    seed: int,
    method: str = "interleaved",
) -> List[BatchResult]:
    """
    Run one independent batch per trial count.

    A single generator is seeded once here and threaded through every batch
    in order; each batch keeps its own tally.
    """
    if not trial_counts:
        raise ValueError("trial_counts must be non-empty")

    rng = random.Random(seed)
    return [run_batch(t, rng, method=method) for t in trial_counts]
