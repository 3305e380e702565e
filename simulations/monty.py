# simulations/monty.py

from __future__ import annotations

import argparse
import logging
import re
import sys
import time
from typing import List

import matplotlib.pyplot as plt

from .common import MIN_TRIALS, BatchResult, format_results
from .methods import METHODS
from .run import run_batches

logger = logging.getLogger(__name__)


DEFAULT_METHOD = "interleaved"
# Below this, win rates swing too much between runs to be worth reading
NOISY_TRIALS = 200
MAX_TRIALS = 2**31 - 1

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_NO_MEMORY = 2

# C-locale whitespace only, as isspace() sees it
_C_SPACE = " \t\n\v\f\r"
_NUMERIC_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")
_MAX_DIGITS = len(str(MAX_TRIALS))


class TrialCountError(ValueError):
    """A trial count argument that cannot be used."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def parse_trial_count(arg: str) -> int:
    """
    Parse one trial count the way stoi does: leading whitespace, an optional
    sign, then digits. Trailing junk is tolerated with a warning.
    """
    m = _NUMERIC_PREFIX.match(arg)
    if m is None:
        raise TrialCountError(f"trial count must be a number, got '{arg}'")

    sign, digits = m.groups()
    # Reject by length first; int() refuses very long digit strings
    if len(digits.lstrip("0")) > _MAX_DIGITS:
        raise TrialCountError(f"trial count out of range: '{arg}'")

    value = int(sign + digits)
    if value > MAX_TRIALS or value < -MAX_TRIALS - 1:
        raise TrialCountError(f"trial count out of range: '{arg}'")

    if m.end() != len(arg.rstrip(_C_SPACE)):
        logger.warning("ignoring trailing characters in '%s', using %d", arg, value)

    if value < MIN_TRIALS:
        raise TrialCountError(
            f"need to simulate at least {MIN_TRIALS} trials, got '{arg}'"
        )
    if value < NOISY_TRIALS:
        logger.warning(
            "%d trials is a small sample; results will not be consistent", value
        )
    return value


def plot_results(results: List[BatchResult]) -> None:
    labels = [str(r.spec.trials) for r in results]
    xs = list(range(len(results)))

    plt.figure(figsize=(8, 4))
    plt.bar([x - 0.2 for x in xs], [r.switch_rate for r in results], width=0.4, label="switch")
    plt.bar([x + 0.2 for x in xs], [r.stay_rate for r in results], width=0.4, label="stay")
    plt.axhline(2 / 3, color="gray", linestyle="--", linewidth=1)
    plt.axhline(1 / 3, color="gray", linestyle=":", linewidth=1)

    plt.xticks(xs, labels)
    plt.xlabel("Trials")
    plt.ylabel("Win rate")
    plt.ylim(0, 1)
    plt.title(f"Monty Hall: switch vs stay ({results[0].method})")
    plt.legend()
    plt.tight_layout()
    plt.show()


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="monty-hall-sim",
        description="Estimate Monty Hall win rates for the switch and stay strategies.",
    )
    parser.add_argument(
        "trials", nargs="+", metavar="TRIALS",
        help="total trials per batch, split between switch and stay (>= 2)",
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: current time)")
    parser.add_argument(
        "--method", default=DEFAULT_METHOD, choices=sorted(METHODS.keys()),
        help="how trials are assigned to strategies",
    )
    parser.add_argument("--plot", action="store_true", help="show a bar chart of the win rates")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser


def main(argv: list[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )

    # Validate every argument before running anything
    trial_counts = []
    bad = 0
    for arg in args.trials:
        try:
            trial_counts.append(parse_trial_count(arg))
        except TrialCountError as e:
            logger.error("%s", e)
            bad += 1
    if bad:
        return EXIT_USAGE

    seed = args.seed if args.seed is not None else time.time_ns()
    logger.debug("seed=%d method=%s", seed, args.method)

    try:
        results = run_batches(trial_counts, seed=seed, method=args.method)
    except MemoryError:
        logger.error("out of memory while running %d batch(es)", len(trial_counts))
        return EXIT_NO_MEMORY

    for line in format_results(results):
        print(line)

    if args.plot:
        plot_results(results)

    return EXIT_OK


def entry_point() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    entry_point()
