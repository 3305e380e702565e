# simulations/__init__.py
"""
Monte Carlo simulations for the Monty Hall puzzle.

Run batches via:
    python -m simulations.monty 1000 10000 100000 [--seed ...] [--method ...] [--plot]
"""
