import os

# No display in test runs
os.environ.setdefault("MPLBACKEND", "Agg")
