# config/simulation_settings.py
import os

# Paths per run; fixed so every year is compared over the same population
DEFAULT_NSIMS = 1000

# Nearest-rank cut points for the cone (low, median, high)
PERCENTILES = (0.10, 0.50, 0.90)

# Upper bound on path generation worker processes
MAX_WORKERS = max(1, (os.cpu_count() or 2) - 1)  # leave 1 core free

# Paths drawn and stepped together per seeded block; fixed so a seeded run
# does not depend on the worker count
PATH_CHUNK_SIZE = 250
