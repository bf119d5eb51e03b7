# config.py
"""Configuration constants for the polynomial histogram selectivity estimator."""
import logging
import os

# Polynomial Fit Settings
POLY_ORDER = 5                  # Order of the density curve fit to every histogram
MAX_POLY_ORDER = 100            # Upper bound accepted by the least-squares fitter

# Integration Settings
TRAPEZOID_PANELS = 100          # Panels used by the composite trapezoidal rule

# Fallback Selectivities (same values as the constant operator estimates)
DEFAULT_AREA_SEL = 0.005        # Overlap (&&) restriction and join
DEFAULT_POSITION_SEL = 0.1      # Strictly left of / right of
DEFAULT_CONTAINMENT_SEL = 0.001 # Contains / contained by

# Statistics Builder Settings
DEFAULT_NUM_BINS = 10           # Equi-width bins per range histogram

# Persistence and Logging
STATS_FILE_DIR = "./data/"
STATS_FILENAME = "polyhist_stats.pkl"
STATS_FILE = os.path.join(STATS_FILE_DIR, STATS_FILENAME)

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
