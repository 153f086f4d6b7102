"""Process-wide constants for Laplace Explorer."""
from __future__ import annotations

import os

# Sampling grids: (start, step, count)
TIME_START = -1.0
TIME_STEP = 0.05
TIME_COUNT = 231

FREQ_START = -10.0
FREQ_STEP = 0.05
FREQ_COUNT = 401

PLANE_START = -5.0
PLANE_STEP = 0.2
PLANE_COUNT = 51

# Grid points are rounded so that 0 and slider-reachable poles are hit exactly
GRID_DECIMALS = 10

# Precision / guard rails
POLE_TOLERANCE = 1e-12
SURFACE_CEILING = 10.0

# Slider bounds shared by the catalog
DECAY_BOUNDS = {"minimum": 0.1, "maximum": 5.0, "step": 0.1}
FREQUENCY_BOUNDS = {"minimum": 0.5, "maximum": 10.0, "step": 0.1}
POLE_BOUNDS = {"minimum": -5.0, "maximum": 2.0, "step": 0.1}

# Plot palette
FIGURE_COLORS = {
    "time": "#2563eb",
    "magnitude": "#dc2626",
    "phase": "#7c3aed",
}
SURFACE_COLORMAP = "viridis"

# Logging
LOG_LEVEL = os.environ.get("LAPLACE_EXPLORER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"
