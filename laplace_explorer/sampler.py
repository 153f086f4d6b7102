"""Sampling of the catalog evaluators over the fixed plotting grids.

The sampler is a pure function of (definition, parameter values).  It keeps
no state besides the grid axes below, which are built once at import.

Gaps
----
A pole on the jw axis makes |F(jw)| and phi(w) undefined.  Those points are
stored as ``numpy.nan`` in the frequency arrays; matplotlib breaks a line at
NaN instead of interpolating across it.

Surface clamp
-------------
The complex-plane surface is capped at ``config.SURFACE_CEILING`` and poles
are drawn at that same height.  The cap keeps the z-axis scale readable near
poles.  It is a rendering choice: the true magnitude is unbounded there.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

import numpy as np

from laplace_explorer import config
from laplace_explorer.catalog import UNDEFINED, SignalDefinition

__all__ = [
    "SampleGrid",
    "TIME_GRID",
    "FREQUENCY_GRID",
    "SIGMA_GRID",
    "OMEGA_GRID",
    "TimeSeries",
    "FrequencySeries",
    "SurfaceGrid",
    "SampledViews",
    "sample_time",
    "sample_frequency",
    "sample_surface",
    "sample_views",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleGrid:
    """Evenly spaced 1D axis: ``count`` points from ``start`` in steps of ``step``."""

    name: str
    start: float
    step: float
    count: int

    @property
    def stop(self) -> float:
        return round(self.start + (self.count - 1) * self.step, config.GRID_DECIMALS)

    def values(self) -> np.ndarray:
        # rounding lands points exactly on 0.0, 1.0, 1.3, ... ; "+ 0.0" drops -0.0
        axis = np.round(self.start + np.arange(self.count) * self.step, config.GRID_DECIMALS) + 0.0
        axis.flags.writeable = False
        return axis


TIME_GRID = SampleGrid("t", config.TIME_START, config.TIME_STEP, config.TIME_COUNT)
FREQUENCY_GRID = SampleGrid("omega", config.FREQ_START, config.FREQ_STEP, config.FREQ_COUNT)
SIGMA_GRID = SampleGrid("sigma", config.PLANE_START, config.PLANE_STEP, config.PLANE_COUNT)
OMEGA_GRID = SampleGrid("omega", config.PLANE_START, config.PLANE_STEP, config.PLANE_COUNT)

_TIME_AXIS = TIME_GRID.values()
_FREQUENCY_AXIS = FREQUENCY_GRID.values()
_SIGMA_AXIS = SIGMA_GRID.values()
_OMEGA_AXIS = OMEGA_GRID.values()


# Results
@dataclass(frozen=True, eq=False)
class TimeSeries:
    t: np.ndarray
    values: np.ndarray


@dataclass(frozen=True, eq=False)
class FrequencySeries:
    omega: np.ndarray
    magnitude: np.ndarray
    phase: np.ndarray

    @property
    def gaps(self) -> np.ndarray:
        """True where F(jw) is undefined."""
        return np.isnan(self.magnitude)


@dataclass(frozen=True, eq=False)
class SurfaceGrid:
    """|F(sigma + jw)| with rows indexed by omega and columns by sigma."""

    sigma: np.ndarray
    omega: np.ndarray
    magnitude: np.ndarray
    ceiling: float


@dataclass(frozen=True, eq=False)
class SampledViews:
    definition_id: str
    time: TimeSeries
    frequency: FrequencySeries
    surface: SurfaceGrid
    formula_time_tex: str
    formula_laplace_tex: str


def _frozen(values) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    array.flags.writeable = False
    return array


def _gap(value):
    return np.nan if value is UNDEFINED else value


# Sampling
def sample_time(definition: SignalDefinition, params: Mapping[str, float]) -> TimeSeries:
    values = [definition.time_response(float(t), params) for t in _TIME_AXIS]
    return TimeSeries(_TIME_AXIS, _frozen(values))


def sample_frequency(definition: SignalDefinition, params: Mapping[str, float]) -> FrequencySeries:
    magnitude = []
    phase = []
    for w in _FREQUENCY_AXIS:
        w = float(w)
        magnitude.append(_gap(definition.frequency_magnitude(w, params)))
        phase.append(_gap(definition.frequency_phase(w, params)))
    return FrequencySeries(_FREQUENCY_AXIS, _frozen(magnitude), _frozen(phase))


def sample_surface(
    definition: SignalDefinition,
    params: Mapping[str, float],
    ceiling: float = config.SURFACE_CEILING,
) -> SurfaceGrid:
    """Sample |F(sigma + jw)| on the complex-plane grid, capped at *ceiling*."""
    rows = []
    for w in _OMEGA_AXIS:
        row = []
        for sigma in _SIGMA_AXIS:
            value = definition.complex_magnitude(float(sigma), float(w), params)
            if value is UNDEFINED or value > ceiling:
                value = ceiling
            row.append(value)
        rows.append(row)
    return SurfaceGrid(_SIGMA_AXIS, _OMEGA_AXIS, _frozen(rows), ceiling)


def sample_views(definition: SignalDefinition, params: Mapping[str, float]) -> SampledViews:
    """Evaluate all four views for *definition* at the given parameter values."""
    frequency = sample_frequency(definition, params)
    views = SampledViews(
        definition_id=definition.id,
        time=sample_time(definition, params),
        frequency=frequency,
        surface=sample_surface(definition, params),
        formula_time_tex=definition.formula_time_tex,
        formula_laplace_tex=definition.formula_laplace_tex,
    )
    logger.debug(
        "Sampled %s with %s: %d frequency gaps",
        definition.id, dict(params), int(frequency.gaps.sum()),
    )
    return views
