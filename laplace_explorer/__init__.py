"""Laplace Explorer: sampled time, frequency and complex-plane views of a small signal catalog."""

from laplace_explorer.catalog import (
    CATALOG,
    MODELS,
    UNDEFINED,
    ParameterSpec,
    SignalDefinition,
    SignalKind,
    SignalModel,
    catalog_ids,
    get_definition,
    is_undefined,
)
from laplace_explorer.existence import convergence_abscissa, fourier_note, region_of_convergence
from laplace_explorer.params import ParameterState
from laplace_explorer.sampler import (
    FREQUENCY_GRID,
    OMEGA_GRID,
    SIGMA_GRID,
    TIME_GRID,
    SampledViews,
    SampleGrid,
    sample_frequency,
    sample_surface,
    sample_time,
    sample_views,
)
from laplace_explorer.scheduler import RedrawCoalescer

__version__ = "0.1.0"

__all__ = [
    "CATALOG",
    "MODELS",
    "UNDEFINED",
    "ParameterSpec",
    "ParameterState",
    "SignalDefinition",
    "SignalKind",
    "SignalModel",
    "catalog_ids",
    "get_definition",
    "is_undefined",
    "convergence_abscissa",
    "fourier_note",
    "region_of_convergence",
    "FREQUENCY_GRID",
    "OMEGA_GRID",
    "SIGMA_GRID",
    "TIME_GRID",
    "SampledViews",
    "SampleGrid",
    "sample_frequency",
    "sample_surface",
    "sample_time",
    "sample_views",
    "RedrawCoalescer",
]
