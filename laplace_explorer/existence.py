"""Region of convergence and Fourier-transform existence, read off the poles.

Every catalog signal is causal, so its ROC is the half plane to the right
of its rightmost pole.  The Fourier transform is F(jw) when that half plane
contains the jw axis.
"""
from __future__ import annotations

from typing import Mapping, Tuple

from laplace_explorer import config
from laplace_explorer.catalog import SignalDefinition

__all__ = ["convergence_abscissa", "region_of_convergence", "fourier_note"]


def convergence_abscissa(definition: SignalDefinition, params: Mapping[str, float]) -> float:
    """Largest real part among the poles of F(s)."""
    return max(pole.real for pole in definition.poles(params)) + 0.0


def _fmt(value):
    return f"{value:g}"


def region_of_convergence(definition: SignalDefinition, params: Mapping[str, float]) -> str:
    return f"Re(s) > {_fmt(convergence_abscissa(definition, params))}"


def fourier_note(definition: SignalDefinition, params: Mapping[str, float]) -> Tuple[bool, str]:
    """Return (exists, explanation) for the Fourier transform of f(t)."""
    abscissa = convergence_abscissa(definition, params)
    roc = region_of_convergence(definition, params)
    if abscissa < -config.POLE_TOLERANCE:
        return True, f"ROC {roc} contains the jω axis ⇒ FT exists and X(ω) = F(jω)."
    if abscissa <= config.POLE_TOLERANCE:
        return True, (
            f"ROC {roc} borders the jω axis: FT exists only in distribution sense "
            "(impulses at the poles on the axis, shown as gaps in |F(jω)|)."
        )
    return False, f"ROC {roc} excludes the jω axis ⇒ ∫|f(t)| dt diverges, FT does NOT exist."
