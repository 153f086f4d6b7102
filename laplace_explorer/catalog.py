"""Function catalog: the fixed set of causal signals and their Laplace transforms.

Every entry is a :class:`SignalDefinition` tagged with a :class:`SignalKind`.
The tag selects a :class:`SignalModel` from the ``MODELS`` table, and the
model supplies the rational closed form F(p) = N(p) / D(p) together with
f(t) for t >= 0.  The four public evaluators are derived from that single
closed form:

* ``time_response(t, params)``        f(t), zero for t < 0
* ``frequency_magnitude(w, params)``  |F(jw)|
* ``frequency_phase(w, params)``      atan2(Im F(jw), Re F(jw))
* ``complex_magnitude(s, w, params)`` |F(s + jw)|

At a pole the evaluators return :data:`UNDEFINED` instead of a number.
"""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple, Union

from laplace_explorer import config

__all__ = [
    "UNDEFINED",
    "Evaluation",
    "is_undefined",
    "ParameterSpec",
    "SignalKind",
    "SignalModel",
    "MODELS",
    "SignalDefinition",
    "CATALOG",
    "get_definition",
    "catalog_ids",
]


# Undefined marker
class _Undefined:
    """Result of evaluating a transform at one of its poles."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNDEFINED"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

Evaluation = Union[float, _Undefined]


def is_undefined(value) -> bool:
    return value is UNDEFINED


# Parameters
@dataclass(frozen=True)
class ParameterSpec:
    """Slider description of one scalar parameter."""

    name: str
    default: float
    minimum: float
    maximum: float
    step: float
    label: str

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"Parameter {self.name!r}: step must be positive, got {self.step}")
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError(
                f"Parameter {self.name!r}: default {self.default} outside "
                f"[{self.minimum}, {self.maximum}]"
            )

    def clamp(self, value: float) -> float:
        return min(max(float(value), self.minimum), self.maximum)


def _decay_rate(default=1.0):
    return ParameterSpec("a", default, label="Decay rate (a)", **config.DECAY_BOUNDS)


def _angular_frequency(default=1.0):
    return ParameterSpec("w0", default, label="Angular frequency (ω₀)", **config.FREQUENCY_BOUNDS)


# Models
class SignalKind(enum.Enum):
    UNIT_STEP = "unit_step"
    EXPONENTIAL = "exponential"
    SINE = "sine"
    COSINE = "cosine"
    DAMPED_SINE = "damped_sine"
    SINH = "sinh"
    COSH = "cosh"
    EXPONENTIAL_POLE = "exponential_pole"


class SignalModel:
    """Capability set shared by every catalog variant.

    Subclasses provide ``time_value`` (t >= 0 only), ``numerator`` and
    ``denominator`` of F(p), and ``poles``.  Everything the sampler calls
    is built here on top of those, so the time, frequency and complex-plane
    views always come from the same formula.
    """

    kind: SignalKind

    def time_value(self, t: float, params: Mapping[str, float]) -> float:
        raise NotImplementedError

    def numerator(self, p: complex, params: Mapping[str, float]) -> complex:
        raise NotImplementedError

    def denominator(self, p: complex, params: Mapping[str, float]) -> complex:
        raise NotImplementedError

    def poles(self, params: Mapping[str, float]) -> List[complex]:
        raise NotImplementedError

    def time_response(self, t: float, params: Mapping[str, float]) -> float:
        if t < 0:
            return 0.0
        return float(self.time_value(t, params))

    def transform(self, p: complex, params: Mapping[str, float]) -> Union[complex, _Undefined]:
        """F(p), or UNDEFINED when the denominator vanishes."""
        den = self.denominator(p, params)
        if abs(den) <= config.POLE_TOLERANCE:
            return UNDEFINED
        return self.numerator(p, params) / den

    def frequency_magnitude(self, w: float, params: Mapping[str, float]) -> Evaluation:
        value = self.transform(complex(0.0, w), params)
        if value is UNDEFINED:
            return UNDEFINED
        return abs(value)

    def frequency_phase(self, w: float, params: Mapping[str, float]) -> Evaluation:
        value = self.transform(complex(0.0, w), params)
        if value is UNDEFINED:
            return UNDEFINED
        # -0.0 + 0.0 == +0.0, so a negative real value maps to +pi
        return math.atan2(value.imag + 0.0, value.real)

    def complex_magnitude(self, sigma: float, w: float, params: Mapping[str, float]) -> Evaluation:
        value = self.transform(complex(sigma, w), params)
        if value is UNDEFINED:
            return UNDEFINED
        return abs(value)

    def __repr__(self):
        return f"{type(self).__name__}()"


class UnitStep(SignalModel):
    """u(t) <-> 1/p"""

    kind = SignalKind.UNIT_STEP

    def time_value(self, t, params):
        return 1.0

    def numerator(self, p, params):
        return 1.0

    def denominator(self, p, params):
        return p

    def poles(self, params):
        return [0j]


class Exponential(SignalModel):
    """e^{-at} <-> 1/(p + a)"""

    kind = SignalKind.EXPONENTIAL

    def time_value(self, t, params):
        return math.exp(-params["a"] * t)

    def numerator(self, p, params):
        return 1.0

    def denominator(self, p, params):
        return p + params["a"]

    def poles(self, params):
        return [complex(-params["a"], 0.0)]


class ExponentialPole(SignalModel):
    """e^{σ₀t} <-> 1/(p - σ₀), parametrised by the pole location itself."""

    kind = SignalKind.EXPONENTIAL_POLE

    def time_value(self, t, params):
        return math.exp(params["sigma0"] * t)

    def numerator(self, p, params):
        return 1.0

    def denominator(self, p, params):
        return p - params["sigma0"]

    def poles(self, params):
        return [complex(params["sigma0"], 0.0)]


class Sine(SignalModel):
    """sin(ω₀t) <-> ω₀/(p² + ω₀²)"""

    kind = SignalKind.SINE

    def time_value(self, t, params):
        return math.sin(params["w0"] * t)

    def numerator(self, p, params):
        return params["w0"]

    def denominator(self, p, params):
        w0 = params["w0"]
        return p * p + w0 * w0

    def poles(self, params):
        w0 = params["w0"]
        return [complex(0.0, w0), complex(0.0, -w0)]


class Cosine(SignalModel):
    """cos(ω₀t) <-> p/(p² + ω₀²)"""

    kind = SignalKind.COSINE

    def time_value(self, t, params):
        return math.cos(params["w0"] * t)

    def numerator(self, p, params):
        return p

    def denominator(self, p, params):
        w0 = params["w0"]
        return p * p + w0 * w0

    def poles(self, params):
        w0 = params["w0"]
        return [complex(0.0, w0), complex(0.0, -w0)]


class DampedSine(SignalModel):
    """e^{-at} sin(ω₀t) <-> ω₀/((p + a)² + ω₀²)"""

    kind = SignalKind.DAMPED_SINE

    def time_value(self, t, params):
        return math.exp(-params["a"] * t) * math.sin(params["w0"] * t)

    def numerator(self, p, params):
        return params["w0"]

    def denominator(self, p, params):
        shifted = p + params["a"]
        w0 = params["w0"]
        return shifted * shifted + w0 * w0

    def poles(self, params):
        a, w0 = params["a"], params["w0"]
        return [complex(-a, w0), complex(-a, -w0)]


class HyperbolicSine(SignalModel):
    """sinh(at) <-> a/(p² - a²)"""

    kind = SignalKind.SINH

    def time_value(self, t, params):
        return math.sinh(params["a"] * t)

    def numerator(self, p, params):
        return params["a"]

    def denominator(self, p, params):
        a = params["a"]
        return p * p - a * a

    def poles(self, params):
        a = params["a"]
        return [complex(a, 0.0), complex(-a, 0.0)]


class HyperbolicCosine(SignalModel):
    """cosh(at) <-> p/(p² - a²)"""

    kind = SignalKind.COSH

    def time_value(self, t, params):
        return math.cosh(params["a"] * t)

    def numerator(self, p, params):
        return p

    def denominator(self, p, params):
        a = params["a"]
        return p * p - a * a

    def poles(self, params):
        a = params["a"]
        return [complex(a, 0.0), complex(-a, 0.0)]


MODELS: Mapping[SignalKind, SignalModel] = MappingProxyType({
    model.kind: model
    for model in (
        UnitStep(),
        Exponential(),
        Sine(),
        Cosine(),
        DampedSine(),
        HyperbolicSine(),
        HyperbolicCosine(),
        ExponentialPole(),
    )
})


# Definitions
@dataclass(frozen=True)
class SignalDefinition:
    """Immutable catalog entry.

    The TeX strings are passed through to the renderer untouched.
    """

    id: str
    kind: SignalKind
    display_name: str
    formula_time_tex: str
    formula_laplace_tex: str
    parameters: Tuple[ParameterSpec, ...] = ()

    def __post_init__(self):
        names = [spec.name for spec in self.parameters]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate parameter names in {self.id!r}: {names}")

    @property
    def parameter_spec(self) -> Mapping[str, ParameterSpec]:
        return MappingProxyType({spec.name: spec for spec in self.parameters})

    @property
    def model(self) -> SignalModel:
        return MODELS[self.kind]

    def defaults(self) -> Dict[str, float]:
        return {spec.name: spec.default for spec in self.parameters}

    def time_response(self, t: float, params: Mapping[str, float]) -> float:
        return self.model.time_response(t, params)

    def frequency_magnitude(self, w: float, params: Mapping[str, float]) -> Evaluation:
        return self.model.frequency_magnitude(w, params)

    def frequency_phase(self, w: float, params: Mapping[str, float]) -> Evaluation:
        return self.model.frequency_phase(w, params)

    def complex_magnitude(self, sigma: float, w: float, params: Mapping[str, float]) -> Evaluation:
        return self.model.complex_magnitude(sigma, w, params)

    def poles(self, params: Mapping[str, float]) -> List[complex]:
        return self.model.poles(params)


CATALOG: Tuple[SignalDefinition, ...] = (
    SignalDefinition(
        id="unit_step",
        kind=SignalKind.UNIT_STEP,
        display_name="Unit step",
        formula_time_tex=r"f(t) = u(t) = \begin{cases} 1, & t \ge 0 \\ 0, & t < 0 \end{cases}",
        formula_laplace_tex=r"F(s) = \frac{1}{s}",
    ),
    SignalDefinition(
        id="exponential",
        kind=SignalKind.EXPONENTIAL,
        display_name="Decaying exponential",
        formula_time_tex=r"f(t) = e^{-at}, \quad a > 0",
        formula_laplace_tex=r"F(s) = \frac{1}{s+a}",
        parameters=(_decay_rate(1.0),),
    ),
    SignalDefinition(
        id="sine",
        kind=SignalKind.SINE,
        display_name="Sine",
        formula_time_tex=r"f(t) = \sin(\omega_0 t)",
        formula_laplace_tex=r"F(s) = \frac{\omega_0}{s^2 + \omega_0^2}",
        parameters=(_angular_frequency(1.0),),
    ),
    SignalDefinition(
        id="cosine",
        kind=SignalKind.COSINE,
        display_name="Cosine",
        formula_time_tex=r"f(t) = \cos(\omega_0 t)",
        formula_laplace_tex=r"F(s) = \frac{s}{s^2 + \omega_0^2}",
        parameters=(_angular_frequency(1.0),),
    ),
    SignalDefinition(
        id="damped_sine",
        kind=SignalKind.DAMPED_SINE,
        display_name="Damped sine",
        formula_time_tex=r"f(t) = e^{-at} \sin(\omega_0 t)",
        formula_laplace_tex=r"F(s) = \frac{\omega_0}{(s+a)^2 + \omega_0^2}",
        parameters=(_decay_rate(0.5), _angular_frequency(3.0)),
    ),
    SignalDefinition(
        id="sinh",
        kind=SignalKind.SINH,
        display_name="Hyperbolic sine",
        formula_time_tex=r"f(t) = \sinh(at)",
        formula_laplace_tex=r"F(s) = \frac{a}{s^2 - a^2}",
        parameters=(_decay_rate(1.0),),
    ),
    SignalDefinition(
        id="cosh",
        kind=SignalKind.COSH,
        display_name="Hyperbolic cosine",
        formula_time_tex=r"f(t) = \cosh(at)",
        formula_laplace_tex=r"F(s) = \frac{s}{s^2 - a^2}",
        parameters=(_decay_rate(1.0),),
    ),
    SignalDefinition(
        id="exponential_pole",
        kind=SignalKind.EXPONENTIAL_POLE,
        display_name="Exponential (pole at σ₀)",
        formula_time_tex=r"f(t) = e^{\sigma_0 t}",
        formula_laplace_tex=r"F(s) = \frac{1}{s-\sigma_0}",
        parameters=(ParameterSpec("sigma0", -1.0, label="Pole location (σ₀)", **config.POLE_BOUNDS),),
    ),
)

_BY_ID = {definition.id: definition for definition in CATALOG}


def catalog_ids() -> List[str]:
    return [definition.id for definition in CATALOG]


def get_definition(definition_id: str) -> SignalDefinition:
    """Look up a catalog entry by its stable id."""
    try:
        return _BY_ID[definition_id]
    except KeyError:
        raise KeyError(
            f"Unknown signal {definition_id!r}. Valid ids: {catalog_ids()}"
        ) from None
