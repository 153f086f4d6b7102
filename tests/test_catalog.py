"""Tests for the signal catalog (laplace_explorer.catalog).

Covers:
1. Catalog structure: ids, ordering, parameter specs, lookup
2. Undefined marker: singleton, falsy, pickling
3. Evaluators: known values, causality, poles on the jω axis, phase
4. Consistency: σ = 0 slice of the surface equals the jω-axis magnitude
"""

import math
import pickle

import numpy as np
import pytest

from laplace_explorer.catalog import (
    CATALOG,
    MODELS,
    UNDEFINED,
    ParameterSpec,
    SignalDefinition,
    SignalKind,
    catalog_ids,
    get_definition,
    is_undefined,
)
from laplace_explorer.sampler import FREQUENCY_GRID, TIME_GRID


def _parameter_sets(definition):
    """Defaults plus the slider extremes of every parameter."""
    sets = [definition.defaults()]
    if definition.parameters:
        sets.append({p.name: p.minimum for p in definition.parameters})
        sets.append({p.name: p.maximum for p in definition.parameters})
    return sets


ALL_CASES = [
    pytest.param(definition, params, id=f"{definition.id}-{i}")
    for definition in CATALOG
    for i, params in enumerate(_parameter_sets(definition))
]


# ═══════════════════════════════════════════════════════════════════
# 1. Catalog structure
# ═══════════════════════════════════════════════════════════════════

class TestCatalogStructure:

    def test_ids_in_display_order(self):
        assert catalog_ids() == [
            "unit_step", "exponential", "sine", "cosine", "damped_sine",
            "sinh", "cosh", "exponential_pole",
        ]

    def test_ids_unique(self):
        ids = catalog_ids()
        assert len(ids) == len(set(ids))

    def test_every_kind_has_a_model(self):
        assert set(MODELS) == set(SignalKind)
        for kind, model in MODELS.items():
            assert model.kind is kind

    def test_every_kind_used_once(self):
        assert sorted(d.kind.value for d in CATALOG) == sorted(k.value for k in SignalKind)

    def test_get_definition(self):
        assert get_definition("sine").kind is SignalKind.SINE

    def test_get_definition_unknown_raises(self):
        with pytest.raises(KeyError, match="Valid ids"):
            get_definition("sawtooth")

    def test_unit_step_has_no_parameters(self):
        assert get_definition("unit_step").parameter_spec == {}

    def test_damped_sine_parameters(self):
        spec = get_definition("damped_sine").parameter_spec
        assert list(spec) == ["a", "w0"]
        assert spec["a"].default == 0.5
        assert spec["w0"].default == 3.0

    def test_slider_bounds(self):
        spec = get_definition("sine").parameter_spec["w0"]
        assert (spec.minimum, spec.maximum, spec.step) == (0.5, 10.0, 0.1)
        spec = get_definition("exponential").parameter_spec["a"]
        assert (spec.minimum, spec.maximum, spec.step) == (0.1, 5.0, 0.1)

    def test_at_most_two_parameters(self):
        assert all(len(d.parameters) <= 2 for d in CATALOG)

    def test_formulas_are_strings(self):
        for definition in CATALOG:
            assert definition.formula_time_tex.startswith("f(t)")
            assert definition.formula_laplace_tex.startswith("F(s)")

    def test_definition_is_frozen(self):
        definition = get_definition("sine")
        with pytest.raises(AttributeError):
            definition.display_name = "Cosine"

    def test_parameter_spec_view_is_read_only(self):
        spec = get_definition("sine").parameter_spec
        with pytest.raises(TypeError):
            spec["w0"] = None

    def test_duplicate_parameter_names_rejected(self):
        p = ParameterSpec("a", 1.0, 0.0, 2.0, 0.1, "a")
        with pytest.raises(ValueError, match="Duplicate"):
            SignalDefinition("x", SignalKind.EXPONENTIAL, "x", "", "", (p, p))


class TestParameterSpec:

    def test_clamp(self):
        spec = ParameterSpec("a", 1.0, 0.1, 5.0, 0.1, "a")
        assert spec.clamp(-3) == 0.1
        assert spec.clamp(7.5) == 5.0
        assert spec.clamp(2.5) == 2.5

    def test_default_outside_range_rejected(self):
        with pytest.raises(ValueError, match="outside"):
            ParameterSpec("a", 9.0, 0.1, 5.0, 0.1, "a")

    def test_non_positive_step_rejected(self):
        with pytest.raises(ValueError, match="step"):
            ParameterSpec("a", 1.0, 0.1, 5.0, 0.0, "a")


# ═══════════════════════════════════════════════════════════════════
# 2. Undefined marker
# ═══════════════════════════════════════════════════════════════════

class TestUndefinedMarker:

    def test_is_falsy(self):
        assert not UNDEFINED

    def test_repr(self):
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_is_not_a_number(self):
        assert not isinstance(UNDEFINED, (int, float))

    def test_singleton_survives_pickle(self):
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

    def test_is_undefined(self):
        assert is_undefined(UNDEFINED)
        assert not is_undefined(0.0)
        assert not is_undefined(None)


# ═══════════════════════════════════════════════════════════════════
# 3. Evaluators
# ═══════════════════════════════════════════════════════════════════

class TestKnownValues:

    def test_unit_step(self):
        step = get_definition("unit_step")
        assert step.frequency_magnitude(0, {}) is UNDEFINED
        assert step.frequency_magnitude(2, {}) == pytest.approx(0.5)
        assert step.time_response(0, {}) == 1.0
        assert step.time_response(7.3, {}) == 1.0

    def test_exponential(self):
        exp = get_definition("exponential")
        params = {"a": 1.0}
        assert exp.time_response(0, params) == pytest.approx(1.0)
        assert exp.time_response(1, params) == pytest.approx(math.exp(-1))
        assert exp.time_response(1, params) == pytest.approx(0.3679, abs=1e-4)
        assert exp.frequency_magnitude(1, params) == pytest.approx(1 / math.sqrt(2))

    def test_sine_resonance(self):
        sine = get_definition("sine")
        params = {"w0": 1.0}
        assert sine.frequency_magnitude(1, params) is UNDEFINED
        assert sine.frequency_magnitude(-1, params) is UNDEFINED
        assert sine.frequency_phase(1, params) is UNDEFINED
        assert sine.frequency_magnitude(0, params) == pytest.approx(1.0)

    def test_cosine(self):
        cosine = get_definition("cosine")
        params = {"w0": 2.0}
        assert cosine.frequency_magnitude(0, params) == 0.0
        assert cosine.frequency_magnitude(2, params) is UNDEFINED
        assert cosine.frequency_magnitude(1, params) == pytest.approx(1 / 3)
        assert cosine.time_response(0, params) == pytest.approx(1.0)

    def test_damped_sine(self):
        damped = get_definition("damped_sine")
        params = {"a": 0.5, "w0": 3.0}
        t = 0.7
        assert damped.time_response(t, params) == pytest.approx(math.exp(-0.35) * math.sin(2.1))
        # |3 / ((0.5)^2 + 9)| at w = 0
        assert damped.frequency_magnitude(0, params) == pytest.approx(3 / 9.25)

    def test_hyperbolic(self):
        params = {"a": 1.0}
        sinh = get_definition("sinh")
        cosh = get_definition("cosh")
        assert sinh.time_response(2, params) == pytest.approx(math.sinh(2))
        assert cosh.time_response(2, params) == pytest.approx(math.cosh(2))
        assert sinh.frequency_magnitude(1, params) == pytest.approx(0.5)
        assert cosh.frequency_magnitude(1, params) == pytest.approx(0.5)
        # real-axis poles at ±a
        assert sinh.complex_magnitude(1, 0, params) is UNDEFINED
        assert cosh.complex_magnitude(-1, 0, params) is UNDEFINED

    def test_exponential_pole_convention(self):
        shifted = get_definition("exponential_pole")
        assert shifted.time_response(1, {"sigma0": -1.0}) == pytest.approx(math.exp(-1))
        assert shifted.time_response(1, {"sigma0": 0.5}) == pytest.approx(math.exp(0.5))
        assert shifted.frequency_magnitude(0, {"sigma0": 0.0}) is UNDEFINED
        assert shifted.complex_magnitude(-1, 0, {"sigma0": -1.0}) is UNDEFINED
        # same pole as exponential with a = 1, but a different parameter
        exp = get_definition("exponential")
        assert shifted.frequency_magnitude(0.7, {"sigma0": -1.0}) == pytest.approx(
            exp.frequency_magnitude(0.7, {"a": 1.0}))


class TestPhase:

    def test_unit_step_quarter_turns(self):
        step = get_definition("unit_step")
        assert step.frequency_phase(2, {}) == pytest.approx(-math.pi / 2)
        assert step.frequency_phase(-2, {}) == pytest.approx(math.pi / 2)
        assert step.frequency_phase(0, {}) is UNDEFINED

    def test_exponential(self):
        exp = get_definition("exponential")
        assert exp.frequency_phase(1, {"a": 1.0}) == pytest.approx(-math.pi / 4)
        assert exp.frequency_phase(0, {"a": 1.0}) == 0.0

    def test_sine_flips_sign_past_resonance(self):
        sine = get_definition("sine")
        assert sine.frequency_phase(0.5, {"w0": 1.0}) == 0.0
        assert sine.frequency_phase(2.0, {"w0": 1.0}) == pytest.approx(math.pi)
        assert sine.frequency_phase(-2.0, {"w0": 1.0}) == pytest.approx(math.pi)

    def test_cosine_is_purely_imaginary(self):
        cosine = get_definition("cosine")
        assert cosine.frequency_phase(0.5, {"w0": 1.0}) == pytest.approx(math.pi / 2)
        assert cosine.frequency_phase(-0.5, {"w0": 1.0}) == pytest.approx(-math.pi / 2)

    def test_damped_sine_matches_atan2(self):
        damped = get_definition("damped_sine")
        a, w0, w = 0.5, 3.0, 2.0
        value = w0 / complex(a * a + w0 * w0 - w * w, 2 * a * w)
        assert damped.frequency_phase(w, {"a": a, "w0": w0}) == pytest.approx(
            math.atan2(value.imag, value.real))

    @pytest.mark.parametrize("definition,params", ALL_CASES)
    def test_phase_in_range(self, definition, params):
        for w in FREQUENCY_GRID.values():
            phase = definition.frequency_phase(float(w), params)
            if phase is not UNDEFINED:
                assert -math.pi <= phase <= math.pi


@pytest.mark.parametrize("definition,params", ALL_CASES)
def test_causality(definition, params):
    for t in TIME_GRID.values():
        if t < 0:
            assert definition.time_response(float(t), params) == 0.0


@pytest.mark.parametrize("definition,params", ALL_CASES)
def test_magnitude_and_phase_share_gaps(definition, params):
    for w in FREQUENCY_GRID.values():
        magnitude = definition.frequency_magnitude(float(w), params)
        phase = definition.frequency_phase(float(w), params)
        assert (magnitude is UNDEFINED) == (phase is UNDEFINED)
        if magnitude is not UNDEFINED:
            assert magnitude >= 0.0
            assert math.isfinite(magnitude)


class TestDampedSinePoles:
    """Pole locations on the jω axis depend on ω₀ only."""

    @pytest.mark.parametrize("a", [0.1, 0.5, 1.0, 2.5, 5.0])
    def test_decay_rate_does_not_move_gaps(self, a):
        damped = get_definition("damped_sine")
        gaps = [
            w for w in FREQUENCY_GRID.values()
            if damped.frequency_magnitude(float(w), {"a": a, "w0": 3.0}) is UNDEFINED
        ]
        assert gaps == []

    def test_peak_tracks_w0_not_a(self):
        damped = get_definition("damped_sine")
        omega = FREQUENCY_GRID.values()
        peaks = []
        for a in (0.1, 0.2, 0.3):
            mags = [damped.frequency_magnitude(float(w), {"a": a, "w0": 4.0}) for w in omega]
            peaks.append(abs(omega[int(np.argmax(mags))]))
        assert all(p == pytest.approx(4.0, abs=0.1) for p in peaks)

    def test_decay_rate_enters_time_domain(self):
        damped = get_definition("damped_sine")
        slow = damped.time_response(1.0, {"a": 0.1, "w0": 3.0})
        fast = damped.time_response(1.0, {"a": 2.0, "w0": 3.0})
        assert abs(fast) < abs(slow)


# ═══════════════════════════════════════════════════════════════════
# 4. Consistency between the 2D and 3D views
# ═══════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("definition,params", ALL_CASES)
def test_sigma_zero_slice_matches_frequency_magnitude(definition, params):
    for w in FREQUENCY_GRID.values():
        w = float(w)
        on_axis = definition.frequency_magnitude(w, params)
        surface = definition.complex_magnitude(0.0, w, params)
        if on_axis is UNDEFINED:
            assert surface is UNDEFINED
        else:
            assert surface == on_axis


@pytest.mark.parametrize("definition,params", ALL_CASES)
def test_poles_are_undefined_on_surface(definition, params):
    for pole in definition.poles(params):
        assert definition.complex_magnitude(pole.real, pole.imag, params) is UNDEFINED
