# app.py
import streamlit as st
import numpy as np
import matplotlib.pyplot as plt

from laplace_explorer import CATALOG, ParameterState, fourier_note, get_definition, region_of_convergence, sample_views
from laplace_explorer import config
from laplace_explorer.logging_config import setup_logging

# Page Setup
st.set_page_config(page_title="Laplace Transform Explorer", layout="wide")
st.title("Laplace Transform Explorer")
st.markdown(
    "Pick a causal signal and move the sliders. "
    "This app shows the time-domain waveform f(t), the magnitude and phase of F(jω), "
    "and the magnitude surface |F(σ+jω)| over the complex plane."
)

logger = setup_logging()

# Helpers
def line_figure(x, y, xlabel, ylabel, title, color):
    """Single-trace figure; NaN entries in y are drawn as gaps."""
    fig, ax = plt.subplots(figsize=(7, 3))
    ax.plot(x, y, color=color, linewidth=2)
    ax.set_xlabel(xlabel); ax.set_ylabel(ylabel); ax.grid(True)
    ax.set_title(title)
    fig.tight_layout()
    return fig

def surface_figure(surface):
    sigma_mesh, omega_mesh = np.meshgrid(surface.sigma, surface.omega)
    fig = plt.figure(figsize=(7, 6))
    ax = fig.add_subplot(projection="3d")
    ax.plot_surface(sigma_mesh, omega_mesh, surface.magnitude, cmap=config.SURFACE_COLORMAP,
                    rstride=1, cstride=1, linewidth=0, antialiased=True)
    ax.contour(sigma_mesh, omega_mesh, surface.magnitude, zdir="z", offset=0, cmap=config.SURFACE_COLORMAP)
    ax.set_xlabel("Real (σ)"); ax.set_ylabel("Imag (jω)"); ax.set_zlabel("|F(s)|")
    ax.set_zlim(0, surface.ceiling)
    ax.set_title("Magnitude |F(σ + jω)|")
    ax.view_init(elev=30, azim=45)
    return fig

def parameter_state_for(definition):
    """Session ParameterState, reset whenever the selected signal changes."""
    state = st.session_state.get("params")
    if state is None or state.definition.id != definition.id:
        state = ParameterState.for_definition(definition)
        st.session_state["params"] = state
        logger.info("Active signal: %s", definition.id)
    return state


# Sidebar: signal selection
names = {definition.display_name: definition.id for definition in CATALOG}
st.sidebar.header("Select signal")
signal_choice = st.sidebar.selectbox("Signal", list(names.keys()))
definition = get_definition(names[signal_choice])
params = parameter_state_for(definition)

if definition.parameters:
    st.sidebar.markdown("---")
    st.sidebar.subheader("Parameters")
    for spec in definition.parameters:
        value = st.sidebar.slider(
            spec.label,
            min_value=float(spec.minimum),
            max_value=float(spec.maximum),
            value=float(params[spec.name]),
            step=float(spec.step),
            key=f"{definition.id}.{spec.name}",
        )
        # slider floats drift (1.2000000000000002); snap to the slider's decimals
        params.set(spec.name, round(value, 6))

views = sample_views(definition, params)

# Formulas
st.header(signal_choice)
col1, col2 = st.columns(2)
with col1:
    st.write("*Time domain*")
    st.latex(views.formula_time_tex)
with col2:
    st.write("*Laplace domain*")
    st.latex(views.formula_laplace_tex)

# Existence checks
st.subheader("Results summary")
col1, col2 = st.columns(2)
with col1:
    st.write("*Laplace Transform*")
    st.success("Exists")
    st.write(f"Valid ROC: {region_of_convergence(definition, params)}")
with col2:
    st.write("*Fourier Transform*")
    fourier_exists, note = fourier_note(definition, params)
    if fourier_exists:
        st.success("Exists")
    else:
        st.error("Does NOT exist")
    st.write(note)

# Time-domain plot
col1, col2 = st.columns(2)
with col1:
    st.pyplot(line_figure(views.time.t, views.time.values, "t", "f(t)",
                          "Time-domain signal f(t)", config.FIGURE_COLORS["time"]))

# Frequency-domain plots
with col2:
    freq = views.frequency
    st.pyplot(line_figure(freq.omega, freq.magnitude, "Frequency (ω)", "|F(jω)|",
                          "Magnitude |F(jω)|", config.FIGURE_COLORS["magnitude"]))
    st.pyplot(line_figure(freq.omega, freq.phase, "Frequency (ω)", "φ(ω) [rad]",
                          "Phase φ(ω)", config.FIGURE_COLORS["phase"]))
    if freq.gaps.any():
        st.info("F(jω) has poles on the jω axis at ω = "
                + ", ".join(f"{w:g}" for w in freq.omega[freq.gaps]) + " (gaps in the plot).")

# Complex-plane surface
st.subheader("|F(s)| over the complex plane")
st.caption(f"Surface capped at {views.surface.ceiling:g} so poles do not flatten the rest of the plot.")
st.pyplot(surface_figure(views.surface))
plt.close("all")
