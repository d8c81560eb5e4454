"""
This initialization file is the entry point of the orrery package, a fixed-timestep
softened-gravity N-body integrator.

It re-exports the configuration (SimConfig), the body record and its read-only view
(Body, BodyView), the simulation and its integrator (NBodySimulation, Integrator), the
acceleration kernels and potential, validation and error types, diagnostics, the preset
generators and the headless trail collaborators, so callers can import everything from
the package root.
"""

from .sim_config import SimConfig
from .errors import OrreryError, InvalidSimulationError, NumericalDivergenceError
from .body import Body
from .body_view import BodyView
from .simulation_state import SimulationState
from .simulation_validator import SimulationValidator
from .geometry_cache import geometry_buffers
from .forces import softened_accelerations, sequential_accelerations, KERNELS
from .potential import softened_potential
from .integrator import Integrator
from .diagnostics import Diagnostics
from .simulation import NBodySimulation
from .physics_utils import remove_center_of_mass_velocity, circular_speed
from .specialized_generators import SpecializedGenerators
from .manifestation import Manifestation, ManifestationRegistry, to_screen


__all__ = [
    "SimConfig",
    "OrreryError",
    "InvalidSimulationError",
    "NumericalDivergenceError",
    "Body",
    "BodyView",
    "SimulationState",
    "SimulationValidator",
    "geometry_buffers",
    "softened_accelerations",
    "sequential_accelerations",
    "KERNELS",
    "softened_potential",
    "Integrator",
    "Diagnostics",
    "NBodySimulation",
    "remove_center_of_mass_velocity",
    "circular_speed",
    "SpecializedGenerators",
    "Manifestation",
    "ManifestationRegistry",
    "to_screen",
]
