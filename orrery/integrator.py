from __future__ import annotations
from typing import TYPE_CHECKING, Callable
import numpy as np
from .forces import KERNELS

if TYPE_CHECKING:
	from .simulation import NBodySimulation

"""
This central module implements the Integrator that advances an N-body simulation by one fixed timestep. A step is three ordered sub-steps: advance_positions moves every body with its current velocity, recompute_accelerations overwrites every acceleration from the new positions using the softened pairwise kernel selected by the configuration, and advance_velocities kicks every body with the fresh acceleration. Updating positions with the old velocity and velocities with the new acceleration is the semi-implicit (symplectic) Euler scheme; the order is fixed and must not be changed, since reordering turns it into explicit Euler with secular energy drift. The integrator works directly on the simulation's state arrays, performs no validation and raises nothing while stepping. It also counts steps and elapsed time for the driver.

"""


class Integrator:
	def __init__(self, sim: "NBodySimulation") -> None:
		self.sim = sim
		self._kernel: Callable[..., np.ndarray] = self._make_kernel(sim.cfg.force_kernel)
		self.step_count = 0

	@staticmethod
	def _make_kernel(name: str) -> Callable[..., np.ndarray]:
		return KERNELS[name]

	@property
	def time(self) -> float:
		return self.step_count * self.sim.dt

	def advance_positions(self) -> None:
		state = self.sim._state
		state.pos[...] += state.vel * self.sim.dt

	def recompute_accelerations(self) -> None:
		state = self.sim._state
		self._kernel(state.pos, state.mass, self.sim.G, self.sim.softening, out=state.acc)

	def advance_velocities(self) -> None:
		state = self.sim._state
		state.vel[...] += state.acc * self.sim.dt

	def step(self) -> None:
		self.advance_positions()
		self.recompute_accelerations()
		self.advance_velocities()
		self.step_count += 1

	def reset_clock(self) -> None:
		self.step_count = 0
