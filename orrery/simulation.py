"""
This module defines NBodySimulation, the object a driver constructs once and steps every
frame.

The simulation owns a frozen SimConfig, the live SimulationState arrays, the Integrator
and a pristine tuple of Body copies taken at construction. The caller's list is never
aliased, so it can be reused freely. Construction validates everything up front and
raises InvalidSimulationError; after that, step() cannot fail. Readers get read-only
BodyView objects or array copies. reset() discards all dynamical state and rebuilds it
from the pristine copy (or from a new list, which then becomes the pristine copy).
Renderer-side history such as trails is not held here; collaborators clear their own
state after a reset.
"""

from __future__ import annotations
from typing import Any, Iterable, List, Mapping, Sequence
import numpy as np

from .body import Body
from .body_view import BodyView
from .diagnostics import Diagnostics
from .errors import InvalidSimulationError
from .integrator import Integrator
from .sim_config import SimConfig
from .simulation_state import SimulationState
from .simulation_validator import SimulationValidator


def _as_bodies(bodies: Iterable[Body | Mapping[str, Any]]) -> List[Body]:
	out = []
	for i, b in enumerate(bodies):
		if isinstance(b, Body):
			out.append(b.copy())
			continue
		if not isinstance(b, Mapping):
			raise InvalidSimulationError(f"body[{i}]: expected Body or mapping, got {type(b).__name__}")
		try:
			out.append(Body.from_record(b))
		except (KeyError, TypeError, ValueError) as exc:
			raise InvalidSimulationError(f"body[{i}]: malformed record ({exc!r})") from exc
	return out


class NBodySimulation:
	def __init__(
		self,
		bodies: Iterable[Body | Mapping[str, Any]],
		cfg: SimConfig | None = None,
		*,
		G: float | None = None,
		dt: float | None = None,
		softening: float | None = None,
	) -> None:
		cfg = cfg or SimConfig()
		overrides = {}
		if G is not None:
			overrides["gravitational_constant"] = G
		if dt is not None:
			overrides["timestep"] = dt
		if softening is not None:
			overrides["softening_constant"] = softening
		if overrides:
			cfg = cfg.copy(**overrides)
		self._cfg = cfg

		self._state = SimulationState()
		self._initial: tuple[Body, ...] = ()
		self._load(bodies)

		self._integrator = Integrator(self)
		self._diagnostics = Diagnostics(self)

	def _load(self, bodies: Iterable[Body | Mapping[str, Any]]) -> None:
		initial = _as_bodies(bodies)
		SimulationValidator.validate(
			[b.mass for b in initial],
			[b.position for b in initial],
			[b.velocity for b in initial],
			self._cfg,
		)
		self._initial = tuple(initial)

		state = SimulationState()
		state.build_state([b.copy() for b in initial])
		self._state = state

	@property
	def cfg(self) -> SimConfig:
		return self._cfg

	@property
	def G(self) -> float:
		return self.cfg.G

	@property
	def dt(self) -> float:
		return self.cfg.dt

	@property
	def softening(self) -> float:
		return self.cfg.softening

	@property
	def n_bodies(self) -> int:
		return self._state.n_bodies

	@property
	def integrator(self) -> Integrator:
		return self._integrator

	@property
	def diagnostics(self) -> Diagnostics:
		return self._diagnostics

	@property
	def bodies(self) -> List[BodyView]:
		return [BodyView(self._state, i) for i in range(self._state.n_bodies)]

	@property
	def names(self) -> tuple[str | None, ...]:
		return self._state.names

	@property
	def masses(self) -> np.ndarray:
		return self._state.mass.copy()

	@property
	def positions(self) -> np.ndarray:
		return self._state.pos.copy()

	@property
	def velocities(self) -> np.ndarray:
		return self._state.vel.copy()

	@property
	def accelerations(self) -> np.ndarray:
		return self._state.acc.copy()

	@property
	def step_count(self) -> int:
		return self._integrator.step_count

	@property
	def time(self) -> float:
		return self._integrator.time

	def step(self) -> None:
		self._integrator.step()
		if self.cfg.check_finite:
			self._diagnostics.assert_finite()

	def run(self, n_steps: int) -> None:
		for _ in range(int(n_steps)):
			self.step()

	def initial_bodies(self) -> List[Body]:
		return [b.copy() for b in self._initial]

	def reset(self, bodies: Sequence[Body | Mapping[str, Any]] | None = None) -> None:
		if bodies is None:
			self._load(self._initial)
		else:
			self._load(bodies)
		self._integrator.reset_clock()

	def snapshot(self) -> dict:
		snap = self._state.snapshot()
		snap["step_count"] = self._integrator.step_count
		return snap

	def restore(self, snap: dict) -> None:
		self._state.restore(snap)
		self._integrator.step_count = int(snap.get("step_count", 0))

	def __repr__(self) -> str:
		return (f"NBodySimulation(n_bodies={self.n_bodies}, G={self.G}, dt={self.dt}, "
				f"softening={self.softening}, t={self.time})")
