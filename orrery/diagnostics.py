from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Tuple
from .errors import NumericalDivergenceError
from .potential import softened_potential
if TYPE_CHECKING:
	from .simulation import NBodySimulation

"""
This module computes conserved quantities and health checks for a running simulation. The Diagnostics class provides kinetic energy, the softened potential energy (the pair potential -G m_i m_j / sqrt(r2 + softening), which is Newtonian for zero softening), total energy and its relative error against a reference, linear and angular momentum vectors, and centre-of-mass position and velocity. step_metrics bundles these into one dict for a driver that wants a per-frame summary. Diagnostic print counts are shared by every simulation in the process and can be cleared with reset_diag_counts. The finiteness check is opt-in: is_finite reports whether every scalar of the state is finite, and assert_finite reports the offending arrays through the rate-limited diagnostic printer and raises NumericalDivergenceError. None of this is called by the integrator itself, so the default stepping contract stays silent about blow-ups. The module reads the simulation state through its array accessors and never mutates it.

"""


class Diagnostics:
	_GLOBAL_DIAG_COUNTS = {}

	def __init__(self, simulation: "NBodySimulation"):
		self.sim = simulation

	@classmethod
	def reset_diag_counts(cls) -> None:
		cls._GLOBAL_DIAG_COUNTS.clear()

	def kinetic_energy(self) -> float:
		st = self.sim._state
		v2 = np.sum(st.vel * st.vel, axis=1)
		return 0.5 * float(np.sum(st.mass * v2))

	def potential_energy(self) -> float:
		st = self.sim._state
		return softened_potential(st.pos, st.mass, self.sim.G, self.sim.softening)

	def energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def relative_energy_error(self, E0: float) -> float:
		E = self.energy()
		if E0 == 0.0:
			return abs(E - E0)
		return abs((E - E0) / E0)

	def linear_momentum(self) -> np.ndarray:
		st = self.sim._state
		return np.sum(st.mass[:, None] * st.vel, axis=0)

	def angular_momentum(self) -> np.ndarray:
		st = self.sim._state
		return np.sum(st.mass[:, None] * np.cross(st.pos, st.vel), axis=0)

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		st = self.sim._state
		M = float(np.sum(st.mass))
		r_cm = np.sum(st.mass[:, None] * st.pos, axis=0) / M
		v_cm = self.linear_momentum() / M
		return r_cm, v_cm

	def step_metrics(self, E0: float | None = None) -> dict:
		T = self.kinetic_energy()
		V = self.potential_energy()
		r_cm, v_cm = self.center_of_mass()
		L = self.angular_momentum()

		if E0 is None:
			dE_rel = float("nan")
		elif E0 == 0.0:
			dE_rel = abs(T + V)
		else:
			dE_rel = abs((T + V - E0) / E0)

		return dict(
			step=self.sim.step_count,
			time=self.sim.time,
			T=T,
			V=V,
			E=T + V,
			dE_rel=dE_rel,
			L=L,
			L_norm=float(np.linalg.norm(L)),
			com_distance=float(np.linalg.norm(r_cm)),
			com_velocity=v_cm,
			finite=self.is_finite(),
		)

	def _non_finite_fields(self) -> Tuple[str, ...]:
		st = self.sim._state
		bad = []
		for name, arr in (("pos", st.pos), ("vel", st.vel), ("acc", st.acc)):
			if not np.all(np.isfinite(arr)):
				bad.append(name)
		return tuple(bad)

	def is_finite(self) -> bool:
		return not self._non_finite_fields()

	def assert_finite(self) -> None:
		bad = self._non_finite_fields()
		if not bad:
			return
		step = self.sim.step_count
		for name in bad:
			self._rate_limited_diag_print(name, f"[diag] non-finite {name} at step {step}")
		raise NumericalDivergenceError(
			f"non-finite {', '.join(bad)} after step {step}", step=step, fields=bad,
		)

	def _rate_limited_diag_print(self, key: str, msg: str) -> None:

		cfg = getattr(self.sim, "cfg", None)

		if cfg is None:
			enabled = True
		else:
			enabled = bool(cfg.diag_prints)
		if not enabled:
			return

		if cfg is None:
			limit = 3
			interval = 1000
		else:
			limit = int(cfg.diag_print_limit)
			interval = int(cfg.diag_print_interval)
		if limit < 0:
			limit = 0
		if interval < 1:
			interval = 1

		counts = Diagnostics._GLOBAL_DIAG_COUNTS
		c = counts.get(key, 0) + 1
		counts[key] = c

		if (c <= limit) or (c % interval == 0):
			if c <= limit:
				suffix = ""
			else:
				suffix = f" (occurrence #{c})"
			print(msg + suffix)
