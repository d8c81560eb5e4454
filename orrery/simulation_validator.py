"""
This module provides construction-time validation for simulations.

The SimulationValidator class offers static methods to check a candidate initial state
and configuration (at least one body, positive finite masses, finite 3-component
positions and velocities, finite G and timestep, non-negative finite softening, a known
acceleration kernel), to report the offending fields of an invalid state, and to raise
InvalidSimulationError. Validation happens once, before any stepping; the integrator
itself performs no checks.
"""

from __future__ import annotations
import math
from typing import List, Sequence, Tuple

from .errors import InvalidSimulationError
from .sim_config import SimConfig, kernel_is_known


Vec3 = Tuple[float, float, float]


def _finite(v) -> bool:
	try:
		return math.isfinite(float(v))
	except (TypeError, ValueError):
		return False


class SimulationValidator:
	@staticmethod
	def state_problems(
		masses: Sequence[float],
		positions: Sequence[Vec3],
		velocities: Sequence[Vec3],
	) -> List[str]:

		problems: List[str] = []

		if masses is None or positions is None or velocities is None:
			return ["masses, positions and velocities are required"]

		if len(masses) == 0:
			problems.append("at least one body is required")
		if not len(masses) == len(positions) == len(velocities):
			problems.append(
				f"length mismatch: {len(masses)} masses, {len(positions)} positions, "
				f"{len(velocities)} velocities"
			)
			return problems

		for i, m in enumerate(masses):
			if not _finite(m) or not float(m) > 0.0:
				problems.append(f"mass[{i}] must be positive and finite, got {m!r}")

		for label, vectors in (("position", positions), ("velocity", velocities)):
			for i, vec in enumerate(vectors):
				if len(vec) != 3:
					problems.append(f"{label}[{i}] has {len(vec)} components (expected 3)")
					continue
				for c in vec:
					if not _finite(c):
						problems.append(f"{label}[{i}] must be finite, got {tuple(vec)!r}")
						break

		return problems

	@staticmethod
	def config_problems(cfg: SimConfig) -> List[str]:
		problems: List[str] = []
		if not _finite(cfg.gravitational_constant):
			problems.append(f"gravitational_constant must be finite, got {cfg.gravitational_constant!r}")
		if not _finite(cfg.timestep):
			problems.append(f"timestep must be finite, got {cfg.timestep!r}")
		if not _finite(cfg.softening_constant) or float(cfg.softening_constant) < 0.0:
			problems.append(f"softening_constant must be finite and >= 0, got {cfg.softening_constant!r}")
		if not kernel_is_known(cfg.force_kernel):
			problems.append(f"unknown force_kernel {cfg.force_kernel!r}")
		return problems

	@staticmethod
	def validate(
		masses: Sequence[float],
		positions: Sequence[Vec3],
		velocities: Sequence[Vec3],
		cfg: SimConfig,
	) -> None:
		problems = SimulationValidator.config_problems(cfg)
		problems += SimulationValidator.state_problems(masses, positions, velocities)
		if not problems:
			return

		if cfg.diag_prints:
			SimulationValidator.report_invalid_state(
				"construction",
				masses=masses,
				positions=positions,
				velocities=velocities,
				softening=cfg.softening_constant,
			)
		raise InvalidSimulationError("; ".join(problems))

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		velocities=None,
		softening=None,
	) -> None:

		print(f"[invalid] {label}")
		if masses is not None:
			print("masses", list(masses))
		if positions is not None:
			print("positions", list(positions))
			for i, pos in enumerate(positions):
				if len(pos) != 3:
					print(f"  position[{i}] has {len(pos)} dimensions (expected 3)")
		if velocities is not None:
			print("velocities", list(velocities))
			for i, vel in enumerate(velocities):
				if len(vel) != 3:
					print(f"  velocity[{i}] has {len(vel)} dimensions (expected 3)")
		if softening is not None:
			print("softening", softening)
