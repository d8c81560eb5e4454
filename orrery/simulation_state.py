"""
This module manages the array representation of the live bodies.

The SimulationState class holds float64 numpy arrays for masses (N,), positions,
velocities and accelerations (N, 3), together with a parallel tuple of display names.
build_state copies a sequence of Body records into fresh arrays, so nothing the caller
holds is ever aliased. snapshot and restore capture and reinstate the dynamical state
in memory as array copies. The body count is fixed once the state is built;
restore refuses snapshots of a different size.
"""

from __future__ import annotations
import numpy as np
from typing import Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
	from .body import Body


class SimulationState:

	def __init__(self):
		self.n_bodies: int = 0
		self._mass: np.ndarray = np.empty(0, dtype=np.float64)
		self._pos: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._vel: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._acc: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._names: Tuple[str | None, ...] = ()

	@property
	def pos(self) -> np.ndarray:
		return self._pos

	@property
	def vel(self) -> np.ndarray:
		return self._vel

	@property
	def mass(self) -> np.ndarray:
		return self._mass

	@property
	def acc(self) -> np.ndarray:
		return self._acc

	@property
	def names(self) -> Tuple[str | None, ...]:
		return self._names

	def build_state(self, bodies: Sequence["Body"]) -> None:
		self.n_bodies = len(bodies)

		self._mass = np.array([b.mass for b in bodies], dtype=np.float64)
		self._pos = np.array([(b.x, b.y, b.z) for b in bodies], dtype=np.float64).reshape(-1, 3)
		self._vel = np.array([(b.vx, b.vy, b.vz) for b in bodies], dtype=np.float64).reshape(-1, 3)
		self._acc = np.array([(b.ax, b.ay, b.az) for b in bodies], dtype=np.float64).reshape(-1, 3)
		self._names = tuple(b.name for b in bodies)

	def snapshot(self) -> dict:
		return {
			"masses": self._mass.copy(),
			"positions": self._pos.copy(),
			"velocities": self._vel.copy(),
			"accelerations": self._acc.copy(),
			"names": self._names,
		}

	def restore(self, snap: dict) -> None:
		pos = np.asarray(snap["positions"], dtype=np.float64)
		if pos.shape != self._pos.shape:
			raise ValueError(
				f"snapshot holds {pos.shape[0]} bodies, simulation has {self.n_bodies}"
			)
		self._mass[...] = np.asarray(snap["masses"], dtype=np.float64)
		self._pos[...] = pos
		self._vel[...] = np.asarray(snap["velocities"], dtype=np.float64)
		if "accelerations" in snap:
			self._acc[...] = np.asarray(snap["accelerations"], dtype=np.float64)
		else:
			self._acc[...] = 0.0
		self._names = tuple(snap.get("names", self._names))
