"""
This module implements BodyView, a read-only proxy giving Body-like access to one
particle stored in a simulation's numpy arrays.

Attribute access (mass, x/y/z, vx/vy/vz, ax/ay/az, name and the position, velocity and
acceleration tuples) maps straight onto the row of the parent state, so a view always
reflects the latest step without copying. Views have no setters: between steps callers
may read the live bodies but not write them. A view is tied to the state object it was
created from; after a reset the simulation hands out fresh views.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from .simulation_state import SimulationState


class BodyView:
	__slots__ = ("_state", "_i")

	def __init__(self, state: "SimulationState", idx: int) -> None:
		self._state = state
		self._i = int(idx)

	@property
	def index(self) -> int:
		return self._i

	@property
	def name(self) -> str | None:
		return self._state.names[self._i]

	@property
	def mass(self) -> float:
		return float(self._state.mass[self._i])

	@property
	def x(self) -> float:
		return float(self._state.pos[self._i, 0])

	@property
	def y(self) -> float:
		return float(self._state.pos[self._i, 1])

	@property
	def z(self) -> float:
		return float(self._state.pos[self._i, 2])

	@property
	def vx(self) -> float:
		return float(self._state.vel[self._i, 0])

	@property
	def vy(self) -> float:
		return float(self._state.vel[self._i, 1])

	@property
	def vz(self) -> float:
		return float(self._state.vel[self._i, 2])

	@property
	def ax(self) -> float:
		return float(self._state.acc[self._i, 0])

	@property
	def ay(self) -> float:
		return float(self._state.acc[self._i, 1])

	@property
	def az(self) -> float:
		return float(self._state.acc[self._i, 2])

	@property
	def position(self) -> tuple[float, float, float]:
		return (self.x, self.y, self.z)

	@property
	def velocity(self) -> tuple[float, float, float]:
		return (self.vx, self.vy, self.vz)

	@property
	def acceleration(self) -> tuple[float, float, float]:
		return (self.ax, self.ay, self.az)

	def __repr__(self) -> str:
		return (f"BodyView(name={self.name!r}, mass={self.mass}, x={self.x}, y={self.y}, z={self.z}, "
				f"vx={self.vx}, vy={self.vy}, vz={self.vz})")
