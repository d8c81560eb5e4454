"""
This module defines the Body class, a plain data container for one point mass.

The class stores mass, position (x/y/z), velocity (vx/vy/vz) and the derived
acceleration (ax/ay/az) as floating-point attributes, plus an optional display name
that has no physical meaning. Acceleration defaults to zero since it is recomputed from
positions before it is ever used. Bodies are the construction records handed to a
simulation; the simulation copies them into numpy arrays and never mutates the caller's
objects. from_record accepts the flat or nested mapping layout used by hand-written
initial conditions. Units are left to the caller (solar masses, AU and years for the
bundled presets).
"""

from __future__ import annotations
from typing import Any, Mapping


class Body:
	def __init__(
		self,
		mass: float,
		x: float,
		y: float,
		z: float = 0.0,
		vx: float = 0.0,
		vy: float = 0.0,
		vz: float = 0.0,
		*,
		ax: float = 0.0,
		ay: float = 0.0,
		az: float = 0.0,
		name: str | None = None,
	):
		self.mass = float(mass)
		self.x = float(x)
		self.y = float(y)
		self.z = float(z)
		self.vx = float(vx)
		self.vy = float(vy)
		self.vz = float(vz)
		self.ax = float(ax)
		self.ay = float(ay)
		self.az = float(az)
		self.name = name

	@property
	def position(self) -> tuple[float, float, float]:
		return (self.x, self.y, self.z)

	@property
	def velocity(self) -> tuple[float, float, float]:
		return (self.vx, self.vy, self.vz)

	@property
	def acceleration(self) -> tuple[float, float, float]:
		return (self.ax, self.ay, self.az)

	def copy(self) -> "Body":
		return Body(
			self.mass, self.x, self.y, self.z, self.vx, self.vy, self.vz,
			ax=self.ax, ay=self.ay, az=self.az, name=self.name,
		)

	@classmethod
	def from_record(cls, record: Mapping[str, Any]) -> "Body":
		"""Build a Body from ``{name?, mass|m, x, y, z, vx, vy, vz}``.

		Nested ``position``/``velocity`` mappings (or 3-sequences) are accepted too.
		Missing z components and velocities default to zero.
		"""
		if "mass" in record:
			mass = record["mass"]
		else:
			mass = record["m"]

		pos = record.get("position")
		if pos is None:
			x, y, z = record["x"], record["y"], record.get("z", 0.0)
		elif isinstance(pos, Mapping):
			x, y, z = pos["x"], pos["y"], pos.get("z", 0.0)
		else:
			x, y, z = pos

		vel = record.get("velocity")
		if vel is None:
			vx, vy, vz = record.get("vx", 0.0), record.get("vy", 0.0), record.get("vz", 0.0)
		elif isinstance(vel, Mapping):
			vx, vy, vz = vel.get("vx", 0.0), vel.get("vy", 0.0), vel.get("vz", 0.0)
		else:
			vx, vy, vz = vel

		return cls(mass, x, y, z, vx, vy, vz, name=record.get("name"))

	def __repr__(self) -> str:
		return (f"Body(name={self.name!r}, mass={self.mass}, x={self.x}, y={self.y}, z={self.z}, "
				f"vx={self.vx}, vy={self.vy}, vz={self.vz})")
