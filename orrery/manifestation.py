"""
This module holds the renderer-side state of a simulation: motion trails.

A Manifestation keeps the last trail_length screen positions of one body and turns them
into fading markers; the newest point is drawn opaque at full radius and older points
shrink and fade linearly with their age. ManifestationRegistry owns one manifestation
per body index, so presentation state is composed with the physics by identity instead
of being attached to the bodies. It maps simulation coordinates to screen space with
to_screen and must be reset by the caller whenever the simulation is reset. Nothing here
draws; a drawing backend consumes markers().
"""

from __future__ import annotations
from collections import deque
from typing import Deque, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
	from .simulation import NBodySimulation


Marker = Tuple[float, float, float, float]

# pixels per AU
DEFAULT_SCALE = 70.0
DEFAULT_RADIUS = 4.0
DEFAULT_TRAIL_LENGTH = 35


def to_screen(x: float, y: float, width: float, height: float, scale: float = DEFAULT_SCALE) -> Tuple[float, float]:
	return (width / 2 + x * scale, height / 2 + y * scale)


class Manifestation:
	def __init__(self, trail_length: int = DEFAULT_TRAIL_LENGTH, radius: float = DEFAULT_RADIUS) -> None:
		if int(trail_length) < 1:
			raise ValueError("trail_length must be at least 1")
		self.trail_length = int(trail_length)
		self.radius = float(radius)
		self.positions: Deque[Tuple[float, float]] = deque(maxlen=self.trail_length)

	def store_position(self, x: float, y: float) -> None:
		self.positions.append((float(x), float(y)))

	def markers(self) -> List[Marker]:
		n = len(self.positions)
		out = []
		for i, (x, y) in enumerate(self.positions):
			if i == n - 1:
				alpha = 1.0
				size = 1.0
			else:
				size = i / n
				alpha = size / 2
			out.append((x, y, size * self.radius, alpha))
		return out

	def clear(self) -> None:
		self.positions.clear()

	def __len__(self) -> int:
		return len(self.positions)


class ManifestationRegistry:
	def __init__(
		self,
		n_bodies: int,
		trail_length: int = DEFAULT_TRAIL_LENGTH,
		radius: float = DEFAULT_RADIUS,
	) -> None:
		self.trail_length = int(trail_length)
		self.radius = float(radius)
		self._items: List[Manifestation] = []
		self.reset(n_bodies)

	def __getitem__(self, idx: int) -> Manifestation:
		return self._items[idx]

	def __len__(self) -> int:
		return len(self._items)

	def reset(self, n_bodies: int | None = None) -> None:
		if n_bodies is None:
			n_bodies = len(self._items)
		self._items = [Manifestation(self.trail_length, self.radius) for _ in range(int(n_bodies))]

	def record(
		self,
		sim: "NBodySimulation",
		width: float,
		height: float,
		scale: float = DEFAULT_SCALE,
	) -> List[Tuple[float, float, str | None]]:
		"""Store the current screen position of every body.

		Returns ``(screen_x, screen_y, name)`` per body, in body order, for label drawing.
		"""
		if sim.n_bodies != len(self._items):
			self.reset(sim.n_bodies)

		placed = []
		for body in sim.bodies:
			sx, sy = to_screen(body.x, body.y, width, height, scale)
			self._items[body.index].store_position(sx, sy)
			placed.append((sx, sy, body.name))
		return placed
