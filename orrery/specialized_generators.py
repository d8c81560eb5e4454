import math
import numpy as np
from typing import List
from .body import Body
from .physics_utils import circular_speed, remove_center_of_mass_velocity
from .sim_config import SimConfig

"""
This module provides ready-made initial conditions. The SpecializedGenerators class offers the inner solar system (Sun, Mercury, Venus and Earth plus Mars, in solar masses, AU and AU/year, with the matching G = 39.5, dt = 0.008 yr and softening 0.15), a two-body circular orbit about the barycentre, and an equal-mass ring of n bodies rotating rigidly in the xy-plane. Every generator returns fresh Body lists, so callers may hand them to a simulation and keep them for a later reset. The binary and the ring are built in the centre-of-mass frame.

"""


_INNER_SOLAR_SYSTEM = (
	# name, m, x, y, z, vx, vy, vz
	("Sun", 1.0,
		-1.50324727873647e-6, -3.93762725944737e-6, -4.86567877183925e-8,
		3.1669325898331e-5, -6.85489559263319e-6, -7.90076642683254e-7),
	("Mercury", 1.65956463e-7,
		-0.346390408691506, -0.272465544507684, 0.00951633403684172,
		4.25144321778261, -7.61778341043381, -1.01249478093275),
	("Venus", 2.44699613e-6,
		-0.168003526072526, 0.698844725464528, 0.0192761582256879,
		-7.2077847105093, -1.76778886124455, 0.391700036358566),
	("Earth", 3.0024584e-6,
		0.648778995445634, 0.747796691108466, -3.22953591923124e-5,
		-4.85085525059392, 4.09601538682312, -0.000258553333317722),
	("Mars", 3.213e-7,
		-0.574871406752105, -1.395455041953879, -0.01515164037265145,
		4.9225288800471425, -1.5065904473191791, -0.1524041758922603),
)

# 4*pi^2 rounded; AU^3 / (M_sun yr^2)
SOLAR_G = 39.5
# 0.008 yr is 2.92 days
SOLAR_DT = 0.008
SOLAR_SOFTENING = 0.15


class SpecializedGenerators:

	@staticmethod
	def inner_solar_system() -> List[Body]:
		return [
			Body(m, x, y, z, vx, vy, vz, name=name)
			for name, m, x, y, z, vx, vy, vz in _INNER_SOLAR_SYSTEM
		]

	@staticmethod
	def inner_solar_system_config(**changes) -> SimConfig:
		cfg = SimConfig(
			gravitational_constant=SOLAR_G,
			timestep=SOLAR_DT,
			softening_constant=SOLAR_SOFTENING,
		)
		if changes:
			cfg = cfg.copy(**changes)
		return cfg

	@staticmethod
	def circular_binary(
		m1: float = 1.0,
		m2: float = 1.0e-3,
		separation: float = 1.0,
		G: float = 1.0,
	) -> List[Body]:

		M = m1 + m2
		x1 = -m2 * separation / M
		x2 = m1 * separation / M

		v_rel = circular_speed(G, M, separation)
		vy1 = -m2 * v_rel / M
		vy2 = m1 * v_rel / M

		masses = np.array([m1, m2])
		velocities = remove_center_of_mass_velocity(
			masses, np.array([[0.0, vy1, 0.0], [0.0, vy2, 0.0]])
		)
		return [
			Body(m1, x1, 0.0, 0.0, *velocities[0].tolist(), name="primary"),
			Body(m2, x2, 0.0, 0.0, *velocities[1].tolist(), name="secondary"),
		]

	@staticmethod
	def equal_mass_polygon(
		n_bodies: int,
		radius: float = 1.0,
		mass: float = 1.0,
		G: float = 1.0,
	) -> List[Body]:

		n = int(n_bodies)
		if n < 2:
			raise ValueError("equal_mass_polygon needs at least two bodies")

		# net pull toward the centre from the other n-1 bodies of the ring
		s = 0.0
		for k in range(1, n):
			s += 1.0 / math.sin(math.pi * k / n)
		g_in = G * mass * s / (4.0 * radius * radius)
		omega = math.sqrt(g_in / radius)

		bodies = []
		for k in range(n):
			phi = 2.0 * math.pi * k / n
			x = radius * math.cos(phi)
			y = radius * math.sin(phi)
			vx = -omega * y
			vy = omega * x
			bodies.append(Body(mass, x, y, 0.0, vx, vy, 0.0, name=f"ring-{k}"))
		return bodies
