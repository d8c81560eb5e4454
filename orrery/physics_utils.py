import math
import numpy as np

"""
This module provides small helpers for building initial conditions. remove_center_of_mass_velocity subtracts the mass-weighted mean velocity so the system does not drift, leaving single bodies and zero total mass untouched. circular_speed returns the relative speed of two bodies on a circular orbit of the given separation. Both work for any number of spatial components.


"""


def remove_center_of_mass_velocity(
	masses: np.ndarray, velocities: np.ndarray
) -> np.ndarray:
	masses = np.asarray(masses, dtype=float)
	velocities = np.asarray(velocities, dtype=float)
	if len(masses) == 1:
		return velocities.copy()
	total_mass = float(np.sum(masses))
	if total_mass == 0 or velocities.size == 0:
		return velocities.copy()
	v_cm = np.sum(masses[:, None] * velocities, axis=0) / total_mass
	return velocities - v_cm


def circular_speed(G: float, total_mass: float, separation: float) -> float:
	return math.sqrt(G * total_mass / separation)
