"""
Exception types raised by the simulator.

Construction problems surface as InvalidSimulationError, which is also a ValueError so
that callers validating user input can catch it generically. NumericalDivergenceError is
only raised by the opt-in finiteness check; the stepping path itself never raises.
"""

from __future__ import annotations


class OrreryError(Exception):
	pass


class InvalidSimulationError(OrreryError, ValueError):
	pass


class NumericalDivergenceError(OrreryError, FloatingPointError):
	def __init__(self, message: str, *, step: int | None = None, fields: tuple[str, ...] = ()) -> None:
		super().__init__(message)
		self.step = step
		self.fields = tuple(fields)
