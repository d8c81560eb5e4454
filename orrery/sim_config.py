from __future__ import annotations
from dataclasses import dataclass, replace

"""
This configuration module defines the run parameters of a simulation through the SimConfig dataclass. The three physical parameters are the gravitational constant, the fixed timestep and the softening constant that is added under the square root of the squared pair distance. The remaining fields select the acceleration kernel and control the optional finiteness check and the rate-limited diagnostic printing. A SimConfig is frozen: it is fixed at construction of a simulation and stays unchanged for the whole run. Modified copies are produced through copy(). The module assumes time units that agree with the velocity units of the bodies being integrated.

"""
_ALLOWED_KERNELS = {
    "vectorized",
    "sequential",
}


@dataclass(frozen=True)
class SimConfig:
    gravitational_constant: float = 1.0
    timestep:               float = 0.01
    softening_constant:     float = 0.0
    force_kernel: str = "vectorized"
    check_finite: bool = False
    diag_prints: bool = True
    diag_print_limit: int = 3
    diag_print_interval: int = 1000

    @property
    def G(self) -> float:
        return float(self.gravitational_constant)

    @property
    def dt(self) -> float:
        return float(self.timestep)

    @property
    def softening(self) -> float:
        return float(self.softening_constant)

    def copy(self, **changes) -> "SimConfig":
        return replace(self, **changes)


def kernel_is_known(name: str) -> bool:
    return name in _ALLOWED_KERNELS
