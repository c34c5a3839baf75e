"""Problem conditions, solver configuration and solution containers for flow simulations."""

from __future__ import annotations

from dataclasses import dataclass, field

_CHANNEL_HEIGHT = 0.41


@dataclass
class DfgConditions:
    """Conditions of the flow-around-a-cylinder benchmark."""

    viscosity: float
    peak_velocity: float

    def left_velocity(self, y: float) -> float:
        """Parabolic inflow velocity on the left border at height ``y``."""
        return self.peak_velocity * y * (_CHANNEL_HEIGHT - y) / (_CHANNEL_HEIGHT * _CHANNEL_HEIGHT)


@dataclass
class TimeStepSolution:
    """State at one time: velocity as [x values; y values] and pressure per node."""

    time: float
    velocity: list[float] = field(default_factory=list)
    pressure: list[float] = field(default_factory=list)


@dataclass
class Solution:
    """Sequence of time-step states."""

    steps: list[TimeStepSolution] = field(default_factory=list)


@dataclass
class SolverConfig:
    """Settings of an iterative linear solver."""

    method: str = "gs"
    max_iterations: int = 200
    target_mse: float = 1e-6
    mse_check_interval: int = 1


@dataclass
class ChorinCudaConfig:
    """Solver settings for the velocity and pressure systems."""

    velocity_solver: SolverConfig = field(default_factory=SolverConfig)
    pressure_solver: SolverConfig = field(default_factory=SolverConfig)


@dataclass
class OutputConfig:
    """Settings for rendered output frames."""

    ext: str = "ppm"
    frame_step: int = 1
    velocity_step: float = 0.025
    velocity_scale: float = 0.05
    img_scale: float = 800


@dataclass
class NsConfig:
    """Configuration of a Navier-Stokes run."""

    algo: str = "chorinEigen"
    viscosity: float = 0.001
    peak_velocity: float = 1
    max_t: float = 1
    tau: float = 1e-4
    chorin_cuda: ChorinCudaConfig = field(default_factory=ChorinCudaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)