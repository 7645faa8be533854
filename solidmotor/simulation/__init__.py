"""Simulation module for solid motor internal ballistics.

Provides the step-driven motor simulation: the caller owns the loop and
the simulation owns the motor state.

Example:
    >>> from solidmotor.simulation import MotorSimulation
    >>>
    >>> sim = MotorSimulation()
    >>> sim.ignite()
    >>> while sim.snapshot().is_burning:
    ...     sim.step(0.01)
"""

from solidmotor.simulation.simulator import (
    HistorySample,
    LifecyclePhase,
    MotorSimulation,
    MotorSnapshot,
    SimulationState,
    burn_progress,
)

__all__ = [
    "HistorySample",
    "LifecyclePhase",
    "MotorSimulation",
    "MotorSnapshot",
    "SimulationState",
    "burn_progress",
]
