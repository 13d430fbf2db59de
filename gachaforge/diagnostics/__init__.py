"""Simulation and balancing diagnostics."""

from .checklist import ChecklistIssue, run_checklist
from .pull_simulator import PullSimulator, SimulationReport

__all__ = ["ChecklistIssue", "run_checklist", "PullSimulator", "SimulationReport"]
