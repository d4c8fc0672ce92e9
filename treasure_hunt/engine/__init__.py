"""Hunt engine components."""

from .movement import (
    ADVANCE_VECTORS,
    EmptyCommandQueueError,
    Step,
    compute_step,
    resolve_command,
)
from .simulation import HuntSimulation, HuntSummary, run_hunt

__all__ = [
    "ADVANCE_VECTORS",
    "EmptyCommandQueueError",
    "HuntSimulation",
    "HuntSummary",
    "Step",
    "compute_step",
    "resolve_command",
    "run_hunt",
]
