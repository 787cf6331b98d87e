"""Game domain services: session registry and round coordination.

This package holds the authoritative in-memory game state. Socket
handlers call into it and decide what to emit from the results, keeping
transport concerns separated from the core game mechanics.
"""

from .coordinator import ClaimOutcome, ClaimResult, GameCoordinator
from .registry import SessionRegistry, apply_trusted_delta
from .world import WorldSettings

__all__ = [
    'ClaimOutcome',
    'ClaimResult',
    'GameCoordinator',
    'SessionRegistry',
    'WorldSettings',
    'apply_trusted_delta',
]
