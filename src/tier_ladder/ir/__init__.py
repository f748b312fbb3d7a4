"""Typed definitions shared by the registry, the engine and its collaborators.

Ladders and resolution results are frozen Pydantic models: a ladder is
built once when the registry loads, a result is produced per call and
discarded once the caller has applied it.
"""

from .ladders import Ladder, LadderCategory, LadderName, UnknownLadderError
from .resolution import ResolutionResult, TierOutcome

__all__ = [
    # ladders
    "Ladder",
    "LadderCategory",
    "LadderName",
    "UnknownLadderError",
    # resolution
    "ResolutionResult",
    "TierOutcome",
]
