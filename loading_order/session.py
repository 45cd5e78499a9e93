from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
from .models import ExtractionGroup, Station


PHASES = (
    "capturing_loading_lists",
    "review_demand",
    "capturing_inventory",
    "review_order",
    "completed",
)


class PhaseTransitionError(ValueError):
    pass


@dataclass
class Session:
    """Current capture session: its phase plus the data gathered so far."""

    phase: str = PHASES[0]
    groups: List[ExtractionGroup] = field(default_factory=list)
    stations: List[Station] = field(default_factory=list)

    def advance(self, target: Optional[str] = None) -> str:
        """Move to ``target`` (default: the next phase).

        Forward moves go one phase at a time; any earlier phase can be
        revisited to re-capture.
        """
        current = PHASES.index(self.phase)
        if target is None:
            if current == len(PHASES) - 1:
                raise PhaseTransitionError("session is already completed")
            target = PHASES[current + 1]
        if target not in PHASES:
            raise PhaseTransitionError(f"unknown phase {target!r}")
        wanted = PHASES.index(target)
        if wanted > current + 1:
            raise PhaseTransitionError(f"cannot skip from {self.phase} to {target}")
        self.phase = target
        return self.phase
