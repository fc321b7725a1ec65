"""The investigation loop: explore rooms, collect clues and judge a suspect."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from .case_file import Case
from .clue_ledger import ClueLedger
from .location_graph import Location, children
from .suspect_index import SuspectIndex

logger = logging.getLogger(__name__)

LEFT_COMMAND = "e"
RIGHT_COMMAND = "d"
STOP_COMMAND = "s"

# Clues that must point at the accused for the case to count as solved.
SOLVE_THRESHOLD = 2


class InvestigationError(RuntimeError):
    """Raised when an engine operation is used in the wrong phase."""


class Phase(Enum):
    """Where the investigation currently stands."""

    AT_LOCATION = "at-location"
    JUDGING = "judging"
    DONE = "done"


class NavigationResult(Enum):
    """How a navigation command was handled."""

    MOVED = "moved"
    BLOCKED = "blocked"
    RETURNED = "returned"
    STOPPED = "stopped"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Move:
    """An exit offered to the player from the current room."""

    command: str
    description: str
    target: str | None = None


@dataclass(frozen=True)
class Discovery:
    """What the detective finds on entering a room."""

    location: str
    clue: str | None
    newly_found: bool
    moves: tuple[Move, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class NavigationOutcome:
    """Result of a navigation command and the room the player ends up in."""

    result: NavigationResult
    location: str
    command: str


@dataclass(frozen=True)
class Verdict:
    """Outcome of the final accusation."""

    accused: str
    match_count: int
    threshold: int = SOLVE_THRESHOLD

    @property
    def solved(self) -> bool:
        return self.match_count >= self.threshold


def count_matches(clues: Iterable[str], index: SuspectIndex, accused: str) -> int:
    """Count the clues that ``index`` resolves exactly to ``accused``.

    Clues missing from the index count for nothing.
    """

    total = 0
    for clue in clues:
        suspect = index.lookup(clue)
        if suspect is None:
            logger.warning("Clue %r does not implicate any suspect", clue)
            continue
        if suspect == accused:
            total += 1
    return total


class InvestigationEngine:
    """Drive a single detective through one case.

    The engine walks the room tree with an explicit stack of parent rooms.
    Moving into an exit pushes the current room; stopping anywhere below
    the root pops back to the parent so the player is offered that room's
    exits again. Stopping at the root closes the exploration and opens the
    judgment.
    """

    def __init__(
        self,
        root: Location,
        clues: Mapping[str, str],
        index: SuspectIndex,
        *,
        ledger: ClueLedger | None = None,
    ) -> None:
        self._root = root
        self._current = root
        self._parents: list[Location] = []
        self._clues: Mapping[str, str] = MappingProxyType(dict(clues))
        self._index = index
        self._ledger = ledger if ledger is not None else ClueLedger()
        self._phase = Phase.AT_LOCATION
        self._verdict: Verdict | None = None

    @classmethod
    def from_case(cls, case: Case) -> "InvestigationEngine":
        """Create an engine for a loaded :class:`Case`."""

        return cls(case.root, case.clues, case.index)

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def current(self) -> Location:
        return self._current

    @property
    def depth(self) -> int:
        """Number of rooms between the root and the current room."""

        return len(self._parents)

    @property
    def ledger(self) -> ClueLedger:
        return self._ledger

    @property
    def verdict(self) -> Verdict | None:
        return self._verdict

    def enter(self) -> Discovery:
        """Search the current room and report what was found."""

        self._require_phase(Phase.AT_LOCATION, "enter a room")

        node = self._current
        clue = self._clues.get(node.name)
        newly_found = False
        if clue is not None:
            newly_found = self._ledger.add(clue)

        return Discovery(
            location=node.name,
            clue=clue,
            newly_found=newly_found,
            moves=self._available_moves(node),
        )

    def choose(self, command: str) -> NavigationOutcome:
        """Apply a navigation command: ``E`` left, ``D`` right, ``S`` stop."""

        self._require_phase(Phase.AT_LOCATION, "navigate")

        normalised = command.strip().lower()
        left, right = children(self._current)

        if normalised in (LEFT_COMMAND, RIGHT_COMMAND):
            target = left if normalised == LEFT_COMMAND else right
            if target is None:
                logger.debug(
                    "No exit '%s' from %s", normalised, self._current.name
                )
                return self._outcome(NavigationResult.BLOCKED, normalised)

            self._parents.append(self._current)
            self._current = target
            logger.debug("Moved to %s (depth %d)", target.name, self.depth)
            return self._outcome(NavigationResult.MOVED, normalised)

        if normalised == STOP_COMMAND:
            if self._parents:
                self._current = self._parents.pop()
                logger.debug("Returned to %s", self._current.name)
                return self._outcome(NavigationResult.RETURNED, normalised)

            self._phase = Phase.JUDGING
            logger.debug("Exploration finished with %d clues", len(self._ledger))
            return self._outcome(NavigationResult.STOPPED, normalised)

        return self._outcome(NavigationResult.IGNORED, normalised)

    def ledger_clues(self) -> tuple[str, ...]:
        """Return the collected clues in ascending order."""

        return tuple(self._ledger)

    def accuse(self, accused: str) -> Verdict:
        """Judge ``accused`` against the collected clues and close the case."""

        self._require_phase(Phase.JUDGING, "accuse a suspect")

        match_count = count_matches(self._ledger, self._index, accused)
        verdict = Verdict(accused=accused, match_count=match_count)
        self._verdict = verdict
        self._phase = Phase.DONE
        logger.info(
            "Accused %r with %d supporting clues (solved=%s)",
            accused,
            match_count,
            verdict.solved,
        )
        return verdict

    def _available_moves(self, node: Location) -> tuple[Move, ...]:
        left, right = children(node)
        moves: list[Move] = []
        if left is not None:
            moves.append(Move(LEFT_COMMAND.upper(), "Left", left.name))
        if right is not None:
            moves.append(Move(RIGHT_COMMAND.upper(), "Right", right.name))
        moves.append(Move(STOP_COMMAND.upper(), "Stop and accuse"))
        return tuple(moves)

    def _outcome(self, result: NavigationResult, command: str) -> NavigationOutcome:
        return NavigationOutcome(
            result=result, location=self._current.name, command=command
        )

    def _require_phase(self, expected: Phase, action: str) -> None:
        if self._phase is not expected:
            raise InvestigationError(
                f"Cannot {action} while the investigation is {self._phase.value}."
            )


__all__ = [
    "Discovery",
    "InvestigationEngine",
    "InvestigationError",
    "Move",
    "NavigationOutcome",
    "NavigationResult",
    "Phase",
    "SOLVE_THRESHOLD",
    "Verdict",
    "count_matches",
]
