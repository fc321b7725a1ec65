"""Core package for the Detective Quest mystery."""

from .case_file import (
    Case,
    CaseFileError,
    load_case_from_file,
    load_case_from_mapping,
    load_default_case,
    validate_case,
)
from .clue_ledger import ClueLedger, ClueNode, insert_clue, iter_clues
from .investigation import (
    Discovery,
    InvestigationEngine,
    InvestigationError,
    Move,
    NavigationOutcome,
    NavigationResult,
    Phase,
    SOLVE_THRESHOLD,
    Verdict,
    count_matches,
)
from .location_graph import Location, build_location_graph, children
from .settings import GameSettings
from .suspect_index import SuspectIndex

__all__ = [
    "Location",
    "build_location_graph",
    "children",
    "ClueLedger",
    "ClueNode",
    "insert_clue",
    "iter_clues",
    "SuspectIndex",
    "InvestigationEngine",
    "InvestigationError",
    "Discovery",
    "Move",
    "NavigationOutcome",
    "NavigationResult",
    "Phase",
    "SOLVE_THRESHOLD",
    "Verdict",
    "count_matches",
    "Case",
    "CaseFileError",
    "load_case_from_file",
    "load_case_from_mapping",
    "load_default_case",
    "validate_case",
    "GameSettings",
]
