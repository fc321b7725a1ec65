"""Test configuration for the Detective Quest project."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from typing import Any

import pytest

from detectivequest import Case, InvestigationEngine, load_case_from_mapping


def small_case_definition() -> dict[str, Any]:
    """Return a three-room case: an empty root with two clue rooms."""

    return {
        "title": "Test Case",
        "rooms": {
            "name": "A",
            "left": {"name": "B"},
            "right": {"name": "C"},
        },
        "clues": {"B": "c1", "C": "c2"},
        "evidence": {"c1": "S1", "c2": "S1"},
        "suspects": ["S1", "S2"],
    }


@pytest.fixture()
def case_definition() -> dict[str, Any]:
    """Return a fresh copy of the three-room case definition."""

    return small_case_definition()


@pytest.fixture()
def small_case(case_definition: dict[str, Any]) -> Case:
    return load_case_from_mapping(case_definition)


@pytest.fixture()
def engine(small_case: Case) -> InvestigationEngine:
    return InvestigationEngine.from_case(small_case)


__all__ = ["small_case_definition", "case_definition", "small_case", "engine"]
