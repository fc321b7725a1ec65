"""Load and validate the static data describing a mystery."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .location_graph import Location, build_location_graph, iter_locations
from .suspect_index import DEFAULT_BUCKET_COUNT, SuspectIndex

logger = logging.getLogger(__name__)


class CaseFileError(ValueError):
    """Raised when a case file is malformed or internally inconsistent."""


class CaseFileModel(BaseModel):
    """Schema for a JSON case file.

    ``rooms`` is kept as a raw nested mapping; its shape is checked by
    :func:`~detectivequest.location_graph.build_location_graph`, which walks
    it without recursion so arbitrarily deep layouts load.
    """

    title: str = "Detective Quest"
    subtitle: str | None = None
    introduction: list[str] = Field(default_factory=list)
    rooms: dict[str, Any]
    clues: dict[str, str] = Field(default_factory=dict)
    evidence: dict[str, str]
    suspects: list[str] | None = None
    bucket_count: int = Field(default=DEFAULT_BUCKET_COUNT, ge=1)

    @field_validator("clues", "evidence")
    @classmethod
    def _validate_pairs(cls, value: dict[str, str]) -> dict[str, str]:
        # Clue text is matched byte-for-byte, so only emptiness is rejected.
        for key, item in value.items():
            if not key.strip() or not item.strip():
                raise ValueError("keys and values must be non-empty strings")
        return value

    @model_validator(mode="after")
    def _check_suspect_list(self) -> "CaseFileModel":
        if self.suspects is None:
            return self

        listed = set(self.suspects)
        missing = sorted(
            {suspect for suspect in self.evidence.values() if suspect not in listed}
        )
        if missing:
            raise ValueError(
                "evidence names suspects missing from 'suspects': "
                + ", ".join(missing)
            )
        return self


@dataclass(frozen=True)
class Case:
    """Everything the investigation needs, built once at startup."""

    title: str
    subtitle: str | None
    introduction: tuple[str, ...]
    root: Location
    clues: Mapping[str, str]
    index: SuspectIndex
    suspects: tuple[str, ...]


def validate_case(
    root: Location, clues: Mapping[str, str], index: SuspectIndex
) -> None:
    """Check that every room clue exists in the layout and resolves to a suspect.

    Raises:
        CaseFileError: Listing every inconsistency found.
    """

    room_names = {location.name for location in iter_locations(root)}
    problems: list[str] = []
    for room, clue in clues.items():
        if room not in room_names:
            problems.append(f"clue '{clue}' is assigned to unknown room '{room}'")
        if index.lookup(clue) is None:
            problems.append(f"clue '{clue}' in room '{room}' implicates nobody")

    if problems:
        raise CaseFileError("Inconsistent case file: " + "; ".join(problems))


def load_case_from_mapping(
    definitions: Mapping[str, Any],
    *,
    bucket_count: int | None = None,
) -> Case:
    """Validate ``definitions`` and build the room tree and suspect index.

    Args:
        definitions: Parsed JSON case data.
        bucket_count: Overrides the case file's ``bucket_count`` when given.

    Raises:
        CaseFileError: If the data fails schema or consistency checks.
    """

    try:
        model = CaseFileModel.model_validate(definitions)
    except ValidationError as exc:
        raise CaseFileError(f"Invalid case file: {exc}") from exc

    try:
        root = build_location_graph(model.rooms)
        index = SuspectIndex(
            bucket_count if bucket_count is not None else model.bucket_count
        )
    except (TypeError, ValueError) as exc:
        raise CaseFileError(f"Invalid case file: {exc}") from exc

    for clue, suspect in model.evidence.items():
        index.insert(clue, suspect)

    validate_case(root, model.clues, index)

    if model.suspects is not None:
        suspects = tuple(model.suspects)
    else:
        suspects = tuple(dict.fromkeys(model.evidence.values()))

    logger.info(
        "Loaded case '%s' with %d clues and %d suspects",
        model.title,
        len(model.clues),
        len(suspects),
    )
    return Case(
        title=model.title,
        subtitle=model.subtitle,
        introduction=tuple(model.introduction),
        root=root,
        clues=MappingProxyType(dict(model.clues)),
        index=index,
        suspects=suspects,
    )


def load_case_from_file(
    path: str | Path, *, bucket_count: int | None = None
) -> Case:
    """Load a case file from disk."""

    data_path = Path(path)
    with data_path.open("r", encoding="utf-8") as handle:
        try:
            raw_data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise CaseFileError(f"Case file '{data_path}' is not valid JSON: {exc}") from exc

    if not isinstance(raw_data, Mapping):
        raise CaseFileError("Case files must contain an object at the top level.")

    return load_case_from_mapping(raw_data, bucket_count=bucket_count)


def load_default_case(*, bucket_count: int | None = None) -> Case:
    """Load the bundled mansion mystery."""

    data_resource = resources.files("detectivequest.data").joinpath(
        "mansion_case.json"
    )
    with data_resource.open("r", encoding="utf-8") as handle:
        raw_data = json.load(handle)

    return load_case_from_mapping(raw_data, bucket_count=bucket_count)


__all__ = [
    "Case",
    "CaseFileError",
    "CaseFileModel",
    "load_case_from_file",
    "load_case_from_mapping",
    "load_default_case",
    "validate_case",
]
