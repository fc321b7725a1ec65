"""Runtime settings for the detective game read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


def _normalise_path(value: str | None) -> Path | None:
    if value is None:
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    return Path(trimmed).expanduser()


def _parse_positive_int(value: str | None, *, variable: str) -> int | None:
    if value is None:
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    try:
        parsed = int(trimmed)
    except ValueError as exc:
        raise ValueError(f"{variable} must be a positive integer.") from exc
    if parsed < 1:
        raise ValueError(f"{variable} must be greater than zero.")
    return parsed


@dataclass(frozen=True)
class GameSettings:
    """Settings that select which case is played and how it is indexed.

    ``case_path`` points at a JSON case file; when unset the bundled mansion
    case is used. ``bucket_count`` overrides the case file's hash table size.
    Empty environment variables are treated as unset.
    """

    case_path: Path | None = None
    bucket_count: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GameSettings":
        """Return settings populated from ``environ`` (default :data:`os.environ`)."""

        source = environ if environ is not None else os.environ

        return cls(
            case_path=_normalise_path(source.get("DETECTIVEQUEST_CASE_PATH")),
            bucket_count=_parse_positive_int(
                source.get("DETECTIVEQUEST_BUCKET_COUNT"),
                variable="DETECTIVEQUEST_BUCKET_COUNT",
            ),
        )


__all__ = ["GameSettings"]
