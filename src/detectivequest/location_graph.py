"""The fixed binary layout of rooms the detective can walk through."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping


@dataclass(frozen=True)
class Location:
    """A named room with up to two exits.

    Each child is owned by exactly one parent, so the structure is always a
    tree rooted at the location returned by :func:`build_location_graph`.
    """

    name: str
    left: "Location | None" = None
    right: "Location | None" = None


def _validate_name(value: Any, *, path: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Room at '{path}' must define a string 'name'.")

    stripped = value.strip()
    if not stripped:
        raise ValueError(f"Room at '{path}' must define a non-empty 'name'.")
    return stripped


def build_location_graph(definition: Mapping[str, Any]) -> Location:
    """Build the room tree described by ``definition`` and return its root.

    ``definition`` is a nested mapping where every room provides a ``name``
    and optional ``left``/``right`` mappings of the same shape. Room names
    must be unique because they key the room-to-clue table.

    Raises:
        ValueError: If a room is malformed or a name appears twice.
    """

    if not isinstance(definition, Mapping):
        raise ValueError("The room layout must be an object definition.")

    # Children must exist before their frozen parent, so rooms are first
    # collected in pre-order and then assembled from the deepest ones up.
    ordered: list[tuple[str, Mapping[str, Any]]] = []
    seen_names: set[str] = set()
    frontier: list[tuple[str, Mapping[str, Any]]] = [("root", definition)]

    while frontier:
        path, payload = frontier.pop()
        name = _validate_name(payload.get("name"), path=path)
        if name in seen_names:
            raise ValueError(f"Room name '{name}' is defined more than once.")
        seen_names.add(name)
        ordered.append((path, payload))

        for side in ("right", "left"):
            child = payload.get(side)
            if child is None:
                continue
            if not isinstance(child, Mapping):
                raise ValueError(
                    f"Room '{name}' must define '{side}' as an object or null."
                )
            frontier.append((f"{path}.{side}", child))

    built: dict[str, Location] = {}
    for path, payload in reversed(ordered):
        built[path] = Location(
            name=payload["name"].strip(),
            left=built.get(f"{path}.left"),
            right=built.get(f"{path}.right"),
        )

    return built["root"]


def children(node: Location) -> tuple[Location | None, Location | None]:
    """Return the ``(left, right)`` exits of ``node``."""

    return node.left, node.right


def iter_locations(root: Location) -> Iterator[Location]:
    """Yield every room below ``root`` (inclusive) in pre-order."""

    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        left, right = children(node)
        if right is not None:
            stack.append(right)
        if left is not None:
            stack.append(left)


__all__ = ["Location", "build_location_graph", "children", "iter_locations"]
