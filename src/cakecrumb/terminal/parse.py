# SPDX-License-Identifier: MIT

import typer

from cakecrumb.model.entity_id import EntityId


def resolve_id(value: str, candidates: list[EntityId], entity_name: str) -> EntityId:
    """
    Resolve a full id or a unique id prefix against known ids.

    An id matching nothing is returned unchanged so the engine can treat it as
    unknown. A prefix matching several ids is rejected.
    """
    if value in candidates:
        return value

    matches = [candidate for candidate in candidates if candidate.startswith(value)]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise typer.BadParameter(
            f"{value!r} matches {len(matches)} {entity_name}s, use more characters"
        )
    return value
