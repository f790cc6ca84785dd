"""Per-request metadata state and the changes that can be applied to it."""

from __future__ import annotations

import dataclasses as dc

from ._constants import PLACEHOLDER_TEMPLATE


@dc.dataclass(frozen=True, slots=True)
class MetadataState:
    """Metadata key and replacement variables recorded for one request."""

    metadata_key: str | None = None
    vars: dict[str, str] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class SetKey:
    """Select the metadata table entry explicitly."""

    value: str


@dc.dataclass(frozen=True, slots=True)
class SetVar:
    """Record a replacement for the placeholder ``name`` (``%...%`` included)."""

    name: str
    value: str


MetadataChange = SetKey | SetVar


def placeholder(name: str) -> str:
    """Return the placeholder token used in templates for ``name``."""
    return PLACEHOLDER_TEMPLATE.format(name=name)


def apply_change(state: MetadataState, change: MetadataChange) -> MetadataState:
    """Return a new state with ``change`` applied to ``state``.

    Parameters
    ----------
    state : MetadataState
        Current state; never modified.
    change : MetadataChange
        ``SetKey`` replaces the metadata key, ``SetVar`` adds or overwrites a
        single variable. Neither clears what the other recorded.

    Returns
    -------
    MetadataState
        The updated state.
    """
    match change:
        case SetKey(value=value):
            return dc.replace(state, metadata_key=value)
        case SetVar(name=name, value=value):
            return dc.replace(state, vars={**state.vars, name: value})
        case _:  # pragma: no cover - exhaustive over MetadataChange
            msg = f"Unsupported metadata change: {change!r}"
            raise TypeError(msg)


__all__ = [
    "MetadataChange",
    "MetadataState",
    "SetKey",
    "SetVar",
    "apply_change",
    "placeholder",
]
