"""Request-scoped key/value store shared along the request handling chain."""

from __future__ import annotations

import typing as typ


class Registry:
    """Hold values for the lifetime of a single request.

    One registry is created per request and handed explicitly to whichever
    components need it (controllers, renderers), so nothing is looked up
    from process-wide state.
    """

    def __init__(self, values: typ.Mapping[str, typ.Any] | None = None) -> None:
        """Initialize the registry with optional seed values."""
        self._values: dict[str, typ.Any] = dict(values or {})

    def get(self, slot: str, default: typ.Any = None) -> typ.Any:
        """Return the value stored in ``slot`` or ``default`` when absent."""
        return self._values.get(slot, default)

    def set(self, slot: str, value: typ.Any) -> None:
        """Store ``value`` in ``slot``, replacing any previous value."""
        self._values[slot] = value

    def exists(self, slot: str) -> bool:
        """Return whether ``slot`` holds a value."""
        return slot in self._values

    def clear(self) -> None:
        """Drop every stored value; called by the owner when the scope ends."""
        self._values.clear()


__all__ = ["Registry"]
