"""Map concrete request paths back to the named routes that serve them.

Routes are declared in the ``router`` configuration resource as a mapping of
route name to URL pattern. Patterns are plain paths in which ``{param}``
segments stand for exactly one non-empty path segment:

.. code-block:: yaml

    home: /
    product: /products/{slug}
    product-reviews: /products/{slug}/reviews

:meth:`Router.get_reversal_route` returns the first declared route matching a
path, which the metadata resolver then uses as an implicit metadata key.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from urllib.parse import urlsplit

from ._constants import ROUTER_RESOURCE
from .config import ConfigLoader, ConfigurationError

PARAM_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _normalize_path(path: str) -> str:
    """Strip query/fragment and trailing slashes; an empty path becomes ``/``."""
    bare = urlsplit(path).path
    trimmed = bare.rstrip("/")
    if not trimmed:
        return "/"
    return trimmed if trimmed.startswith("/") else f"/{trimmed}"


def _compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a ``{param}`` route pattern into an anchored regular expression."""
    normalized = _normalize_path(pattern)
    parts: list[str] = []
    position = 0
    for match in PARAM_PATTERN.finditer(normalized):
        parts.append(re.escape(normalized[position : match.start()]))
        parts.append(f"(?P<{match.group(1)}>[^/]+)")
        position = match.end()
    parts.append(re.escape(normalized[position:]))
    return re.compile("".join(parts))


@dc.dataclass(slots=True)
class Route:
    """A named URL pattern."""

    name: str
    pattern: str
    _regex: re.Pattern[str] = dc.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the pattern once at construction."""
        self._regex = _compile_pattern(self.pattern)

    def matches(self, path: str) -> bool:
        """Return whether the already normalized ``path`` matches this route."""
        return self._regex.fullmatch(path) is not None


class Router:
    """Resolve request paths to route names in declaration order."""

    def __init__(self, routes: typ.Iterable[Route] = ()) -> None:
        """Initialize the router with ``routes``; earlier routes win."""
        self.routes = list(routes)

    @classmethod
    def from_mapping(cls, payload: typ.Mapping[str, typ.Any]) -> Router:
        """Build a router from a ``{name: pattern}`` mapping.

        Raises
        ------
        ConfigurationError
            If a pattern is not a string.
        """
        routes: list[Route] = []
        for name, pattern in payload.items():
            if not isinstance(pattern, str):
                msg = f"Route '{name}' pattern must be a string, got {pattern!r}."
                raise ConfigurationError(msg)
            routes.append(Route(name=str(name), pattern=pattern))
        return cls(routes)

    def get_reversal_route(self, path: str) -> str | None:
        """Return the name of the route serving ``path``, or ``None``."""
        normalized = _normalize_path(path)
        for route in self.routes:
            if route.matches(normalized):
                return route.name
        return None


def load_router(loader: ConfigLoader) -> Router:
    """Build a router from the ``router`` resource; absent resource means no routes."""
    if not loader.exists(ROUTER_RESOURCE):
        return Router()
    return Router.from_mapping(loader.get_config(ROUTER_RESOURCE))


__all__ = ["Route", "Router", "load_router"]
