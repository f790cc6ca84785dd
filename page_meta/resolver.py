"""Resolve page metadata (title, description, keywords) for a request.

Request handling code records an optional metadata key and any number of
replacement variables; rendering code later asks for the resolved metadata,
which is picked from the language's metadata table and has its ``%name%``
placeholders substituted.

Typical usage spans two phases of one request:

>>> resolver = MetadataResolver.for_request(context, loader, router)  # doctest: +SKIP
>>> resolver.set_key("test")  # doctest: +SKIP
>>> resolver.set_values("name", "Test name")  # doctest: +SKIP
>>> resolver.set_values("section", "Test section")  # doctest: +SKIP
>>> resolver.get()  # doctest: +SKIP
{'title': 'Test name - Test section. Brand'}

With ``lang/metadata_<language>.yaml`` containing:

.. code-block:: yaml

    default:
      title: Home
    test:
      title: "%name% - %section%. Brand"
"""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ

from ._constants import DEFAULT_ENTRY, METADATA_SLOT
from .config import ConfigLoader, MetadataTable, load_metadata_table
from .state import MetadataChange, MetadataState, SetKey, SetVar, apply_change, placeholder

if typ.TYPE_CHECKING:
    from .domains import RequestContext
    from .registry import Registry


class MetadataNotFoundError(KeyError):
    """Raised when the explicit metadata key is missing from the metadata table."""


class LanguageResolver(typ.Protocol):
    """Provide the language code of the current request."""

    def get_language(self) -> str: ...


class RequestPathProvider(typ.Protocol):
    """Provide the path of the current request."""

    def get_path(self) -> str: ...


class RouteReverser(typ.Protocol):
    """Map a concrete path back to the name of the route serving it."""

    def get_reversal_route(self, path: str) -> str | None: ...


NO_MATCH: typ.Final = object()
"""Returned by a selection strategy that does not apply to the request."""

SelectionStrategy = cabc.Callable[[MetadataState, MetadataTable], typ.Any]


class MetadataResolver:
    """Record metadata choices for a request and resolve them on demand."""

    def __init__(
        self,
        *,
        registry: Registry,
        config_loader: ConfigLoader,
        language_resolver: LanguageResolver,
        path_provider: RequestPathProvider,
        route_reverser: RouteReverser,
    ) -> None:
        """Wire the resolver to its per-request and shared collaborators."""
        self.registry = registry
        self.config_loader = config_loader
        self.language_resolver = language_resolver
        self.path_provider = path_provider
        self.route_reverser = route_reverser
        self._strategies: tuple[SelectionStrategy, ...] = (
            self._select_by_key,
            self._select_by_route,
            self._select_default,
        )

    @classmethod
    def for_request(
        cls,
        context: RequestContext,
        config_loader: ConfigLoader,
        route_reverser: RouteReverser,
    ) -> MetadataResolver:
        """Build a resolver backed by ``context`` for path, language, and state."""
        return cls(
            registry=context.registry,
            config_loader=config_loader,
            language_resolver=context,
            path_provider=context,
            route_reverser=route_reverser,
        )

    def set_key(self, key: str) -> None:
        """Select the metadata table entry ``key`` for this request.

        The key is not checked against the table until :meth:`get`.
        """
        self.set(SetKey(key))

    def set_values(self, var_name: str, value: str | cabc.Mapping[str, str]) -> None:
        """Record replacement values for ``%var_name%`` placeholders.

        Parameters
        ----------
        var_name : str
            Placeholder name without the surrounding ``%``. Ignored when
            ``value`` is a mapping.
        value : str or Mapping[str, str]
            Replacement text, or a mapping whose keys are used as placeholder
            names.
        """
        if isinstance(value, cabc.Mapping):
            for name, replacement in value.items():
                self.set(SetVar(placeholder(str(name)), str(replacement)))
        else:
            self.set(SetVar(placeholder(var_name), str(value)))

    def set(self, change: MetadataChange) -> None:
        """Apply ``change`` to the state stored in the registry."""
        state = self._get_metadata_information()
        self.registry.set(METADATA_SLOT, apply_change(state, change))

    def get(self) -> typ.Any:
        """Return the metadata fields for the current request.

        The table entry is chosen by the explicit metadata key, then by the
        reversed route of the request path, then ``default``. Placeholders
        with a recorded value are substituted; others are left verbatim.

        Returns
        -------
        dict[str, Any]
            Field name to resolved value. A malformed (non-mapping) entry is
            returned untouched.

        Raises
        ------
        ConfigurationError
            If the language's metadata table is missing or invalid.
        MetadataNotFoundError
            If an explicit metadata key is set but absent from the table.
        """
        info = self._get_metadata_information()
        table = load_metadata_table(
            self.config_loader, self.language_resolver.get_language()
        )
        selected: typ.Any = NO_MATCH
        for strategy in self._strategies:
            selected = strategy(info, table)
            if selected is not NO_MATCH:
                break
        if isinstance(selected, cabc.Mapping):
            selected = dict(selected)
        return self._replace_vars(selected, info)

    def _select_by_key(
        self, info: MetadataState, table: MetadataTable
    ) -> typ.Any:
        if info.metadata_key is None:
            return NO_MATCH
        try:
            return table[info.metadata_key]
        except KeyError as exc:
            msg = f"Metadata key '{info.metadata_key}' is not defined."
            raise MetadataNotFoundError(msg) from exc

    def _select_by_route(
        self, info: MetadataState, table: MetadataTable
    ) -> typ.Any:
        route = self.route_reverser.get_reversal_route(self.path_provider.get_path())
        if route and route in table:
            return table[route]
        return NO_MATCH

    @staticmethod
    def _select_default(
        info: MetadataState, table: MetadataTable
    ) -> typ.Any:
        return table[DEFAULT_ENTRY]

    @staticmethod
    def _replace_vars(metadata: typ.Any, info: MetadataState) -> typ.Any:
        """Substitute recorded variables into every string field of ``metadata``.

        Replacement is a single pass that prefers the longest placeholder at
        each position; substituted text is never scanned again.
        """
        if not isinstance(metadata, dict):
            return metadata
        replacements = {token: value for token, value in info.vars.items() if token}
        if not replacements:
            return metadata
        pattern = re.compile(
            "|".join(
                re.escape(token)
                for token in sorted(replacements, key=len, reverse=True)
            )
        )
        return {
            name: pattern.sub(lambda match: replacements[match.group(0)], value)
            if isinstance(value, str)
            else value
            for name, value in metadata.items()
        }

    def _get_metadata_information(self) -> MetadataState:
        state = self.registry.get(METADATA_SLOT)
        if isinstance(state, MetadataState):
            return state
        if isinstance(state, cabc.Mapping):
            return MetadataState(
                metadata_key=state.get("metadata_key"),
                vars=dict(state.get("vars") or {}),
            )
        return MetadataState()


__all__ = [
    "LanguageResolver",
    "MetadataNotFoundError",
    "MetadataResolver",
    "RequestPathProvider",
    "RouteReverser",
]
