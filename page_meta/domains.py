"""Resolve the request language and carry per-request collaborators."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import DOMAINS_RESOURCE
from .config import ConfigLoader, ConfigurationError
from .registry import Registry


@dc.dataclass(slots=True)
class RequestContext:
    """Explicit per-request context handed from controllers to renderers.

    Provides the current request path and language, and owns the registry in
    which metadata state is recorded for the request.
    """

    path: str
    language: str
    registry: Registry = dc.field(default_factory=Registry)

    def get_path(self) -> str:
        """Return the request path."""
        return self.path

    def get_language(self) -> str:
        """Return the language code resolved for the request."""
        return self.language


def _normalize_host(host: str) -> str:
    """Lower-case ``host`` and drop any port suffix."""
    return host.strip().lower().partition(":")[0]


@dc.dataclass(slots=True)
class Domains:
    """Map request hosts to language codes."""

    languages: dict[str, str] = dc.field(default_factory=dict)
    default_language: str | None = None

    @classmethod
    def from_mapping(cls, payload: typ.Mapping[str, typ.Any]) -> Domains:
        """Build from ``{default_language: str, hosts: {host: language}}``."""
        hosts = payload.get("hosts") or {}
        if not isinstance(hosts, dict):
            msg = "Domains 'hosts' must be a mapping of host to language."
            raise ConfigurationError(msg)
        default_language = payload.get("default_language")
        if default_language is not None and not isinstance(default_language, str):
            msg = "Domains 'default_language' must be a string."
            raise ConfigurationError(msg)
        return cls(
            languages={_normalize_host(str(host)): str(lang) for host, lang in hosts.items()},
            default_language=default_language,
        )

    def get_language(self, host: str | None = None) -> str:
        """Return the language configured for ``host``.

        A leading ``www.`` is ignored when only the bare host is declared.
        Unknown or missing hosts fall back to ``default_language``.

        Raises
        ------
        ConfigurationError
            If neither the host nor a default language resolves.
        """
        if host:
            normalized = _normalize_host(host)
            if normalized in self.languages:
                return self.languages[normalized]
            bare = normalized.removeprefix("www.")
            if bare in self.languages:
                return self.languages[bare]
        if self.default_language:
            return self.default_language
        msg = f"No language configured for host {host!r} and no default language."
        raise ConfigurationError(msg)


def load_domains(loader: ConfigLoader) -> Domains:
    """Build :class:`Domains` from the ``domains`` resource, empty when absent."""
    if not loader.exists(DOMAINS_RESOURCE):
        return Domains()
    return Domains.from_mapping(loader.get_config(DOMAINS_RESOURCE))


__all__ = ["Domains", "RequestContext", "load_domains"]
