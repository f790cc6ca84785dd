"""Resolve per-page title, description, and keywords for web responses.

Controllers record an explicit metadata key and placeholder values for the
current request; templates then ask for the resolved metadata, which comes
from the language's ``lang/metadata_<language>.yaml`` table, selected by key,
by the reversed route of the request path, or by the ``default`` entry.

Exports
-------
- ``MetadataResolver``: records and resolves metadata for one request.
- ``RequestContext``: explicit per-request path, language, and registry.
- ``ConfigLoader``: reads YAML configuration resources.
- ``Router``: maps request paths back to route names.
- ``HeadRenderer``: renders resolved metadata as HTML head elements.
- ``app`` / ``main``: the ``page-meta`` Cyclopts application.

Examples
--------
>>> from pathlib import Path
>>> from page_meta import ConfigLoader, MetadataResolver, RequestContext, Router
>>> loader = ConfigLoader(Path("config"))  # doctest: +SKIP
>>> context = RequestContext(path="/about", language="en_GB")
>>> resolver = MetadataResolver.for_request(context, loader, Router())  # doctest: +SKIP
>>> resolver.get()["title"]  # doctest: +SKIP
'About us'
"""

from __future__ import annotations

from .cli import app, main
from .config import ConfigLoader, ConfigurationError, load_metadata_table
from .domains import Domains, RequestContext, load_domains
from .head import HeadRenderer
from .registry import Registry
from .resolver import MetadataNotFoundError, MetadataResolver
from .routing import Route, Router, load_router
from .state import MetadataState, SetKey, SetVar, apply_change

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "Domains",
    "HeadRenderer",
    "MetadataNotFoundError",
    "MetadataResolver",
    "MetadataState",
    "Registry",
    "RequestContext",
    "Route",
    "Router",
    "SetKey",
    "SetVar",
    "app",
    "apply_change",
    "load_domains",
    "load_metadata_table",
    "load_router",
    "main",
]
