"""Cyclopts CLI entrypoint for inspecting resolved page metadata.

The ``page-meta`` console script defined here resolves the metadata a page
would receive for a given request path and language, optionally forcing a
metadata key and supplying placeholder values, exactly as controllers do at
request time. It is useful when authoring ``lang/metadata_<language>.yaml``
tables or checking which route a path reverses to.

Examples
--------
Show the metadata for a product page in Spanish:

>>> from page_meta.cli import app
>>> app.run(
...     ["show", "--path", "/products/42", "--language", "es_ES",
...      "--value", "name=Lamp"]
... )  # doctest: +SKIP

Render the HTML head fragment for an explicit metadata key:

>>> app.run(["head", "--key", "test", "--host", "example.es"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import ConfigLoader
from .domains import RequestContext, load_domains
from .head import HeadRenderer
from .resolver import MetadataResolver
from .routing import load_router

DEFAULT_CONFIG_DIR = Path("config")

app = App(name="page-meta", config=cyclopts.config.Env("PAGE_META_", command=False))  # type: ignore[unknown-argument]


def _parse_values(items: typ.Iterable[str]) -> dict[str, str]:
    """Parse ``name=value`` items into a mapping; later items win.

    Raises
    ------
    ValueError
        If an item has no ``=`` or an empty name.
    """
    values: dict[str, str] = {}
    for item in items:
        name, separator, value = item.partition("=")
        if not separator or not name.strip():
            msg = f"Expected NAME=VALUE, got {item!r}."
            raise ValueError(msg)
        values[name.strip()] = value
    return values


def _resolve_metadata(
    *,
    config_dir: Path,
    path: str,
    language: str | None,
    host: str | None,
    key: str | None,
    values: typ.Iterable[str],
) -> typ.Any:
    """Run one simulated request through the resolver and return its metadata."""
    loader = ConfigLoader(config_dir)
    if language is None:
        language = load_domains(loader).get_language(host)
    context = RequestContext(path=path, language=language)
    resolver = MetadataResolver.for_request(context, loader, load_router(loader))
    if key is not None:
        resolver.set_key(key)
    resolver.set_values("", _parse_values(values))
    return resolver.get()


@app.command(help="Print the resolved metadata for a request as JSON.")
def show(
    *,
    path: typ.Annotated[str, Parameter(help="Request path")] = "/",
    language: typ.Annotated[
        str | None, Parameter(help="Language code, e.g. es_ES")
    ] = None,
    host: typ.Annotated[
        str | None, Parameter(help="Request host used to pick the language")
    ] = None,
    key: typ.Annotated[str | None, Parameter(help="Explicit metadata key")] = None,
    value: typ.Annotated[
        list[str] | None, Parameter(help="Placeholder value as NAME=VALUE")
    ] = None,
    config_dir: typ.Annotated[
        Path, Parameter(help="Directory holding the YAML resources")
    ] = DEFAULT_CONFIG_DIR,
) -> None:
    """Resolve metadata and print it as indented JSON.

    Parameters
    ----------
    path : str, optional
        Request path used for route reversal; defaults to ``/``.
    language : str or None, optional
        Language code of the metadata table. When ``None`` the language is
        resolved from ``host`` through the ``domains`` resource.
    host : str or None, optional
        Request host; only consulted when ``language`` is not given.
    key : str or None, optional
        Metadata key overriding route-based selection.
    value : list[str] or None, optional
        Repeated ``NAME=VALUE`` placeholder values.
    config_dir : Path, optional
        Configuration directory; defaults to ``config``.

    Raises
    ------
    ConfigurationError
        If a required resource is missing or invalid, or no language can be
        resolved.
    MetadataNotFoundError
        If ``key`` is not defined in the metadata table.
    ValueError
        If a ``value`` item is not of the form ``NAME=VALUE``.
    """
    metadata = _resolve_metadata(
        config_dir=config_dir,
        path=path,
        language=language,
        host=host,
        key=key,
        values=value or [],
    )
    print(json.dumps(metadata, indent=2, ensure_ascii=False))


@app.command(help="Print the HTML head fragment for a request.")
def head(
    *,
    path: typ.Annotated[str, Parameter(help="Request path")] = "/",
    language: typ.Annotated[
        str | None, Parameter(help="Language code, e.g. es_ES")
    ] = None,
    host: typ.Annotated[
        str | None, Parameter(help="Request host used to pick the language")
    ] = None,
    key: typ.Annotated[str | None, Parameter(help="Explicit metadata key")] = None,
    value: typ.Annotated[
        list[str] | None, Parameter(help="Placeholder value as NAME=VALUE")
    ] = None,
    config_dir: typ.Annotated[
        Path, Parameter(help="Directory holding the YAML resources")
    ] = DEFAULT_CONFIG_DIR,
) -> None:
    """Resolve metadata and print it as ``<title>``/``<meta>`` elements."""
    metadata = _resolve_metadata(
        config_dir=config_dir,
        path=path,
        language=language,
        host=host,
        key=key,
        values=value or [],
    )
    print(HeadRenderer().render(metadata), end="")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``page-meta`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
