"""Render resolved page metadata into an HTML ``<head>`` fragment.

The fragment holds a ``<title>`` element for the ``title`` field and one
``<meta name=... content=...>`` element for every other string field, in the
order the fields appear in the metadata table. Values are HTML-escaped by
Jinja's autoescape.

>>> HeadRenderer().render({"title": "Home", "description": "Welcome"})  # doctest: +SKIP
'<title>Home</title>\\n<meta name="description" content="Welcome">\\n'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .config import ConfigurationError


class HeadRenderer:
    """Render metadata fields through the ``metadata_head.jinja`` template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer and Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``metadata_head.jinja``. Defaults to the
            templates shipped inside the package.
        """
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("metadata_head.jinja")

    def render(self, metadata: typ.Mapping[str, typ.Any]) -> str:
        """Return the head fragment for ``metadata``, newline terminated.

        Raises
        ------
        ConfigurationError
            If ``metadata`` is not a mapping, which happens when the selected
            metadata table entry is malformed.
        """
        if not isinstance(metadata, cabc.Mapping):
            msg = f"Metadata entry must be a mapping of fields, got {metadata!r}."
            raise ConfigurationError(msg)
        html = self.template.render(metadata=metadata)
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["HeadRenderer"]
