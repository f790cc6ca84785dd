"""Load YAML configuration resources from a configuration directory."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .._constants import CONFIG_SUFFIX, DEFAULT_ENTRY, METADATA_RESOURCE_TEMPLATE
from .models import ConfigurationError, MetadataTable


class ConfigLoader:
    """Read and cache named configuration resources stored as YAML files.

    A resource name such as ``lang/metadata_es_ES`` maps to the file
    ``<root>/lang/metadata_es_ES.yaml``. Each resource is parsed once and
    served from the cache afterwards.
    """

    def __init__(self, root: Path) -> None:
        """Initialize a loader rooted at ``root``."""
        self.root = root
        self._cache: dict[str, dict[str, typ.Any]] = {}

    def resource_path(self, resource: str) -> Path:
        """Return the filesystem path backing ``resource``."""
        return self.root / f"{resource}{CONFIG_SUFFIX}"

    def exists(self, resource: str) -> bool:
        """Return whether ``resource`` is available on disk or in the cache."""
        return resource in self._cache or self.resource_path(resource).is_file()

    def get_config(self, resource: str) -> dict[str, typ.Any]:
        """Return the parsed mapping stored in ``resource``.

        Parameters
        ----------
        resource : str
            Resource name relative to the loader root, without suffix.

        Returns
        -------
        dict[str, Any]
            Top-level mapping of the YAML document; an empty document loads as
            an empty mapping.

        Raises
        ------
        ConfigurationError
            If the resource file does not exist, cannot be parsed, or its
            top-level structure is not a mapping.
        """
        if resource in self._cache:
            return self._cache[resource]

        path = self.resource_path(resource)
        if not path.is_file():
            msg = f"Configuration resource '{resource}' not found at '{path}'."
            raise ConfigurationError(msg)

        loader = YAML(typ="safe")
        loader.version = (1, 2)
        try:
            with path.open("r", encoding="utf-8") as handle:
                loaded = loader.load(handle)
        except YAMLError as exc:
            msg = f"Configuration resource '{resource}' is not valid YAML: {exc}"
            raise ConfigurationError(msg) from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            msg = f"Top-level YAML structure of '{resource}' must be a mapping."
            raise ConfigurationError(msg)

        config: dict[str, typ.Any] = dict(loaded)
        self._cache[resource] = config
        return config

    def clear_cache(self) -> None:
        """Forget every parsed resource so the next read hits the disk."""
        self._cache.clear()


def load_metadata_table(loader: ConfigLoader, language: str) -> MetadataTable:
    """Return the metadata table configured for ``language``.

    Raises
    ------
    ConfigurationError
        If ``lang/metadata_<language>`` is missing or invalid, or if it does
        not define the ``default`` entry.
    """
    resource = METADATA_RESOURCE_TEMPLATE.format(language=language)
    table = loader.get_config(resource)
    if DEFAULT_ENTRY not in table:
        msg = f"Metadata resource '{resource}' has no '{DEFAULT_ENTRY}' entry."
        raise ConfigurationError(msg)
    return typ.cast(MetadataTable, table)


__all__ = ["ConfigLoader", "load_metadata_table"]
