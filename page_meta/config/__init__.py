"""Load page metadata configuration from YAML resources.

This subpackage reads the per-language metadata tables
(``lang/metadata_<language>.yaml``) together with the ``router`` and
``domains`` resources that the resolver consumes. The primary entry points
are :class:`ConfigLoader`, which maps resource names onto YAML files below a
configuration directory, and :func:`load_metadata_table`, which additionally
checks that the mandatory ``default`` entry is present.

Examples
--------
>>> from pathlib import Path
>>> from page_meta.config import ConfigLoader, load_metadata_table
>>> loader = ConfigLoader(Path("config"))  # doctest: +SKIP
>>> load_metadata_table(loader, "es_ES")["default"]  # doctest: +SKIP
{'title': 'Inicio'}
"""

from .loader import ConfigLoader, load_metadata_table
from .models import ConfigurationError, MetadataTable, MetadataTemplate

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "MetadataTable",
    "MetadataTemplate",
    "load_metadata_table",
]
