"""Types describing page metadata configuration structures."""

from __future__ import annotations

import typing as typ


class ConfigurationError(ValueError):
    """Raised when a configuration resource is missing, unreadable, or invalid."""


MetadataTemplate: typ.TypeAlias = dict[str, str]
"""Field name (``title``, ``description``...) to template string."""

MetadataTable: typ.TypeAlias = dict[str, MetadataTemplate]
"""Metadata key or route name to template; always holds a ``default`` entry."""


__all__ = ["ConfigurationError", "MetadataTable", "MetadataTemplate"]
