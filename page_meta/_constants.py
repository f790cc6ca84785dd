"""Common literal values used across page_meta.

These constants keep the registry slot, configuration resource names, and
placeholder shape centralized so the resolver, loaders, and tests import the
same values without drifting. Intended for internal use within the
page_meta package.

Examples
--------
>>> from page_meta import _constants
>>> _constants.METADATA_RESOURCE_TEMPLATE.format(language="es_ES")
'lang/metadata_es_ES'
>>> _constants.PLACEHOLDER_TEMPLATE.format(name="section")
'%section%'
"""

METADATA_SLOT = "metadata_information"
METADATA_RESOURCE_TEMPLATE = "lang/metadata_{language}"
DEFAULT_ENTRY = "default"
PLACEHOLDER_TEMPLATE = "%{name}%"
CONFIG_SUFFIX = ".yaml"
ROUTER_RESOURCE = "router"
DOMAINS_RESOURCE = "domains"
