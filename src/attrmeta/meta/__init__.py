"""Attribute metadata store."""

from attrmeta.meta.store import DEFAULT_OPTION_NAME, AttributeMetaStore

__all__ = [
    "AttributeMetaStore",
    "DEFAULT_OPTION_NAME",
]
