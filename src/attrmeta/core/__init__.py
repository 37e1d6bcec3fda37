"""Core primitives: identifiers, meta types, and value coercion."""

from attrmeta.core.sanitize import sanitize_boolean
from attrmeta.core.types import (
    AttributeId,
    EntityMeta,
    MetaKey,
    MetaStore,
    MetaValue,
    normalize_attribute_id,
)

__all__ = [
    "AttributeId",
    "EntityMeta",
    "MetaKey",
    "MetaStore",
    "MetaValue",
    "normalize_attribute_id",
    "sanitize_boolean",
]
