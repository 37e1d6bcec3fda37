"""Type aliases for the attribute metadata blob.

Shape of the persisted blob:
    {attribute_id: {meta_key: value, ...}, ...}
"""

from __future__ import annotations

from typing import Any

AttributeId = int
MetaKey = str
MetaValue = Any
EntityMeta = dict[MetaKey, MetaValue]
MetaStore = dict[AttributeId, EntityMeta]


def normalize_attribute_id(value: Any) -> AttributeId | None:
    """Coerce a raw attribute id to a positive int.

    Accepts ints and digit strings (JSON object keys come back as strings).

    Returns:
        The id, or None if value is not a positive integer.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isdigit() and int(stripped) > 0:
            return int(stripped)
    return None
