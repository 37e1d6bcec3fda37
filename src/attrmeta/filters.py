"""Selecting product attributes for the store's product filter.

Usage:
    attributes = [ProductAttribute(1, "color", "Color"), ProductAttribute(2, "size", "Size")]
    shown = get_filter_attributes(attributes, store)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from attrmeta.config import MetaStoreSettings
from attrmeta.core.sanitize import sanitize_boolean
from attrmeta.core.types import AttributeId, normalize_attribute_id
from attrmeta.meta.store import AttributeMetaStore


@dataclass(frozen=True, slots=True)
class ProductAttribute:
    """Product attribute as listed by the host shop."""

    attribute_id: AttributeId
    attribute_name: str
    attribute_label: str = ""


def get_filter_attributes(
    attributes: Iterable[ProductAttribute],
    store: AttributeMetaStore,
    settings: MetaStoreSettings | None = None,
) -> list[ProductAttribute]:
    """Keep the attributes flagged for use in the product filter.

    The flag is read from settings.filter_meta_key, the key the admin
    handlers write, and must sanitize to True. The blob is loaded once for
    the whole listing. Order is preserved.
    """
    meta_key = (settings or MetaStoreSettings()).filter_meta_key
    blob = store.load()
    return [
        attribute
        for attribute in attributes
        if sanitize_boolean(
            blob.get(normalize_attribute_id(attribute.attribute_id), {}).get(meta_key, False)
        )
    ]
