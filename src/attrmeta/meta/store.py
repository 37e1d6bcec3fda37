"""Attribute metadata store.

Product attributes have no metadata table of their own, so all their meta
lives in one option as a nested mapping:

    {attribute_id: {meta_key: value}}

Every read loads the option; every write loads, mutates and saves the whole
blob. Concurrent writers race at blob level and the last save wins.

Usage:
    store = AttributeMetaStore(InMemoryOptionStore())
    store.update(42, "use_in_filter", True)
    store.get(42, "use_in_filter")   # True
    store.get(42)                    # {"use_in_filter": True}
    store.delete(42)
"""

from __future__ import annotations

import copy as cp
import logging
from collections.abc import Mapping
from typing import Any

from attrmeta.config import MetaStoreSettings
from attrmeta.core.types import (
    AttributeId,
    EntityMeta,
    MetaKey,
    MetaStore,
    MetaValue,
    normalize_attribute_id,
)
from attrmeta.storage import OptionStore, create_option_store

logger = logging.getLogger(__name__)

DEFAULT_OPTION_NAME: str = MetaStoreSettings.model_fields["option_name"].default


class AttributeMetaStore:
    """CRUD access to per-attribute metadata bags kept in a single option.

    Security checks are left to callers, as with any metadata API. Attribute
    ids may be given as ints or digit strings; "42" and 42 name the same bag.

    Args:
        options: Option storage backend holding the blob.
        option_name: Name of the option slot.
    """

    def __init__(self, options: OptionStore, option_name: str = DEFAULT_OPTION_NAME):
        self._options = options
        self.option_name = option_name

    @classmethod
    def from_settings(cls, settings: MetaStoreSettings | None = None) -> AttributeMetaStore:
        """Build a store on the backend and option name from settings."""
        settings = settings or MetaStoreSettings()
        return cls(create_option_store(settings), option_name=settings.option_name)

    def load(self) -> MetaStore:
        """Load the whole metadata blob.

        Never raises: an absent option or one that is not a mapping reads as
        an empty store. Malformed entries are dropped.

        Returns:
            Mapping of attribute id to its meta bag.
        """
        raw = self._options.load_option(self.option_name)
        if not isinstance(raw, Mapping):
            if raw is not None:
                logger.warning(
                    "Option %s holds %s, not a mapping; treating as empty",
                    self.option_name,
                    type(raw).__name__,
                )
            return {}

        blob: MetaStore = {}
        for raw_id, bag in raw.items():
            attribute_id = normalize_attribute_id(raw_id)
            if attribute_id is None or not isinstance(bag, Mapping):
                logger.warning("Dropping malformed meta entry %r in %s", raw_id, self.option_name)
                continue
            blob[attribute_id] = dict(bag)
        return blob

    get_all = load

    def save(self, blob: MetaStore) -> None:
        """Replace the persisted blob with blob."""
        self._options.save_option(self.option_name, blob)
        logger.debug("Persisted metadata for %d attributes to %s", len(blob), self.option_name)

    def get(
        self,
        attribute_id: AttributeId,
        meta_key: MetaKey | None = None,
        default: Any = False,
    ) -> MetaValue | EntityMeta:
        """Get attribute metadata.

        Args:
            attribute_id: Product attribute id.
            meta_key: Key to retrieve. If empty, returns the whole bag.
            default: Returned when meta_key is given but not set.

        Returns:
            The bag (empty dict if none) when meta_key is empty, otherwise
            the stored value or default.
        """
        attribute_id = normalize_attribute_id(attribute_id)
        bag = self.load().get(attribute_id) if attribute_id is not None else None
        if not meta_key:
            return cp.deepcopy(bag) if bag is not None else {}
        if bag is None or meta_key not in bag:
            return default
        return bag[meta_key]

    def has(self, attribute_id: AttributeId, meta_key: MetaKey | None = None) -> bool:
        """Check whether an attribute has a bag, or a given key, stored.

        Unlike get(), tells a stored False apart from a key never set.
        """
        attribute_id = normalize_attribute_id(attribute_id)
        bag = self.load().get(attribute_id) if attribute_id is not None else None
        if bag is None:
            return False
        return not meta_key or meta_key in bag

    def update(self, attribute_id: AttributeId, meta_key: MetaKey, value: MetaValue) -> None:
        """Set meta_key to value for the attribute, overwriting any prior value.

        Raises:
            ValueError: If the id is not a positive integer or the key is empty.
        """
        normalized = normalize_attribute_id(attribute_id)
        if normalized is None:
            raise ValueError(f"Attribute id must be a positive integer, got {attribute_id!r}")
        if not meta_key:
            raise ValueError("meta_key must be a non-empty string")

        blob = self.load()
        blob.setdefault(normalized, {})[meta_key] = value
        self.save(blob)

    def delete(self, attribute_id: AttributeId, meta_key: MetaKey | None = None) -> None:
        """Delete attribute metadata.

        With no meta_key, removes the attribute's whole bag. Missing entries
        are a no-op. The blob is saved either way.
        """
        attribute_id = normalize_attribute_id(attribute_id)
        blob = self.load()
        if not meta_key:
            blob.pop(attribute_id, None)
        elif attribute_id in blob:
            blob[attribute_id].pop(meta_key, None)
        self.save(blob)
