"""Option storage backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

from attrmeta.storage.json_file import JsonFileOptionStore
from attrmeta.storage.memory import InMemoryOptionStore
from attrmeta.storage.protocol import OptionStore

if TYPE_CHECKING:
    from attrmeta.config import MetaStoreSettings


def create_option_store(settings: MetaStoreSettings) -> OptionStore:
    """Build the option store selected by settings.backend."""
    if settings.backend == "json":
        return JsonFileOptionStore(settings.storage_dir)
    return InMemoryOptionStore()


__all__ = [
    "OptionStore",
    "InMemoryOptionStore",
    "JsonFileOptionStore",
    "create_option_store",
]
