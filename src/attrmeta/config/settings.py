"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from attrmeta.config import MetaStoreSettings

    # Load from environment variables (ATTRMETA_*)
    settings = MetaStoreSettings()

    # Or override with explicit values
    settings = MetaStoreSettings(backend="json", storage_dir="/var/lib/attrmeta")
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class MetaStoreSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the attribute metadata store and its admin handlers.

    Attributes:
        option_name: Name of the option slot holding the whole metadata blob.
        backend: Option storage backend (memory or json).
        storage_dir: Directory for the json backend.
        filter_meta_key: Meta key of the "use in filter" flag.
        form_field_name: Submitted form field carrying the checkbox value.
        add_capability: Capability required to save meta on attribute creation.
        edit_capability: Capability required to save meta on attribute update.
        delete_capability: Capability required to wipe meta on attribute deletion.

    Environment Variables:
        ATTRMETA_OPTION_NAME
        ATTRMETA_BACKEND
        ATTRMETA_STORAGE_DIR
        ATTRMETA_FILTER_META_KEY
        ATTRMETA_FORM_FIELD_NAME
        ATTRMETA_ADD_CAPABILITY
        ATTRMETA_EDIT_CAPABILITY
        ATTRMETA_DELETE_CAPABILITY
    """

    model_config = SettingsConfigDict(
        env_prefix="ATTRMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    option_name: str = "ssanzdev_wc_product_att_fields"
    backend: Literal["memory", "json"] = "memory"
    storage_dir: str = "options"
    filter_meta_key: str = "use_in_filter"
    form_field_name: str = "use_in_filter"
    add_capability: str = "manage_product_terms"
    edit_capability: str = "edit_product_terms"
    delete_capability: str = "delete_product_terms"
