"""Configuration module using Pydantic Settings.

Usage:
    from attrmeta.config import MetaStoreSettings

    settings = MetaStoreSettings(option_name="my_att_fields")
"""

from attrmeta.config.settings import MetaStoreSettings

__all__ = [
    "MetaStoreSettings",
]
