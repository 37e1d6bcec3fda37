"""attrmeta: metadata storage for product attributes.

Product attributes have no native metadata API, so their meta is kept in
one option blob keyed by attribute id and meta key.

Usage:
    from attrmeta import AttributeMetaStore, InMemoryOptionStore

    store = AttributeMetaStore(InMemoryOptionStore())
    store.update(42, "use_in_filter", True)
    store.get(42, "use_in_filter")   # True
    store.get(99, "use_in_filter")   # False
    store.delete(42)
"""

__version__ = "0.1.0"

# Admin integration
from attrmeta.admin import (
    AttributeFieldHandlers,
    Authorizer,
    CheckboxField,
    InvalidNonceError,
    RequestValidator,
    register_handlers,
)

# Configuration
from attrmeta.config import MetaStoreSettings

# Core primitives
from attrmeta.core import AttributeId, EntityMeta, MetaStore, sanitize_boolean

# Events
from attrmeta.events import (
    AttributeCreated,
    AttributeDeleted,
    AttributeUpdated,
    EventBus,
    RenderAddField,
    RenderEditField,
)

# Filter selection
from attrmeta.filters import ProductAttribute, get_filter_attributes

# Store
from attrmeta.meta import AttributeMetaStore

# Storage
from attrmeta.storage import (
    InMemoryOptionStore,
    JsonFileOptionStore,
    OptionStore,
    create_option_store,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "AttributeId",
    "EntityMeta",
    "MetaStore",
    "sanitize_boolean",
    # Store
    "AttributeMetaStore",
    # Storage
    "OptionStore",
    "InMemoryOptionStore",
    "JsonFileOptionStore",
    "create_option_store",
    # Events
    "EventBus",
    "AttributeCreated",
    "AttributeUpdated",
    "AttributeDeleted",
    "RenderAddField",
    "RenderEditField",
    # Admin
    "AttributeFieldHandlers",
    "Authorizer",
    "RequestValidator",
    "InvalidNonceError",
    "CheckboxField",
    "register_handlers",
    # Config
    "MetaStoreSettings",
    # Filters
    "ProductAttribute",
    "get_filter_attributes",
]
