"""Attribute events and the bus that dispatches them."""

from attrmeta.events.bus import EventBus
from attrmeta.events.models import (
    AttributeCreated,
    AttributeDeleted,
    AttributeUpdated,
    RenderAddField,
    RenderEditField,
)

__all__ = [
    "EventBus",
    "AttributeCreated",
    "AttributeUpdated",
    "AttributeDeleted",
    "RenderAddField",
    "RenderEditField",
]
