"""Attribute lifecycle and admin form events.

Each event mirrors a host hook:
    AttributeCreated  <- woocommerce_attribute_added
    AttributeUpdated  <- woocommerce_attribute_updated
    AttributeDeleted  <- woocommerce_attribute_deleted
    RenderAddField    <- woocommerce_after_add_attribute_fields
    RenderEditField   <- woocommerce_after_edit_attribute_fields
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from attrmeta.core.types import AttributeId


@dataclass(frozen=True, slots=True)
class AttributeCreated:
    """A product attribute was added.

    Attributes:
        attribute_id: Id of the new attribute.
        data: Attribute data as saved by the host (name, slug...).
    """

    attribute_id: AttributeId
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class AttributeUpdated:
    """A product attribute was edited.

    Attributes:
        attribute_id: Id of the edited attribute.
        data: Attribute data after the edit.
        old_slug: Slug before the edit.
    """

    attribute_id: AttributeId
    data: dict[str, Any] = field(default_factory=dict)
    old_slug: str = ""


@dataclass(frozen=True, slots=True)
class AttributeDeleted:
    """A product attribute was deleted.

    Attributes:
        attribute_id: Id of the deleted attribute.
        data: Attribute data before deletion.
        taxonomy: Taxonomy name of the attribute.
    """

    attribute_id: AttributeId
    data: dict[str, Any] = field(default_factory=dict)
    taxonomy: str = ""


@dataclass(frozen=True, slots=True)
class RenderAddField:
    """The "add attribute" form is being built."""


@dataclass(frozen=True, slots=True)
class RenderEditField:
    """The "edit attribute" form is being built for attribute_id."""

    attribute_id: AttributeId
