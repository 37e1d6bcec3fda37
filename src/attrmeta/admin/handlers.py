"""Admin hook handlers for the "use in filter" attribute field.

One AttributeFieldHandlers instance serves one admin request: it carries
the submitted form and answers the render and lifecycle events raised while
the request runs.

Usage:
    handlers = AttributeFieldHandlers(store, authorizer, validator, form=request.form)
    register_handlers(bus, handlers)
    bus.publish(AttributeUpdated(attribute_id=7, data={...}, old_slug="color"))
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from attrmeta.admin.fields import FIELD_ID, CheckboxField
from attrmeta.admin.protocol import Authorizer, RequestValidator
from attrmeta.config import MetaStoreSettings
from attrmeta.core.sanitize import sanitize_boolean
from attrmeta.events import (
    AttributeCreated,
    AttributeDeleted,
    AttributeUpdated,
    EventBus,
    RenderAddField,
    RenderEditField,
)
from attrmeta.meta.store import AttributeMetaStore

logger = logging.getLogger(__name__)

ADD_NONCE_ACTION = "woocommerce-add-new_attribute"
SAVE_NONCE_ACTION = "woocommerce-save-attribute_{id}"
DELETE_NONCE_ACTION = "woocommerce-delete-attribute_{id}"


class AttributeFieldHandlers:
    """Reads and writes the filter flag in response to admin events.

    Each write handler validates the request token first (a bad token raises
    and halts the request), then checks the capability (a denial returns
    without touching the store).

    Args:
        store: Metadata store to read and write.
        authorizer: Capability checks for the current user.
        validator: CSRF token validation for the current request.
        form: Submitted form fields of the current request.
        settings: Field and capability names. Defaults from environment.
    """

    def __init__(
        self,
        store: AttributeMetaStore,
        authorizer: Authorizer,
        validator: RequestValidator,
        form: Mapping[str, Any] | None = None,
        settings: MetaStoreSettings | None = None,
    ):
        self._store = store
        self._authorizer = authorizer
        self._validator = validator
        self._form = form or {}
        self._settings = settings or MetaStoreSettings()

    def _submitted_flag(self) -> bool:
        return sanitize_boolean(self._form.get(self._settings.form_field_name, False))

    def _save_flag(self, attribute_id: int) -> None:
        key = self._settings.filter_meta_key
        if self._submitted_flag():
            self._store.update(attribute_id, key, True)
        else:
            self._store.delete(attribute_id, key)

    def _allowed(self, capability: str, attribute_id: int) -> bool:
        if self._authorizer.current_user_can(capability):
            return True
        logger.info("Skipping meta write for attribute %s: missing %s", attribute_id, capability)
        return False

    def render_add_field(self, event: RenderAddField | None = None) -> CheckboxField:
        """Unchecked field for the "add attribute" form."""
        return CheckboxField(id=FIELD_ID, name=self._settings.form_field_name)

    def render_edit_field(self, event: RenderEditField) -> CheckboxField:
        """Field for the "edit attribute" form, reflecting the stored flag."""
        current = self._store.get(event.attribute_id, self._settings.filter_meta_key)
        return CheckboxField(
            id=FIELD_ID,
            name=self._settings.form_field_name,
            checked=sanitize_boolean(current),
        )

    def on_attribute_added(self, event: AttributeCreated) -> None:
        self._validator.check_admin_referer(ADD_NONCE_ACTION)
        if not self._allowed(self._settings.add_capability, event.attribute_id):
            return
        self._save_flag(event.attribute_id)

    def on_attribute_updated(self, event: AttributeUpdated) -> None:
        # Attributes are not terms, so there is no per-attribute capability.
        self._validator.check_admin_referer(SAVE_NONCE_ACTION.format(id=event.attribute_id))
        if not self._allowed(self._settings.edit_capability, event.attribute_id):
            return
        self._save_flag(event.attribute_id)

    def on_attribute_deleted(self, event: AttributeDeleted) -> None:
        """Wipe all meta of the deleted attribute."""
        self._validator.check_admin_referer(DELETE_NONCE_ACTION.format(id=event.attribute_id))
        if not self._allowed(self._settings.delete_capability, event.attribute_id):
            return
        self._store.delete(event.attribute_id)


def register_handlers(bus: EventBus, handlers: AttributeFieldHandlers) -> None:
    """Subscribe every handler to its event."""
    bus.subscribe(RenderAddField, handlers.render_add_field)
    bus.subscribe(RenderEditField, handlers.render_edit_field)
    bus.subscribe(AttributeCreated, handlers.on_attribute_added)
    bus.subscribe(AttributeUpdated, handlers.on_attribute_updated)
    bus.subscribe(AttributeDeleted, handlers.on_attribute_deleted)
