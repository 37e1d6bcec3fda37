"""Tests for AttributeFieldHandlers.

Focus: security check ordering, form value coercion, store effects.
"""

import pytest

from attrmeta import (
    AttributeCreated,
    AttributeDeleted,
    AttributeFieldHandlers,
    AttributeMetaStore,
    AttributeUpdated,
    Authorizer,
    CheckboxField,
    InvalidNonceError,
    RenderAddField,
    RenderEditField,
    RequestValidator,
)


class FakeAuthorizer:
    """Grants a fixed set of capabilities and records checks."""

    def __init__(self, *capabilities: str) -> None:
        self.capabilities = set(capabilities)
        self.checked: list[str] = []

    def current_user_can(self, capability: str) -> bool:
        self.checked.append(capability)
        return capability in self.capabilities


class FakeValidator:
    """Accepts only the listed nonce actions."""

    def __init__(self, *valid_actions: str) -> None:
        self.valid_actions = set(valid_actions)
        self.checked: list[str] = []

    def check_admin_referer(self, action: str) -> None:
        self.checked.append(action)
        if action not in self.valid_actions:
            raise InvalidNonceError(action)


ALL_CAPS = ("manage_product_terms", "edit_product_terms", "delete_product_terms")


def _handlers(store, form=None, caps=ALL_CAPS, actions=None):
    actions = actions or (
        "woocommerce-add-new_attribute",
        "woocommerce-save-attribute_7",
        "woocommerce-delete-attribute_7",
    )
    return AttributeFieldHandlers(store, FakeAuthorizer(*caps), FakeValidator(*actions), form=form)


def test_fakes_satisfy_protocols() -> None:
    assert isinstance(FakeAuthorizer(), Authorizer)
    assert isinstance(FakeValidator(), RequestValidator)


@pytest.mark.parametrize("submitted", ["1", "on", "true"])
def test_added_with_checked_field_sets_flag(store: AttributeMetaStore, submitted) -> None:
    handlers = _handlers(store, form={"use_in_filter": submitted})

    handlers.on_attribute_added(AttributeCreated(attribute_id=7, data={"slug": "color"}))

    assert store.get(7) == {"use_in_filter": True}


def test_added_without_field_leaves_no_flag(store: AttributeMetaStore) -> None:
    handlers = _handlers(store, form={})

    handlers.on_attribute_added(AttributeCreated(attribute_id=7))

    assert store.has(7, "use_in_filter") is False


def test_updated_with_unchecked_field_removes_flag(store: AttributeMetaStore) -> None:
    store.update(7, "use_in_filter", True)
    store.update(7, "other", "kept")
    handlers = _handlers(store, form={"use_in_filter": "0"})

    handlers.on_attribute_updated(AttributeUpdated(attribute_id=7, old_slug="colour"))

    assert store.get(7) == {"other": "kept"}


def test_updated_checks_per_attribute_nonce_and_edit_capability(store: AttributeMetaStore) -> None:
    authorizer = FakeAuthorizer(*ALL_CAPS)
    validator = FakeValidator("woocommerce-save-attribute_7")
    handlers = AttributeFieldHandlers(store, authorizer, validator, form={"use_in_filter": "1"})

    handlers.on_attribute_updated(AttributeUpdated(attribute_id=7))

    assert validator.checked == ["woocommerce-save-attribute_7"]
    assert authorizer.checked == ["edit_product_terms"]


def test_permission_denied_is_silent_no_op(store: AttributeMetaStore) -> None:
    """Why: Unauthorized writes revert silently; the request itself continues."""
    store.update(7, "use_in_filter", True)
    handlers = _handlers(store, form={"use_in_filter": "0"}, caps=())

    handlers.on_attribute_updated(AttributeUpdated(attribute_id=7))
    handlers.on_attribute_deleted(AttributeDeleted(attribute_id=7))

    assert store.get(7) == {"use_in_filter": True}


def test_invalid_nonce_raises_before_store_is_touched(store: AttributeMetaStore) -> None:
    authorizer = FakeAuthorizer(*ALL_CAPS)
    handlers = AttributeFieldHandlers(store, authorizer, FakeValidator(), form={"use_in_filter": "1"})

    with pytest.raises(InvalidNonceError):
        handlers.on_attribute_added(AttributeCreated(attribute_id=7))

    assert authorizer.checked == []
    assert store.load() == {}


def test_deleted_wipes_all_meta_of_attribute(store: AttributeMetaStore) -> None:
    store.update(7, "use_in_filter", True)
    store.update(7, "other", 1)
    store.update(8, "use_in_filter", True)
    handlers = _handlers(store)

    handlers.on_attribute_deleted(AttributeDeleted(attribute_id=7, taxonomy="pa_color"))

    assert store.get(7) == {}
    assert store.get(8) == {"use_in_filter": True}


def test_render_add_field_is_unchecked(store: AttributeMetaStore) -> None:
    field = _handlers(store).render_add_field(RenderAddField())

    assert field == CheckboxField(id="ssanzdev_use_in_filter", name="use_in_filter")
    assert field.checked is False


@pytest.mark.parametrize("stored, checked", [(True, True), ("yes", True), (False, False), ("0", False)])
def test_render_edit_field_reflects_stored_flag(store: AttributeMetaStore, stored, checked) -> None:
    store.update(7, "use_in_filter", stored)

    field = _handlers(store).render_edit_field(RenderEditField(attribute_id=7))

    assert field.checked is checked


def test_render_edit_field_for_unknown_attribute_is_unchecked(store: AttributeMetaStore) -> None:
    field = _handlers(store).render_edit_field(RenderEditField(attribute_id=123))

    assert field.checked is False
