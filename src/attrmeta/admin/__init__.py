"""Admin screen integration: field view model, security protocols, handlers."""

from attrmeta.admin.fields import CheckboxField
from attrmeta.admin.handlers import AttributeFieldHandlers, register_handlers
from attrmeta.admin.protocol import Authorizer, InvalidNonceError, RequestValidator

__all__ = [
    "AttributeFieldHandlers",
    "Authorizer",
    "CheckboxField",
    "InvalidNonceError",
    "RequestValidator",
    "register_handlers",
]
