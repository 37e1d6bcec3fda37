"""Protocols for the host's security collaborators.

The host owns authentication and CSRF protection. Handlers only ask.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class InvalidNonceError(Exception):
    """Raised when a request's security token does not match its action."""

    pass


@runtime_checkable
class Authorizer(Protocol):
    """Answers capability checks for the current user."""

    def current_user_can(self, capability: str) -> bool:
        """Check if the current user holds capability."""
        ...


@runtime_checkable
class RequestValidator(Protocol):
    """Verifies the CSRF token sent with the current request."""

    def check_admin_referer(self, action: str) -> None:
        """Validate the token for action.

        Raises:
            InvalidNonceError: If the token is missing or invalid. The request
                must not proceed.
        """
        ...
