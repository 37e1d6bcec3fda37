"""Option storage protocol for swappable backends.

An option store is a named slot key/value store: each option holds one
opaque value that is read and replaced as a whole. The metadata store keeps
its entire blob in a single option.

Usage:
    options = InMemoryOptionStore()
    store = AttributeMetaStore(options)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OptionStore(Protocol):
    """Abstract named-option interface. Implementations handle actual data."""

    def load_option(self, name: str) -> Any | None:
        """Read an option value.

        Args:
            name: Option name.

        Returns:
            The stored value, or None if the option does not exist.
        """
        ...

    def save_option(self, name: str, value: Any) -> None:
        """Create or replace an option value."""
        ...

    def delete_option(self, name: str) -> bool:
        """Remove an option. Returns True if it existed."""
        ...
