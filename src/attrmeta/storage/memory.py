"""In-memory option storage.

Dict-based storage for single-process use and testing. Values are deep
copied on the way in and out, so callers never hold references into stored
state (the same isolation a serialized option gives).
"""

from __future__ import annotations

import copy as cp
from typing import Any


class InMemoryOptionStore:
    """Option store backed by a plain dict.

    Args:
        initial: Optional options to seed the store with.
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._options: dict[str, Any] = cp.deepcopy(initial) if initial else {}

    def load_option(self, name: str) -> Any | None:
        if name not in self._options:
            return None
        return cp.deepcopy(self._options[name])

    def save_option(self, name: str, value: Any) -> None:
        self._options[name] = cp.deepcopy(value)

    def delete_option(self, name: str) -> bool:
        if name not in self._options:
            return False
        del self._options[name]
        return True
