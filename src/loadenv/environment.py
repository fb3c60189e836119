from __future__ import annotations

import os
from typing import MutableMapping, Optional

from loadenv.errors import EnvSetError


class OsEnvironmentWriter:
    """Writes into the process environment through `os.environ`."""

    def set(self, key: str, value: str) -> None:
        try:
            os.environ[key] = value
        except (OSError, ValueError) as exc:
            raise EnvSetError(key) from exc

    def contains(self, key: str) -> bool:
        return key in os.environ


class MappingEnvironmentWriter:
    """Collects variables in a plain mapping instead of the process environment."""

    def __init__(self, target: Optional[MutableMapping[str, str]] = None) -> None:
        self.target: MutableMapping[str, str] = {} if target is None else target

    def set(self, key: str, value: str) -> None:
        # Same constraints the OS applies to variable names.
        if not key or "=" in key or "\0" in key or "\0" in value:
            raise EnvSetError(key)
        self.target[key] = value

    def contains(self, key: str) -> bool:
        return key in self.target
