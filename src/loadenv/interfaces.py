from __future__ import annotations

from typing import Protocol


class EnvironmentWriter(Protocol):
    """
    Destination for variables applied by `loadenv.load`.

    Implementations raise `loadenv.errors.EnvSetError` when a variable cannot be set.
    """

    def set(self, key: str, value: str) -> None:
        ...

    def contains(self, key: str) -> bool:
        ...
