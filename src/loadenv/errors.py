from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class LoadEnvError(Exception):
    """Base class for every error raised by loadenv."""


class EnvFileError(LoadEnvError, OSError):
    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"Cannot read environment file: {self.path}")


class EnvSyntaxError(LoadEnvError, ValueError):
    def __init__(self, line_index: int, path: Optional[str | Path] = None) -> None:
        self.line_index = line_index
        self.path = str(path) if path is not None else None
        where = f" in {self.path}" if self.path else ""
        super().__init__(f"Bad syntax on line number {line_index}{where}.")

    def with_path(self, path: str | Path) -> EnvSyntaxError:
        return EnvSyntaxError(self.line_index, path)


class DestinationTypeError(LoadEnvError, TypeError):
    def __init__(self, destination: Any, reason: str) -> None:
        self.destination = destination
        super().__init__(reason)


class TagError(LoadEnvError, ValueError):
    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"The 'required' annotation on field {field} must be a valid bool value, got {value!r}.")


class MissingRequiredFieldError(LoadEnvError, KeyError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"Required environment variable {self.field} not provided."


class CoercionError(LoadEnvError, ValueError):
    def __init__(self, field: str, value: str, kind: str) -> None:
        self.field = field
        self.value = value
        self.kind = kind
        super().__init__(
            f"Environment variable {field} has value {value!r}. It cannot be made into type {kind}."
        )


class UnsupportedTypeError(LoadEnvError, TypeError):
    def __init__(self, field: str, kind: str) -> None:
        self.field = field
        self.kind = kind
        super().__init__(f"Unsupported field kind: {kind} (field {field}).")


class EnvSetError(LoadEnvError, OSError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Cannot set environment variable {key!r}.")
