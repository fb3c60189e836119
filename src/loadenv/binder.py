from __future__ import annotations

import dataclasses
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Mapping, Optional, Sequence, get_type_hints

from pydantic import BaseModel, ValidationError

from loadenv.errors import (
    CoercionError,
    DestinationTypeError,
    MissingRequiredFieldError,
    TagError,
    UnsupportedTypeError,
)
from loadenv.kinds import Kind, kind_name, parse_bool, parse_int, resolve_kind
from loadenv.models import LoaderSettings
from loadenv.parser import read_variables

logger = logging.getLogger(__name__)

REQUIRED_TAG = "required"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """
    One destination field: its name (also the variable key), declared type and
    the raw `required` annotation.

    `required` accepts a bool or a bool string; None or "" means required.
    It is only interpreted when the field is bound, so a malformed value fails
    at that field and not before.
    """

    name: str
    annotation: Any
    required: bool | str | None = None

    def is_required(self) -> bool:
        if self.required is None or self.required == "":
            return True
        if isinstance(self.required, bool):
            return self.required
        try:
            return parse_bool(str(self.required))
        except ValueError as exc:
            raise TagError(self.name, self.required) from exc


def _check_destination(destination: Any) -> None:
    if isinstance(destination, type):
        raise DestinationTypeError(
            destination, f"Destination must be a record instance, got the class {destination.__name__}."
        )
    if dataclasses.is_dataclass(destination):
        if type(destination).__dataclass_params__.frozen:  # type: ignore[attr-defined]
            raise DestinationTypeError(destination, f"Destination {type(destination).__name__} is frozen.")
        return
    if isinstance(destination, BaseModel):
        if destination.model_config.get("frozen"):
            raise DestinationTypeError(destination, f"Destination {type(destination).__name__} is frozen.")
        return
    raise DestinationTypeError(
        destination,
        f"Destination must be a dataclass or pydantic model instance, got {type(destination).__name__}.",
    )


def _resolve_field_annotation(record_type: type, f: dataclasses.Field) -> Any:
    """Evaluate one string annotation in the namespace of the class that declared it."""
    if not isinstance(f.type, str):
        return f.type
    for klass in record_type.__mro__:
        if f.name not in klass.__dict__.get("__annotations__", {}):
            continue
        module = sys.modules.get(klass.__module__)
        globalns = vars(module) if module is not None else {}
        try:
            return eval(f.type, globalns, dict(vars(klass)))
        except NameError:
            # Left as a string; coerce() reports it as unsupported if the field is present.
            return f.type
    return f.type


def _dataclass_specs(record: Any) -> list[FieldSpec]:
    record_type = type(record)
    try:
        hints = get_type_hints(record_type, include_extras=True)
    except NameError:
        hints = {f.name: _resolve_field_annotation(record_type, f) for f in dataclasses.fields(record)}
    return [
        FieldSpec(
            name=f.name,
            annotation=hints.get(f.name, f.type),
            required=f.metadata.get(REQUIRED_TAG),
        )
        for f in dataclasses.fields(record)
    ]


def _model_specs(record: BaseModel) -> list[FieldSpec]:
    specs: list[FieldSpec] = []
    for name, info in type(record).model_fields.items():
        annotation: Any = info.annotation
        # pydantic moves Annotated metadata off the annotation; put the width marker back.
        markers = [m for m in info.metadata if isinstance(m, Kind)]
        if markers:
            annotation = Annotated[annotation, markers[0]]
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        specs.append(FieldSpec(name=name, annotation=annotation, required=extra.get(REQUIRED_TAG)))
    return specs


def describe_fields(destination: Any) -> list[FieldSpec]:
    """Return the field specs of a mutable dataclass or pydantic model instance, in declaration order."""
    _check_destination(destination)
    if isinstance(destination, BaseModel):
        return _model_specs(destination)
    return _dataclass_specs(destination)


def coerce(spec: FieldSpec, value: str) -> Any:
    kind = resolve_kind(spec.annotation)
    if kind is None:
        raise UnsupportedTypeError(spec.name, kind_name(spec.annotation))
    if kind.category == "string":
        return value
    try:
        if kind.category == "bool":
            return parse_bool(value)
        return parse_int(value, kind)
    except ValueError as exc:
        raise CoercionError(spec.name, value, kind.name) from exc


def _assign(destination: Any, spec: FieldSpec, raw: str, value: Any) -> None:
    try:
        setattr(destination, spec.name, value)
    except ValidationError as exc:
        # pydantic models with validate_assignment or frozen fields reject the value here.
        if any(error["type"] in ("frozen_field", "frozen_instance") for error in exc.errors()):
            raise DestinationTypeError(
                destination, f"Field {spec.name} of {type(destination).__name__} is frozen."
            ) from exc
        raise CoercionError(spec.name, raw, kind_name(spec.annotation)) from exc


def bind(destination: Any, variables: Mapping[str, str], fields: Sequence[FieldSpec]) -> None:
    """
    Assign `variables` onto `destination` following `fields`, in order.

    Fields bound before a failing field keep their new values.
    """
    for spec in fields:
        required = spec.is_required()
        if spec.name not in variables:
            if required:
                raise MissingRequiredFieldError(spec.name)
            continue
        raw = variables[spec.name]
        _assign(destination, spec, raw, coerce(spec, raw))


def unmarshal(
    destination: Any,
    *paths: str | Path,
    settings: Optional[LoaderSettings] = None,
) -> None:
    """
    Populate `destination` from environment files without touching the process environment.

    Each field is matched by exact name against the merged variables of all files
    (later files win). Supported field types are str, int, bool and the width
    markers in `loadenv.kinds`.
    """
    settings = settings or LoaderSettings()
    fields = describe_fields(destination)
    variables = read_variables(*(paths or (settings.default_path,)), encoding=settings.encoding)
    bind(destination, variables, fields)
    logger.debug(
        "Bound environment variables. record=%s fields=%s keys=%s",
        type(destination).__name__,
        len(fields),
        len(variables),
    )
