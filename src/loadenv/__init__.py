"""Load KEY=VALUE files into the process environment or into a typed record."""

from loadenv.binder import FieldSpec, bind, describe_fields, unmarshal
from loadenv.environment import MappingEnvironmentWriter, OsEnvironmentWriter
from loadenv.errors import (
    CoercionError,
    DestinationTypeError,
    EnvFileError,
    EnvSetError,
    EnvSyntaxError,
    LoadEnvError,
    MissingRequiredFieldError,
    TagError,
    UnsupportedTypeError,
)
from loadenv.interfaces import EnvironmentWriter
from loadenv.kinds import Int8, Int16, Int32, Int64, UInt, UInt8, UInt16, UInt32, UInt64
from loadenv.loader import load
from loadenv.logging import init_logging
from loadenv.models import LoaderSettings, LoggingSettings
from loadenv.parser import lines_from_file, parse_lines, parse_text, read_variables

__all__ = [
    "CoercionError",
    "DestinationTypeError",
    "EnvFileError",
    "EnvSetError",
    "EnvSyntaxError",
    "EnvironmentWriter",
    "FieldSpec",
    "Int16",
    "Int32",
    "Int64",
    "Int8",
    "LoadEnvError",
    "LoaderSettings",
    "LoggingSettings",
    "MappingEnvironmentWriter",
    "MissingRequiredFieldError",
    "OsEnvironmentWriter",
    "TagError",
    "UInt",
    "UInt16",
    "UInt32",
    "UInt64",
    "UInt8",
    "UnsupportedTypeError",
    "bind",
    "describe_fields",
    "init_logging",
    "lines_from_file",
    "load",
    "parse_lines",
    "parse_text",
    "read_variables",
    "unmarshal",
]
