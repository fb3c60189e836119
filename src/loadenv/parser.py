from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from loadenv.errors import EnvFileError, EnvSyntaxError

logger = logging.getLogger(__name__)

DEFAULT_PATH = ".env"
DEFAULT_ENCODING = "utf-8"

VariableMap = dict[str, str]


def parse_lines(lines: Iterable[str]) -> VariableMap:
    """
    Parse KEY=VALUE lines into a mapping.

    Blank lines are skipped. Every other line must contain exactly one '=';
    a repeated key keeps its last value.
    """
    variables: VariableMap = {}
    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        parts = line.split("=")
        if len(parts) != 2:
            raise EnvSyntaxError(index)
        key, value = parts
        variables[key] = value
    return variables


def parse_text(text: str) -> VariableMap:
    return parse_lines(text.split("\n"))


def lines_from_file(path: str | Path, *, encoding: str = DEFAULT_ENCODING) -> list[str]:
    """
    Read `path` and split it on line feeds only; no newline translation happens.

    Bytes that are not valid in `encoding` are kept as surrogate escapes, which
    `os.environ` writes back as the original bytes on POSIX.
    """
    try:
        data = Path(path).read_bytes().decode(encoding, errors="surrogateescape")
    except (OSError, LookupError) as exc:
        raise EnvFileError(path) from exc
    return data.split("\n")


def parse_file(path: str | Path, *, encoding: str = DEFAULT_ENCODING) -> VariableMap:
    lines = lines_from_file(path, encoding=encoding)
    try:
        return parse_lines(lines)
    except EnvSyntaxError as exc:
        raise exc.with_path(path) from None


def read_variables(*paths: str | Path, encoding: str = DEFAULT_ENCODING) -> VariableMap:
    """Read every file in order and merge them, later files winning on shared keys."""
    sources: Sequence[str | Path] = paths or (DEFAULT_PATH,)
    merged: VariableMap = {}
    for path in sources:
        variables = parse_file(path, encoding=encoding)
        logger.debug("Parsed environment file. path=%s keys=%s", path, len(variables))
        merged.update(variables)
    return merged
