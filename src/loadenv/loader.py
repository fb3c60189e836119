from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from loadenv.environment import OsEnvironmentWriter
from loadenv.interfaces import EnvironmentWriter
from loadenv.models import LoaderSettings
from loadenv.parser import parse_file

logger = logging.getLogger(__name__)


def load(
    *paths: str | Path,
    writer: Optional[EnvironmentWriter] = None,
    settings: Optional[LoaderSettings] = None,
) -> None:
    """
    Load environment variables from the given files, in order.

    With no paths, `settings.default_path` (".env") is read. Stops at the first file
    that cannot be read or parsed, or the first variable that cannot be set. Variables
    already applied by earlier files or earlier keys stay applied.
    """
    settings = settings or LoaderSettings()
    writer = writer or OsEnvironmentWriter()
    sources = paths or (settings.default_path,)

    for path in sources:
        variables = parse_file(path, encoding=settings.encoding)
        applied = 0
        for key, value in variables.items():
            if not settings.override and writer.contains(key):
                continue
            writer.set(key, value)
            applied += 1
        logger.debug("Loaded environment file. path=%s keys=%s applied=%s", path, len(variables), applied)
