from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from loadenv.models import LoggingSettings

_HANDLER_MARKER = "_loadenv_handler"


def init_logging(settings: LoggingSettings) -> None:
    """
    Configure the root logger from `settings`.

    Handlers installed by a previous call are removed first, so calling this again
    after reloading configuration does not duplicate output.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()

    level = getattr(logging, settings.level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {settings.level}")
    root.setLevel(level)

    formatter = logging.Formatter(settings.format)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if settings.file is not None:
        path = Path(settings.file.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                path,
                when="midnight",
                backupCount=settings.file.rotation.backup_count,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        root.addHandler(handler)
