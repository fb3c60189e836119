from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from loadenv import UInt16, init_logging, load, unmarshal
from loadenv.models import LoggingSettings


@dataclass
class AppSettings:
    DATABASE_URL: str = ""
    PORT: UInt16 = 8080
    DEBUG: bool = False
    LOG_LEVEL: str = field(default="INFO", metadata={"required": "false"})


def main() -> None:
    settings = AppSettings()
    unmarshal(settings, "examples/.env.example")
    init_logging(LoggingSettings(level=settings.LOG_LEVEL))

    load("examples/.env.example")

    logger = logging.getLogger("smoke")
    logger.info("Settings loaded port=%s debug=%s", settings.PORT, settings.DEBUG)
    logger.info("DATABASE_URL present in environment=%s", "DATABASE_URL" in os.environ)


if __name__ == "__main__":
    main()
