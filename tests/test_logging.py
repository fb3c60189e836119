import logging
import tempfile
import unittest
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from loadenv import LoggingSettings, init_logging
from loadenv.models import FileLoggingSettings, FileRotationSettings


class InitLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        saved_handlers = list(root.handlers)
        saved_level = root.level

        def restore() -> None:
            for handler in list(root.handlers):
                if handler not in saved_handlers:
                    root.removeHandler(handler)
                    handler.close()
            root.setLevel(saved_level)

        self.addCleanup(restore)

    def _installed(self) -> list:
        return [h for h in logging.getLogger().handlers if getattr(h, "_loadenv_handler", False)]

    def test_stream_only(self) -> None:
        init_logging(LoggingSettings(level="debug"))
        self.assertEqual(logging.getLogger().level, logging.DEBUG)
        self.assertEqual(len(self._installed()), 1)

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        init_logging(LoggingSettings())
        init_logging(LoggingSettings(level="WARNING"))
        self.assertEqual(len(self._installed()), 1)
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_file_handler_writes_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "app.log"
            init_logging(
                LoggingSettings(
                    file=FileLoggingSettings(path=str(log_path), rotation=FileRotationSettings(backup_count=2))
                )
            )
            file_handlers = [h for h in self._installed() if isinstance(h, TimedRotatingFileHandler)]
            self.assertEqual(len(file_handlers), 1)
            self.assertEqual(file_handlers[0].backupCount, 2)

            logging.getLogger("loadenv.test").info("hello from test")
            file_handlers[0].flush()
            self.assertIn("hello from test", log_path.read_text(encoding="utf-8"))
            init_logging(LoggingSettings())

    def test_unknown_level_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            init_logging(LoggingSettings(level="LOUD"))


if __name__ == "__main__":
    unittest.main()
