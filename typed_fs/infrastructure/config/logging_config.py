import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Configure root handlers and the ``typed_fs`` package level."""
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # keep third-party loggers quiet

    formatter = logging.Formatter(LOG_FORMAT)

    if not any(getattr(h, "_typed_fs", False) for h in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        stream_handler._typed_fs = True  # type: ignore[attr-defined]
        root.addHandler(stream_handler)

        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5
            )
            file_handler.setFormatter(formatter)
            file_handler._typed_fs = True  # type: ignore[attr-defined]
            root.addHandler(file_handler)

    package_logger = logging.getLogger("typed_fs")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.info("Logging is set up: level=%s, log_file=%s", level, log_file)

    return root
