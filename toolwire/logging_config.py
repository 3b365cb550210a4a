"""Logging configuration for toolwire."""

import sys
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from toolwire.core.settings import AdapterSettings

LOG_FORMAT = '%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Loggers of the OpenAI SDK and its HTTP transport
QUIET_LOGGERS = ('openai', 'httpx')


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _rotating_handler(path: Path, formatter: logging.Formatter, level: int = logging.NOTSET) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=10_000_000,  # 10MB
        backupCount=5
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_dir: Optional[str] = None,
    settings: Optional[AdapterSettings] = None
) -> None:
    """Configure logging for toolwire.

    Explicit arguments win; anything left as None is read from settings
    (``TOOLWIRE_LOG_LEVEL`` and ``TOOLWIRE_LOG_DIR``).

    Args:
        level: Optional logging level, as a number or a name like "DEBUG"
        log_dir: Optional directory for rotating ``toolwire.log`` and ``error.log``
        settings: Optional settings instance, will load from env if not provided

    Raises:
        ValueError: If the level name is unknown
    """
    if level is None or log_dir is None:
        if settings is None:
            settings = AdapterSettings()
        if level is None:
            level = settings.log_level
        if log_dir is None:
            log_dir = settings.log_dir
    level = _resolve_level(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(_rotating_handler(log_path / "toolwire.log", formatter))
        root_logger.addHandler(_rotating_handler(log_path / "error.log", formatter, logging.ERROR))

    logging.getLogger('toolwire').setLevel(level)

    # SDK request logs only at DEBUG
    quiet_level = level if level == logging.DEBUG else logging.WARNING
    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(quiet_level)

    logging.getLogger(__name__).info("[lifecycle.logging] Logging initialized", extra={
        "level": logging.getLevelName(level),
        "log_dir": str(log_dir) if log_dir else None
    })
