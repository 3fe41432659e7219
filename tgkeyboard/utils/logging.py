import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

import structlog


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    logs_dir: Union[str, Path] = "logs",
) -> None:
    """Set up logging for applications embedding tgkeyboard.

    The library itself only emits records through ``logging.getLogger``;
    nothing is configured until an application calls this.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to a rotating file in addition to console
        logs_dir: Directory for the log file when ``log_to_file`` is set
    """
    level = getattr(logging, log_level.upper())

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.set_exc_info,
            (
                structlog.processors.JSONRenderer()
                if log_to_file
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_to_file:
        logs_path = Path(logs_dir)
        logs_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            logs_path / "tgkeyboard.log", maxBytes=10 * 1024 * 1024, backupCount=5  # 10MB
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
            )
        )
        root_logger.addHandler(file_handler)


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (defaults to the package name)

    Returns:
        Structured logger bound to ``name``
    """
    return structlog.get_logger(name or "tgkeyboard")
