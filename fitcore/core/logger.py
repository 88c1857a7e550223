"""Logger configuration for fitcore.

Console output always goes to stderr. A rotated file sink is added when
LOG_FILE is set; FITCORE_LOG_SERIALIZE writes that sink as JSON lines.
"""

import sys
from pathlib import Path

from loguru import logger

from fitcore.config.settings import EngineSettings, settings as default_settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str = "INFO",
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    serialize: bool = False,
) -> list[int]:
    """Configure loguru with a console sink and an optional rotated file sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, only console logging.
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
        serialize: Write the file sink as JSON lines instead of FILE_FORMAT

    Returns:
        Handler ids of the sinks added
    """
    logger.remove()

    handler_ids = [
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=level,
            colorize=True,
        )
    ]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler_ids.append(
            logger.add(
                log_path,
                format=FILE_FORMAT,
                level=level,
                rotation=rotation,
                retention=retention,
                compression="zip",
                serialize=serialize,
                backtrace=True,
                diagnose=False,
            )
        )

    logger.info(f"[CONFIG] Logger initialized with level={level} file={log_file or '-'} serialize={serialize}")
    return handler_ids


def configure_from_settings(settings: EngineSettings | None = None) -> list[int]:
    """Configure logging from engine settings (LOG_LEVEL, LOG_FILE, FITCORE_LOG_*)."""
    settings = settings or default_settings
    return setup_logger(
        level=settings.log_level,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
        serialize=settings.log_serialize,
    )


# Initialize logger on import
configure_from_settings()
