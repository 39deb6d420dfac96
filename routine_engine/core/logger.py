"""Logger configuration for the routine engine.

Engine modules log with structured kwargs, e.g.
    logger.info("Partition metrics", frequency=4, exercises_per_day=[3, 3, 2, 2])
loguru stores those kwargs in record["extra"], so both sinks render {extra}
after the message.
"""

import sys
from pathlib import Path

from loguru import logger

from routine_engine.config.settings import Settings

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> | {extra}"
)
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def setup_logger(settings: Settings | None = None) -> list[int]:
    """Route engine logs to stderr and, when configured, a rotating file.

    The engine never calls this itself; the hosting process does, once.

    Args:
        settings: Level, file path, rotation and retention. Read from
            ROUTINE_ENGINE_* environment variables when omitted.

    Returns:
        Handler ids of the sinks added
    """
    settings = settings or Settings()

    logger.remove()
    handler_ids = [
        logger.add(sys.stderr, format=_CONSOLE_FORMAT, level=settings.log_level, colorize=True),
    ]

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_path,
                format=_FILE_FORMAT,
                level=settings.log_level,
                rotation=settings.log_rotation,
                retention=settings.log_retention,
                compression="zip",
                backtrace=True,
                diagnose=False,
            )
        )

    logger.info("Logger initialized", level=settings.log_level, log_file=settings.log_file)
    return handler_ids
