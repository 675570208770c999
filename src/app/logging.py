import logging
import sys

# Libraries that log every request or statement at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncpg", "uvicorn.access")


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure the root logger for the search service.

    Args:
        level: Level name (e.g. "DEBUG") or number, usually settings.log_level.
            Per-hit scoring detail is only emitted at DEBUG.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logging.basicConfig(
        level=level,
        format="%(levelname)s - %(asctime)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Module logger; output goes through the root handler set up by configure_logging."""
    return logging.getLogger(name)
