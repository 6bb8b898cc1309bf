"""Logging configuration."""

import sys

from loguru import logger

from formation.settings import LOG_DIR, LOG_LEVEL, TRACE_NEGOTIATIONS

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "<cyan>{extra[stage]: <12}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[stage]: <12} | {name}:{function}:{line} | {message}"


def stage_of(module: str | None) -> str:
    """Formation stage a module logs for: electoral, coalition, negotiation..."""
    parts = (module or "").split(".")
    if len(parts) > 2 and parts[0] == "formation" and parts[1] == "services":
        return parts[2]
    return "engine"


def _tag_stage(record):
    record["extra"].setdefault("stage", stage_of(record["name"]))


def setup_logging(level: str = LOG_LEVEL, to_file: bool = False, trace_negotiations: bool = TRACE_NEGOTIATIONS):
    """Configure console logging, an optional daily file and an optional negotiation trace.

    The trace is JSON lines holding every negotiation record at DEBUG, enough
    to follow a run day by day next to its seed.
    """
    logger.remove()
    logger.configure(patcher=_tag_stage)

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file or trace_negotiations:
        LOG_DIR.mkdir(parents=True, exist_ok=True)

    if to_file:
        logger.add(
            LOG_DIR / "formation_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", LOG_DIR)

    if trace_negotiations:
        logger.add(
            LOG_DIR / "negotiations_{time:YYYY-MM-DD}.jsonl",
            level="DEBUG",
            filter=lambda record: record["extra"].get("stage") == "negotiation",
            serialize=True,
            rotation="00:00",
            retention="7 days",
        )

    return logger
