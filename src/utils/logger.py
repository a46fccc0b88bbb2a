"""Loguru sinks for the market data, news and AI clients.

Django views keep using the stdlib LOGGING dict; everything under src/
logs through loguru and lands in the sinks configured here.
"""

import sys
from loguru import logger

from src.config import config, LOGS_DIR

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def _is_ai_call(record) -> bool:
    return "Gemini" in record["message"]


def _is_quote_provider(record) -> bool:
    return record["name"].startswith("src.data.market_data")


def file_sinks():
    """(path, options) for every file sink, in the order they are added."""
    return [
        (config.log_file, {
            'format': FILE_FORMAT,
            'level': "DEBUG",
            'rotation': "10 MB",
            'retention': "30 days",
            'compression': "zip",
        }),
        (LOGS_DIR / "ai.log", {
            'format': "{time:YYYY-MM-DD HH:mm:ss} | {message}",
            'level': "INFO",
            'filter': _is_ai_call,
            'rotation': "5 MB",
            'retention': "30 days",
        }),
        (LOGS_DIR / "market_data.log", {
            'format': FILE_FORMAT,
            'level': "WARNING",
            'filter': _is_quote_provider,
            'rotation': "5 MB",
            'retention': "14 days",
        }),
        (LOGS_DIR / "errors.log", {
            'format': FILE_FORMAT,
            'level': "ERROR",
            'rotation': "5 MB",
            'retention': "30 days",
        }),
    ]


def setup_logger(log_to_files: bool = True):
    """Replace loguru's default handler with the dashboard sinks.

    Args:
        log_to_files: Also write rotating files under logs/ (off in tests)
    """
    logger.remove()
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=config.log_level, colorize=True)

    if log_to_files:
        LOGS_DIR.mkdir(exist_ok=True)
        for path, options in file_sinks():
            logger.add(path, **options)

    logger.debug(f"Logger initialized (files={'on' if log_to_files else 'off'})")
    return logger
