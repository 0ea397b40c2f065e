# app/utils/logging.py
import logging
import sys

from app.utils.settings import LOG_LEVEL, LOG_FORMAT


def setup_logging(level: str | None = None, format_string: str | None = None) -> None:
    numeric_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or LOG_FORMAT))
    root_logger.addHandler(handler)

    # access log za glosny, bledy i tak przechodza
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
