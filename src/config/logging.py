import logging
import sys
from logging import StreamHandler

from src.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that flood DEBUG output
QUIET_LOGGERS = ("aiosqlite", "httpcore", "httpx", "multipart")


def setup_logging() -> None:
    logging.basicConfig(
        level=settings.resolved_log_level,
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)
    if settings.LOG_DB:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
