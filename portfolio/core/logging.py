"""Console logging setup."""
import logging

from portfolio.core.config import settings

LOG_FORMAT = "[%(name)s] %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # SQL echo is controlled by DEBUG on the engine; keep the logger quiet otherwise
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def mask_database_url(url: str) -> str:
    """Hide credentials, keep host/db part."""
    if "@" not in url:
        return "configured"
    return "...@" + url.split("@")[-1].split("?")[0]
