import logging
import sys

from releasemeta.settings import settings

logger = logging.getLogger("releasemeta")


def setup_logging(level: str = None) -> None:
    """Configure a single stdout handler for the service."""
    level_name = (level or settings.log_level or "INFO").upper()
    python_level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(python_level)
    root_logger.handlers = []
    root_logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
