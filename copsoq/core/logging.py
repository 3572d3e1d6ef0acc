import logging
import sys

from copsoq.config import settings
from copsoq.utils.logging_redaction import install_redaction_filter


def setup_logging(level: str = "INFO", redact: bool = True) -> None:
    """
    Configure centralized application logging.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if redact:
        install_redaction_filter()


def setup_logging_from_settings() -> None:
    """
    Configure logging from application settings.
    """
    setup_logging(settings.LOG_LEVEL, redact=settings.LOG_REDACT_IDENTIFIERS)


def get_logger(name: str) -> logging.Logger:
    """
    Retrieve a namespaced logger.
    """
    return logging.getLogger(name)
