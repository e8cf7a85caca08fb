"""
Logging and error tracking setup.

Call configure_logging() and init_sentry() once at process start (the CLI
does). Library code only ever uses logging.getLogger(__name__).
"""

import logging
from typing import Optional

import sentry_sdk

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Optional[Settings] = None, *, level: Optional[str] = None) -> None:
    """Configure root logging from settings (or an explicit level override)."""
    settings = settings or get_settings()
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)


def init_sentry(settings: Optional[Settings] = None) -> bool:
    """
    Initialize Sentry SDK if DSN is configured.

    Returns:
        True if Sentry was initialized
    """
    settings = settings or get_settings()
    if not settings.sentry_dsn:
        return False
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1,
    )
    logger.info("Sentry initialized for data sync")
    return True
