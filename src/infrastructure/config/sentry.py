"""Sentry error reporting."""

import sentry_sdk

from src.common.logging import get_logger
from src.infrastructure.config.settings import Settings, get_settings


logger = get_logger(__name__)

_initialized = False


def init_sentry(settings: Settings | None = None) -> bool:
    """Initialize the Sentry SDK when a DSN is configured.

    Returns:
        True if Sentry was initialized by this call or an earlier one
    """
    global _initialized
    if _initialized:
        return True

    settings = settings or get_settings()
    if not settings.sentry_dsn:
        logger.debug("Sentry DSN not configured, skipping initialization")
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )
    _initialized = True
    logger.info("Sentry initialized", environment=settings.environment)
    return True
