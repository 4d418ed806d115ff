# colholidays/core/sentry_config.py
"""
Sentry error tracking, enabled only in production with SENTRY_DSN set.

Holiday resolution failures are reported explicitly by the routes through
capture_exception; error logs only become breadcrumbs so a failure is not
reported twice.
"""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.utils import BadDsn

from colholidays import __version__
from colholidays.core.logging_config import request_id_var

logger = logging.getLogger(__name__)

#: Only these request headers are sent to Sentry.
FORWARDED_HEADERS = ("user-agent", "accept-language", "x-request-id")


def init_sentry() -> bool:
    """
    Initialize Sentry.

    Returns:
        True if Sentry was initialized, False if it is disabled
    """
    if os.getenv("PRODUCTION", "false").lower() != "true":
        logger.info("Sentry disabled in development mode")
        return False

    sentry_dsn = os.getenv("SENTRY_DSN", "").strip()
    if not sentry_dsn:
        logger.warning("SENTRY_DSN not set, error tracking disabled")
        return False

    environment = os.getenv("SENTRY_ENVIRONMENT", "production")
    try:
        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FastApiIntegration(),
                LoggingIntegration(level=logging.INFO, event_level=None),
            ],
            traces_sample_rate=0.1,
            release=os.getenv("RELEASE_VERSION", f"colholidays@{__version__}"),
            environment=environment,
            send_default_pii=False,
            before_send=before_send_hook,
        )
    except BadDsn as e:
        logger.error("Invalid SENTRY_DSN, error tracking disabled: %s", e)
        return False

    logger.info("Sentry initialized", extra={"extra_fields": {"environment": environment}})
    return True


def before_send_hook(event, hint):
    """Keep only FORWARDED_HEADERS and tag the event with the request id."""
    request = event.get("request")
    if request and "headers" in request:
        request["headers"] = {
            name: value for name, value in request["headers"].items() if name.lower() in FORWARDED_HEADERS
        }

    request_id = request_id_var.get()
    if request_id:
        event.setdefault("tags", {})["request_id"] = request_id

    return event


def capture_exception(error: Exception, **context) -> None:
    """
    Report a holiday failure with its context (lang, year, date) as tags.

    Without an initialized client this is a no-op on the Sentry side.
    """
    with sentry_sdk.new_scope() as scope:
        scope.set_tag("error_type", type(error).__name__)
        for key, value in context.items():
            scope.set_tag(key, value)
        scope.set_context("holidays", context)
        sentry_sdk.capture_exception(error)
