import logging
import os


def init_sentry() -> None:
    """Optional Sentry initialisation for hosts embedding the agent inbox.

    Uses LoggingIntegration so stdlib logs at INFO become breadcrumbs and
    ERROR become events. Consistency faults and failed resume calls are
    logged at ERROR and therefore reach Sentry when it is configured.
    """
    try:
        import sentry_sdk  # type: ignore
        from sentry_sdk.integrations.logging import LoggingIntegration  # type: ignore
    except Exception:
        return

    dsn = os.environ.get("SENTRY_DSN_AGENT_INBOX") or os.environ.get("SENTRY_DSN")

    # Skip Sentry if DSN is not set or is a placeholder value
    if not dsn or dsn in ["your-sentry-dsn", ""]:
        return

    if not dsn.startswith(("https://", "http://")):
        logging.warning(f"Invalid Sentry DSN format: {dsn[:20]}... (showing first 20 chars)")
        return

    sentry_sdk.init(  # type: ignore
        dsn=dsn,
        environment=os.environ.get("SENTRY_ENVIRONMENT", "development"),
        traces_sample_rate=float(os.environ.get("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
        send_default_pii=False,
        integrations=[
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),  # type: ignore
        ],
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a stdlib logger; host can route it to Sentry via LoggingIntegration."""
    return logging.getLogger(name)
