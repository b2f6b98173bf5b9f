"""Logfire setup.

Services log with ``logfire.info``/``logfire.warn`` and wrap remote calls
and state changes in ``logfire.span``. Until ``configure_logfire`` runs,
logfire only warns that it is unconfigured, so tests need no setup.
"""

import logfire

from hackers.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire from settings.

    Telemetry is sent to Logfire only when ``send_to_logfire`` says so,
    or when it is unset and a token is configured.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name="hackers",
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=settings.debug,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_httpx() -> None:
    """Trace requests made to Hacker News."""
    logfire.instrument_httpx()
