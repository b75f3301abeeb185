"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Identity created", handle=identity.handle)

    with logfire.span("enroll_staff_member", handle=handle):
        ...
"""

import logfire

from clinic_iam.config import Settings

SERVICE_NAME = "clinic-iam"
SERVICE_VERSION = "1.0.0"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - If a token is present, logs are sent to Logfire cloud by default
    - OBSERVABILITY__SEND_TO_LOGFIRE overrides either way

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )
