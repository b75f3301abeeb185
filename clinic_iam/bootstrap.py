"""Process bootstrap: settings, logging, observability and the container."""

from dishka import AsyncContainer

from clinic_iam.config import Settings
from clinic_iam.util.di.container import create_container
from clinic_iam.util.logging import setup_logging
from clinic_iam.util.observability import configure_logfire


def bootstrap() -> AsyncContainer:
    """Prepare the process for identity administration.

    Settings are read from the environment here for logging and Logfire; the
    container loads its own copy from the same source.

    Returns:
        Production DI container; resolve use cases inside ``async with container()``
    """
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    return create_container()
