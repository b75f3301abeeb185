"""Translation of gateway failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire

from clinic_iam.domain.error import (
    DomainError,
    GatewayError,
    NotFoundError,
    ProviderError,
    UnexpectedError,
)

# Provider codes that mean "no such identity".
NOT_FOUND_CODES = frozenset({"UserNotFoundException"})

# Lookups report a missing identity as NotFoundError; every other operation
# keeps its tag and reports it as ProviderError.
LOOKUP_OPERATIONS = frozenset({"get", "list_groups"})


class ErrorTranslator:
    """Maps whatever a gateway raises onto the domain error taxonomy.

    - ``DomainError`` passes through unchanged
    - ``GatewayError`` with a not-found code on a lookup becomes
      ``NotFoundError``
    - any other ``GatewayError`` becomes ``ProviderError`` tagged with the
      attempted operation
    - anything else becomes ``UnexpectedError``

    Failures are logged here, once, through the logger given at construction.
    """

    def __init__(self, logger: logfire.Logfire | None = None) -> None:
        """Initialize error translator.

        Args:
            logger: Logfire instance used to report failures
        """
        self.logger = logger if logger is not None else logfire.with_tags("gateway")

    def translate(
        self, operation: str, exc: Exception, handle: str | None = None
    ) -> DomainError:
        """Translate a gateway failure.

        Args:
            operation: Attempted operation, e.g. ``add_to_group(doctor)``
            exc: Failure raised by the gateway
            handle: Identity the operation targeted, if any

        Returns:
            Domain error to raise in place of ``exc``
        """
        if isinstance(exc, DomainError):
            return exc

        if isinstance(exc, GatewayError):
            if exc.code in NOT_FOUND_CODES and operation in LOOKUP_OPERATIONS:
                self.logger.warn(
                    "Identity not found", operation=operation, handle=handle
                )
                return NotFoundError("Identity", handle or operation)

            self.logger.error(
                "Identity provider operation failed",
                operation=operation,
                handle=handle,
                code=exc.code,
                provider_message=exc.message,
            )
            return ProviderError(operation, exc.message, code=exc.code)

        self.logger.error(
            "Unexpected failure calling identity provider",
            operation=operation,
            handle=handle,
            error=str(exc),
            error_type=type(exc).__name__,
            _exc_info=exc,
        )
        return UnexpectedError(operation, str(exc) or type(exc).__name__)

    @contextmanager
    def guard(self, operation: str, handle: str | None = None) -> Iterator[None]:
        """Run a gateway call, re-raising failures as domain errors.

        The domain error is chained to the original failure.
        """
        try:
            yield
        except Exception as exc:
            translated = self.translate(operation, exc, handle)
            if translated is exc:
                raise
            raise translated from exc
