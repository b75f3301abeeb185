"""Domain layer errors.

Every failure that crosses the orchestration boundary is one of the
``DomainError`` kinds below. ``GatewayError`` is not part of that taxonomy: it
is the raw signal gateway implementations raise, and the error translator
turns it into a ``ProviderError`` or ``NotFoundError``.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidInputError(DomainError):
    """Validation failure. The message names the violated rule."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class ProviderError(DomainError):
    """The identity provider rejected or failed an operation."""

    def __init__(self, operation: str, provider_message: str, code: str | None = None):
        self.operation = operation
        self.provider_message = provider_message
        self.code = code
        super().__init__(f"Identity provider error on {operation}: {provider_message}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnexpectedError(DomainError):
    """Unclassified failure (neither validation nor a provider signal)."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Unexpected error on {operation}: {detail}")


class GatewayError(Exception):
    """Raw failure signal raised by identity gateway implementations.

    Attributes:
        code: Provider error code (e.g. ``UserNotFoundException``)
        message: Provider-supplied message
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")
