"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the decision logic that sits between callers and
    the identity provider.
    """

    pass
