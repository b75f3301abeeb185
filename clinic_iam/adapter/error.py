"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class GatewayConfigurationError(AdapterError):
    """Identity provider gateway is missing required configuration."""

    pass
