"""In-memory gateway implementations for testing."""

from .identity import GatewayCall, InMemoryIdentityGateway

__all__ = [
    "GatewayCall",
    "InMemoryIdentityGateway",
]
