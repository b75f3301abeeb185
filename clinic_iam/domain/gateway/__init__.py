"""Gateway interfaces for the staff directory.

Gateway interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter layer.
"""

from clinic_iam.domain.gateway.identity import IdentityGateway

__all__ = [
    "IdentityGateway",
]
