"""Domain model entities for the staff directory."""

from clinic_iam.domain.model.identity import Identity, IdentityCandidate
from clinic_iam.domain.model.role import StaffRole

__all__ = [
    "Identity",
    "IdentityCandidate",
    "StaffRole",
]
