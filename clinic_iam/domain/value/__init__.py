"""Domain value objects for the staff directory."""

from clinic_iam.domain.value import attributes
from clinic_iam.domain.value.attributes import IdentityStatus

__all__ = [
    "attributes",
    "IdentityStatus",
]
