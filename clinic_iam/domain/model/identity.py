"""Identity aggregate.

An identity is a clinical staff member's account at the identity provider.
The handle is the provider username and never changes; disabling is the only
way an identity leaves circulation.
"""

from pydantic import Field, SecretStr, computed_field

from clinic_iam.domain.model.common import DomainModel
from clinic_iam.domain.value import IdentityStatus


class Identity(DomainModel):
    """Identity as confirmed by the identity provider."""

    handle: str
    active: bool = True
    attributes: dict[str, str] = Field(default_factory=dict)
    groups: frozenset[str] = frozenset()

    @computed_field
    @property
    def status(self) -> IdentityStatus:
        """Lifecycle status derived from ``active``."""
        return IdentityStatus.from_active(self.active)

    def with_attributes(self, partial: dict[str, str] | None) -> "Identity":
        """Return a copy with ``partial`` merged over the current attributes.

        Args:
            partial: Attribute values to overwrite or add

        Returns:
            New identity instance
        """
        if not partial:
            return self
        return self.model_copy(update={"attributes": {**self.attributes, **partial}})


class IdentityCandidate(DomainModel):
    """Input for creating an identity.

    The password travels next to the attributes, not inside them, and is
    dropped when the candidate becomes an ``Identity``.
    """

    handle: str
    attributes: dict[str, str] = Field(default_factory=dict)
    password: SecretStr | None = None

    def to_identity(self) -> Identity:
        """Build the identity handed to the provider (no password)."""
        return Identity(handle=self.handle, active=True, attributes=dict(self.attributes))
