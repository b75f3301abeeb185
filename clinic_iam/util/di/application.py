"""Application layer DI providers."""

from dishka import Scope, provide

from clinic_iam.application.usecase.staff import (
    EnrollStaffMemberUseCase,
    UpdateStaffProfileUseCase,
)
from clinic_iam.domain.service import IdentityService
from clinic_iam.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_enroll_staff_member_use_case(
        self, identity_service: IdentityService
    ) -> EnrollStaffMemberUseCase:
        """Provide enroll staff member use case."""
        return EnrollStaffMemberUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_update_staff_profile_use_case(
        self, identity_service: IdentityService
    ) -> UpdateStaffProfileUseCase:
        """Provide update staff profile use case."""
        return UpdateStaffProfileUseCase(identity_service=identity_service)
