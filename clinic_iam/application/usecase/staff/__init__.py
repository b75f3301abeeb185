"""Staff use cases."""

from .enroll_staff_member import EnrollStaffMemberRequest, EnrollStaffMemberUseCase
from .response import StaffMemberResponse
from .update_staff_profile import UpdateStaffProfileRequest, UpdateStaffProfileUseCase

__all__ = [
    "EnrollStaffMemberRequest",
    "EnrollStaffMemberUseCase",
    "StaffMemberResponse",
    "UpdateStaffProfileRequest",
    "UpdateStaffProfileUseCase",
]
