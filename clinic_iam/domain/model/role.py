"""Clinical staff roles."""

from enum import Enum


class StaffRole(str, Enum):
    """Role of a staff member.

    Each role maps to the provider group that grants its permissions.
    """

    MEDICO = "MEDICO"
    ENFERMERA = "ENFERMERA"
    ADMINISTRATIVO = "ADMINISTRATIVO"
    RRHH = "RRHH"
    SOPORTE = "SOPORTE"

    @property
    def group_name(self) -> str:
        """Provider group for this role."""
        return _ROLE_GROUPS[self]


_ROLE_GROUPS = {
    StaffRole.MEDICO: "doctor",
    StaffRole.ENFERMERA: "nurse",
    StaffRole.ADMINISTRATIVO: "administrative",
    StaffRole.RRHH: "humanR",
    StaffRole.SOPORTE: "support",
}
