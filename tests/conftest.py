"""Test configuration and fixtures."""

from pydantic import SecretStr

from clinic_iam.domain.model import IdentityCandidate
from clinic_iam.domain.value import attributes as attrs

VALID_PASSWORD = "Passw0rd!"

# Short keyword -> provider attribute name, for make_candidate overrides
_FIELDS = {
    "first_name": attrs.GIVEN_NAME,
    "last_name": attrs.FAMILY_NAME,
    "document": attrs.DOCUMENT,
    "email": attrs.EMAIL,
    "phone": attrs.PHONE_NUMBER,
    "address": attrs.ADDRESS,
    "birthdate": attrs.BIRTHDATE,
}


def valid_attributes() -> dict[str, str]:
    """Attribute mapping that passes every creation rule."""
    return {
        attrs.GIVEN_NAME: "Ana",
        attrs.FAMILY_NAME: "Perez",
        attrs.DOCUMENT: "123456789",
        attrs.EMAIL: "user@test.com",
        attrs.PHONE_NUMBER: "3001234567",
        attrs.ADDRESS: "Calle 123",
        attrs.BIRTHDATE: "01/01/1990",
    }


def make_candidate(
    handle: str = "user123",
    password: str | None = VALID_PASSWORD,
    **overrides: str | None,
) -> IdentityCandidate:
    """Helper to build a creation candidate, valid unless overridden.

    Overrides use short names (``email=``, ``phone=``, ...); ``None`` drops
    the attribute.
    """
    values = valid_attributes()
    for key, value in overrides.items():
        name = _FIELDS[key]
        if value is None:
            values.pop(name, None)
        else:
            values[name] = value

    return IdentityCandidate(
        handle=handle,
        attributes=values,
        password=SecretStr(password) if password is not None else None,
    )
