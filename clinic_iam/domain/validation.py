"""Validation rules for identity attributes and passwords.

Every rule is a pure function that returns ``None`` when the value is valid
and raises ``InvalidInputError`` naming the violated rule otherwise. Callers
get exactly one error per call: the first broken rule in a fixed order.

Creation order:
    handle -> document -> email -> phone -> address -> birthdate -> password
"""

import re
from collections.abc import Mapping
from datetime import date, datetime

from pydantic import SecretStr

from clinic_iam.domain.error import InvalidInputError
from clinic_iam.domain.model.identity import IdentityCandidate
from clinic_iam.domain.value import attributes as attrs

HANDLE_MAX_LENGTH = 15
PHONE_MAX_DIGITS = 10
ADDRESS_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 8
MAX_AGE_YEARS = 150

BIRTHDATE_FORMAT = "%d/%m/%Y"

HANDLE_PATTERN = re.compile(rf"[A-Za-z0-9]{{1,{HANDLE_MAX_LENGTH}}}")
PHONE_PATTERN = re.compile(rf"[0-9]{{1,{PHONE_MAX_DIGITS}}}")
BIRTHDATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
PASSWORD_PATTERN = re.compile(
    rf"(?=.*[A-Z])(?=.*[0-9])(?=.*[^A-Za-z0-9]).{{{PASSWORD_MIN_LENGTH},}}"
)

HANDLE_MESSAGE = (
    f"Username (handle) must be 1 to {HANDLE_MAX_LENGTH} alphanumeric characters"
)
DOCUMENT_MESSAGE = "Document id is required"
EMAIL_MESSAGE = "Email is not valid"
PHONE_MESSAGE = f"Phone must have 1 to {PHONE_MAX_DIGITS} digits"
ADDRESS_MESSAGE = f"Address must be <= {ADDRESS_MAX_LENGTH} characters"
BIRTHDATE_REQUIRED_MESSAGE = "Birthdate is required"
BIRTHDATE_FORMAT_MESSAGE = "Birthdate must be in format DD/MM/YYYY"
AGE_RANGE_MESSAGE = f"Age must be between 0 and {MAX_AGE_YEARS} years"
PASSWORD_MESSAGE = (
    "Password does not meet complexity requirements: "
    f"at least {PASSWORD_MIN_LENGTH} chars, 1 uppercase, 1 number, 1 special char"
)


def validate_handle(handle: str | None) -> None:
    """Handle must be 1-15 ASCII letters or digits."""
    if handle is None or not HANDLE_PATTERN.fullmatch(handle):
        raise InvalidInputError(HANDLE_MESSAGE, field="handle")


def validate_document(value: str | None) -> None:
    """Document id must be present and not blank."""
    if value is None or not value.strip():
        raise InvalidInputError(DOCUMENT_MESSAGE, field=attrs.DOCUMENT)


def validate_email(value: str | None) -> None:
    """Email must contain both ``@`` and ``.``."""
    if value is None or "@" not in value or "." not in value:
        raise InvalidInputError(EMAIL_MESSAGE, field=attrs.EMAIL)


def validate_phone(value: str | None) -> None:
    """Phone must be 1-10 decimal digits."""
    if value is None or not PHONE_PATTERN.fullmatch(value):
        raise InvalidInputError(PHONE_MESSAGE, field=attrs.PHONE_NUMBER)


def validate_address(value: str | None) -> None:
    """Address must be present and at most 30 characters long."""
    if value is None or len(value) > ADDRESS_MAX_LENGTH:
        raise InvalidInputError(ADDRESS_MESSAGE, field=attrs.ADDRESS)


def validate_birthdate(value: str | None, today: date | None = None) -> None:
    """Birthdate must parse as DD/MM/YYYY and give an age in [0, 150].

    A value with the wrong shape, or one that is not a real calendar date,
    fails with the format message so callers can tell it apart from an age
    outside the allowed range.

    Args:
        value: Birthdate string
        today: Reference date for the age (defaults to the current date)

    Raises:
        InvalidInputError: If the birthdate is missing, malformed or out of range
    """
    if value is None:
        raise InvalidInputError(BIRTHDATE_REQUIRED_MESSAGE, field=attrs.BIRTHDATE)
    if not BIRTHDATE_PATTERN.fullmatch(value):
        raise InvalidInputError(BIRTHDATE_FORMAT_MESSAGE, field=attrs.BIRTHDATE)
    try:
        born = datetime.strptime(value, BIRTHDATE_FORMAT).date()
    except ValueError as e:
        raise InvalidInputError(BIRTHDATE_FORMAT_MESSAGE, field=attrs.BIRTHDATE) from e

    age = age_in_years(born, today or date.today())
    if age < 0 or age > MAX_AGE_YEARS:
        raise InvalidInputError(AGE_RANGE_MESSAGE, field=attrs.BIRTHDATE)


def age_in_years(born: date, today: date) -> int:
    """Whole years elapsed from ``born`` to ``today``; negative for future dates."""
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def validate_password(password: str | SecretStr | None) -> None:
    """Password must have 8+ chars with an uppercase, a digit and a symbol."""
    if isinstance(password, SecretStr):
        password = password.get_secret_value()
    if password is None or not PASSWORD_PATTERN.fullmatch(password):
        raise InvalidInputError(PASSWORD_MESSAGE, field="password")


def validate_candidate(
    candidate: IdentityCandidate | None, today: date | None = None
) -> None:
    """Validate a full creation candidate, reporting the first broken rule.

    Args:
        candidate: Identity to be created
        today: Reference date for the birthdate age check

    Raises:
        InvalidInputError: On the first violated rule
    """
    if candidate is None:
        raise InvalidInputError("Identity is required")

    values = candidate.attributes
    validate_handle(candidate.handle)
    validate_document(values.get(attrs.DOCUMENT))
    validate_email(values.get(attrs.EMAIL))
    validate_phone(values.get(attrs.PHONE_NUMBER))
    validate_address(values.get(attrs.ADDRESS))
    validate_birthdate(values.get(attrs.BIRTHDATE), today)
    validate_password(candidate.password)


def validate_partial_attributes(
    values: Mapping[str, str] | None, today: date | None = None
) -> None:
    """Validate only the attributes present in a partial update.

    Absent attributes (missing keys or ``None`` values) are not required.
    Attributes without a rule are accepted as-is.

    Args:
        values: Partial attribute mapping
        today: Reference date for the birthdate age check

    Raises:
        InvalidInputError: On the first violated rule
    """
    if not values:
        return

    if values.get(attrs.DOCUMENT) is not None:
        validate_document(values[attrs.DOCUMENT])
    if values.get(attrs.EMAIL) is not None:
        validate_email(values[attrs.EMAIL])
    if values.get(attrs.PHONE_NUMBER) is not None:
        validate_phone(values[attrs.PHONE_NUMBER])
    if values.get(attrs.ADDRESS) is not None:
        validate_address(values[attrs.ADDRESS])
    if values.get(attrs.BIRTHDATE) is not None:
        validate_birthdate(values[attrs.BIRTHDATE], today)
