"""Client-side validation of the vote form and the identity-access form.

Rules run in a fixed order and the first failing rule decides the message
shown to the voter. These checks are advisory only; duplicate votes and any
other integrity rule are enforced by the electoral API.
"""

import re

from dataclasses import dataclass
from datetime import date

from src.domain.constants import (
    DNI_LENGTH,
    MAX_VOTER_AGE,
    MIN_VOTER_AGE,
    PHONE_LENGTH,
)
from src.domain.value_objects.vote_submission import VoteFormData
from src.domain.value_objects.voter_access import VoterAccessData


MSG_REQUIRED_FIELDS = "Por favor complete todos los campos requeridos"
MSG_INVALID_DNI = "El DNI debe tener 8 dígitos"
MSG_INVALID_PHONE = "El número de celular debe tener 9 dígitos"
MSG_INVALID_EMAIL = "Ingrese un correo electrónico válido"
MSG_INVALID_AGE = "La edad debe estar entre 18 y 99 años"

MSG_ACCESS_INVALID_DNI = "El DNI debe tener exactamente 8 dígitos"
MSG_ACCESS_UNDERAGE = "Debe ser mayor de 18 años para ejercer el derecho al voto"

_DNI_PATTERN = re.compile(rf"\d{{{DNI_LENGTH}}}", re.ASCII)
_PHONE_PATTERN = re.compile(rf"\d{{{PHONE_LENGTH}}}", re.ASCII)
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a form validation."""

    is_valid: bool
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, error_message=message)


def is_valid_dni(dni: str | None) -> bool:
    """True iff ``dni`` is exactly eight ASCII digits."""
    if not dni:
        return False
    return _DNI_PATTERN.fullmatch(dni) is not None


def is_valid_phone(phone: str | None) -> bool:
    """True iff ``phone`` has exactly nine digits once whitespace is removed."""
    if not phone:
        return False
    compact = "".join(phone.split())
    return _PHONE_PATTERN.fullmatch(compact) is not None


def is_valid_email(email: str | None) -> bool:
    """Loose ``local@domain.tld`` shape check."""
    if not email:
        return False
    return _EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_age(age: int | None) -> bool:
    return age is not None and MIN_VOTER_AGE <= age <= MAX_VOTER_AGE


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_vote_fields(form: VoteFormData) -> list[str]:
    """Names of the required vote-form fields left empty."""
    required = {
        "candidate_id": form.candidate_id,
        "first_name": form.first_name,
        "last_name": form.last_name,
        "dni": form.dni,
        "phone": form.phone,
        "department": form.department,
        "province": form.province,
        "district": form.district,
        "email": form.email,
        "age": form.age,
        "gender": form.gender,
        "education": form.education,
    }
    return [name for name, value in required.items() if _is_blank(value)]


def validate_vote_form(form: VoteFormData) -> ValidationResult:
    """Validate the vote form; the first failing rule wins."""
    if missing_vote_fields(form):
        return ValidationResult.fail(MSG_REQUIRED_FIELDS)
    if not is_valid_dni(form.dni):
        return ValidationResult.fail(MSG_INVALID_DNI)
    if not is_valid_phone(form.phone):
        return ValidationResult.fail(MSG_INVALID_PHONE)
    if not is_valid_email(form.email.strip()):
        return ValidationResult.fail(MSG_INVALID_EMAIL)
    if not is_valid_age(form.age):
        return ValidationResult.fail(MSG_INVALID_AGE)
    return ValidationResult.ok()


def calculate_age(birth_date: date, today: date) -> int:
    """Whole years between ``birth_date`` and ``today``."""
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def validate_voter_access(data: VoterAccessData, today: date) -> ValidationResult:
    """Validate the identity form shown before the candidate browser."""
    fields = (
        data.dni,
        data.first_names,
        data.last_names,
        data.birth_date,
        data.region,
        data.district,
    )
    if any(_is_blank(value) for value in fields):
        return ValidationResult.fail(MSG_REQUIRED_FIELDS)
    if not is_valid_dni(data.dni):
        return ValidationResult.fail(MSG_ACCESS_INVALID_DNI)
    assert data.birth_date is not None
    if calculate_age(data.birth_date, today) < MIN_VOTER_AGE:
        return ValidationResult.fail(MSG_ACCESS_UNDERAGE)
    return ValidationResult.ok()
