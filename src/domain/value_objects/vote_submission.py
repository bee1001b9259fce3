"""Vote form input and the payload posted to the electoral API."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class VoteFormData:
    """Raw values of the vote form, exactly as typed.

    Every text field may be empty; ``age`` and ``candidate_id`` are ``None``
    until the voter fills them in.
    """

    candidate_id: int | None = None
    first_name: str = ""
    last_name: str = ""
    dni: str = ""
    email: str = ""
    phone: str = ""
    department: str = ""
    province: str = ""
    district: str = ""
    age: int | None = None
    gender: str = ""
    education: str = ""

    def to_submission(self) -> "VoteSubmission":
        """Build the API payload. Call only after validation passed."""
        if self.candidate_id is None or self.age is None:
            raise ValueError("candidate_id and age are required")
        return VoteSubmission(
            nombre=self.first_name.strip(),
            apellido=self.last_name.strip(),
            dni=self.dni,
            email=self.email.strip(),
            celular="".join(self.phone.split()),
            departamento=self.department,
            provincia=self.province,
            distrito=self.district,
            edad=self.age,
            genero=self.gender,
            educacion=self.education,
            candidate_id=self.candidate_id,
        )


@dataclass(frozen=True)
class VoteSubmission:
    """Body of ``POST /votes``. Field names follow the API."""

    nombre: str
    apellido: str
    dni: str
    email: str
    celular: str
    departamento: str
    provincia: str
    distrito: str
    edad: int
    genero: str
    educacion: str
    candidate_id: int

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)
