"""Value Object Email - correo electrónico normalizado."""

import re
from dataclasses import dataclass

from ecomove.domain.constants import EMAIL_MAX_LENGTH
from ecomove.domain.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email:
    """
    Correo electrónico en minúsculas y sin espacios.

    La normalización ocurre al construir, por lo que dos entradas que difieren
    solo en mayúsculas o espacios producen el mismo valor.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("email", "Formato de correo inválido")
        normalized = self.value.strip().lower()
        if len(normalized) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.match(normalized):
            raise ValidationError("email", "Formato de correo inválido", code="INVALID_EMAIL")
        object.__setattr__(self, "value", normalized)

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, email: str) -> "Email":
        return cls(email)
