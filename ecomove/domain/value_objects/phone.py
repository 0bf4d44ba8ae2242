"""Value Object Phone - número celular colombiano."""

import re
from dataclasses import dataclass

from ecomove.domain.constants import PHONE_COUNTRY_CODE, PHONE_NUMBER_LENGTH
from ecomove.domain.errors import ValidationError

PHONE_PATTERN = re.compile(r"^3\d{9}$")
NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class Phone:
    """
    Celular colombiano de 10 dígitos que inicia en 3.

    Acepta el indicativo +57 y cualquier separador; se almacena solo el número nacional.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("phone", "Número de celular colombiano inválido")
        normalized = NON_DIGITS.sub("", self.value.strip())
        if (
            normalized.startswith(PHONE_COUNTRY_CODE)
            and len(normalized) == PHONE_NUMBER_LENGTH + len(PHONE_COUNTRY_CODE)
        ):
            normalized = normalized[len(PHONE_COUNTRY_CODE):]

        if not PHONE_PATTERN.match(normalized):
            raise ValidationError(
                "phone", "Número de celular colombiano inválido", code="INVALID_PHONE"
            )
        object.__setattr__(self, "value", normalized)

    def international(self) -> str:
        return f"+{PHONE_COUNTRY_CODE} {self.value}"

    def formatted(self) -> str:
        """Formato de visualización: 300 123 4567."""
        return f"{self.value[:3]} {self.value[3:6]} {self.value[6:]}"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, phone: str) -> "Phone":
        return cls(phone)
