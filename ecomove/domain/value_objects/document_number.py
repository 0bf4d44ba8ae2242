"""Value Object DocumentNumber - cédula de ciudadanía colombiana."""

import re
from dataclasses import dataclass

from ecomove.domain.constants import DOCUMENT_NUMBER_MAX_LENGTH, DOCUMENT_NUMBER_MIN_LENGTH
from ecomove.domain.errors import ValidationError

NON_DIGITS = re.compile(r"\D")
DOCUMENT_PATTERN = re.compile(
    rf"^[1-9]\d{{{DOCUMENT_NUMBER_MIN_LENGTH - 1},{DOCUMENT_NUMBER_MAX_LENGTH - 1}}}$"
)


@dataclass(frozen=True)
class DocumentNumber:
    """Número de documento: solo dígitos, entre 8 y 11, sin cero inicial."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("document_number", "Número de documento colombiano inválido")
        normalized = NON_DIGITS.sub("", self.value.strip())
        if not DOCUMENT_PATTERN.match(normalized):
            raise ValidationError(
                "document_number",
                "Número de documento colombiano inválido",
                code="INVALID_DOCUMENT",
            )
        object.__setattr__(self, "value", normalized)

    def formatted(self) -> str:
        """Agrupa miles con punto: 1.023.456.789."""
        return f"{int(self.value):,}".replace(",", ".")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, document_number: str) -> "DocumentNumber":
        return cls(document_number)
