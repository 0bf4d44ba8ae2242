import logging
import re

from ecomove.application.dtos.auth_dto import RegisterData
from ecomove.application.error_mapping import REGISTER_ERRORS, REGISTER_FALLBACK, translate
from ecomove.application.interfaces.auth_repo import AuthRepository, AuthResult
from ecomove.application.session import SessionContext
from ecomove.domain.constants import NAME_MAX_LENGTH, NAME_MIN_LENGTH, PASSWORD_MIN_LENGTH
from ecomove.domain.entities.user import CreateUserData
from ecomove.domain.errors import RepositoryError, ValidationError
from ecomove.domain.value_objects.document_number import DocumentNumber
from ecomove.domain.value_objects.email import Email
from ecomove.domain.value_objects.phone import Phone

UPPERCASE = re.compile(r"[A-Z]")
LOWERCASE = re.compile(r"[a-z]")
DIGIT = re.compile(r"\d")


def is_password_strong(password: str) -> bool:
    """Al menos una mayúscula, una minúscula y un dígito."""
    return bool(UPPERCASE.search(password) and LOWERCASE.search(password) and DIGIT.search(password))


class RegisterUserUseCase:
    """
    Registra un usuario nuevo.

    Los campos se validan y normalizan con los value objects antes de enviarlos
    al AuthRepository.
    """

    def __init__(
        self,
        auth_repo: AuthRepository,
        password_min_length: int = PASSWORD_MIN_LENGTH,
        session: SessionContext | None = None,
    ) -> None:
        self._auth_repo = auth_repo
        self._password_min_length = password_min_length
        self._session = session
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: RegisterData) -> AuthResult:
        user_data = self.validate(data)

        try:
            result = await self._auth_repo.register(user_data)
        except RepositoryError as exc:
            self._logger.warning("Registration failed", extra={"error_code": exc.code})
            raise translate(exc, REGISTER_ERRORS, REGISTER_FALLBACK) from exc

        if self._session is not None:
            self._session.start(result)
        self._logger.info("User registered", extra={"user_id": result.user.id})
        return result

    def validate(self, data: RegisterData) -> CreateUserData:
        """Retorna los datos normalizados o falla en la primera regla violada."""
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("name", "El nombre es obligatorio")
        if len(name) < NAME_MIN_LENGTH:
            raise ValidationError("name", f"El nombre debe tener al menos {NAME_MIN_LENGTH} caracteres")
        if len(name) > NAME_MAX_LENGTH:
            raise ValidationError("name", f"El nombre debe tener menos de {NAME_MAX_LENGTH} caracteres")

        if not (data.email or "").strip():
            raise ValidationError("email", "El email es obligatorio")
        email = Email.create(data.email)

        if not (data.document_number or "").strip():
            raise ValidationError("document_number", "El número de documento es obligatorio")
        document = DocumentNumber.create(data.document_number)

        if not (data.phone or "").strip():
            raise ValidationError("phone", "El número de celular es obligatorio")
        phone = Phone.create(data.phone)

        self.validate_password(data.password)

        return CreateUserData(
            name=name,
            email=email.value,
            document_number=document.value,
            phone=phone.value,
            password=data.password,
        )

    def validate_password(self, password: str | None) -> None:
        if not (password or "").strip():
            raise ValidationError("password", "La contraseña es obligatoria")
        if len(password) < self._password_min_length:
            raise ValidationError(
                "password",
                f"La contraseña debe tener al menos {self._password_min_length} caracteres",
                code="WEAK_PASSWORD",
            )
        if not is_password_strong(password):
            raise ValidationError(
                "password",
                "La contraseña debe contener al menos una mayúscula, una minúscula y un número",
                code="WEAK_PASSWORD",
            )
