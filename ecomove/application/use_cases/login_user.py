import logging

from ecomove.application.dtos.auth_dto import LoginCredentials
from ecomove.application.error_mapping import LOGIN_ERRORS, LOGIN_FALLBACK, translate
from ecomove.application.interfaces.auth_repo import AuthRepository, AuthResult
from ecomove.application.session import SessionContext
from ecomove.domain.constants import LOGIN_PASSWORD_MIN_LENGTH
from ecomove.domain.errors import BusinessRuleViolation, RepositoryError, ValidationError
from ecomove.domain.value_objects.email import Email


class LoginUserUseCase:
    """
    Autentica un usuario contra el AuthRepository.

    Además de las credenciales, rechaza cuentas suspendidas o inactivas aunque
    el servidor las haya autenticado.
    """

    def __init__(self, auth_repo: AuthRepository, session: SessionContext | None = None) -> None:
        self._auth_repo = auth_repo
        self._session = session
        self._logger = logging.getLogger(__name__)

    async def execute(self, credentials: LoginCredentials) -> AuthResult:
        email = self.validate_credentials(credentials)

        try:
            result = await self._auth_repo.login(email.value, credentials.password)
        except RepositoryError as exc:
            self._logger.warning(
                "Login failed", extra={"email_domain": email.domain, "error_code": exc.code}
            )
            raise translate(exc, LOGIN_ERRORS, LOGIN_FALLBACK) from exc

        user = result.user
        if user.is_suspended():
            raise BusinessRuleViolation(
                "La cuenta está suspendida. Contacta a soporte.", code="USER_SUSPENDED"
            )
        if not user.is_active():
            raise BusinessRuleViolation(
                "La cuenta no está activa. Contacta a soporte.", code="USER_INACTIVE"
            )

        if self._session is not None:
            self._session.start(result)
        self._logger.info("User logged in", extra={"user_id": user.id, "role": user.role.value})
        return result

    @staticmethod
    def validate_credentials(credentials: LoginCredentials) -> Email:
        if not (credentials.email or "").strip():
            raise ValidationError("email", "El email es obligatorio")
        if not (credentials.password or "").strip():
            raise ValidationError("password", "La contraseña es obligatoria")
        if len(credentials.password) < LOGIN_PASSWORD_MIN_LENGTH:
            raise ValidationError("password", "La contraseña es demasiado corta")
        return Email.create(credentials.email)
