"""Entidad User - usuario del sistema de préstamos."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ecomove.domain.constants import NAME_MIN_LENGTH
from ecomove.domain.entities.serialization import format_datetime, parse_datetime
from ecomove.domain.entities.state_transition import StateTransition
from ecomove.domain.errors import ValidationError
from ecomove.domain.value_objects.document_number import DocumentNumber
from ecomove.domain.value_objects.email import Email
from ecomove.domain.value_objects.phone import Phone


class UserRole(str, Enum):
    """Roles de usuario."""

    USER = "user"
    ADMIN = "admin"


class UserStatus(str, Enum):
    """Estados posibles de una cuenta."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


@dataclass(frozen=True)
class CreateUserData:
    """Datos de registro tal como llegan al repositorio de autenticación."""

    name: str
    email: str
    document_number: str
    phone: str
    password: str = field(repr=False)

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "documentNumber": self.document_number,
            "phone": self.phone,
            "password": self.password,
        }


@dataclass(frozen=True)
class User:
    """
    Usuario registrado.

    Es dueño exclusivo de sus value objects (email, documento, celular).
    """

    id: int
    name: str
    email: Email
    document_number: DocumentNumber
    phone: Phone
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    registration_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # === Predicados de negocio ===

    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def is_suspended(self) -> bool:
        return self.status == UserStatus.SUSPENDED

    def can_administrate(self) -> bool:
        return self.is_active() and self.is_admin()

    def can_rent_transport(self) -> bool:
        return self.is_active()

    # === Métodos de negocio ===

    def update_profile(
        self,
        name: str | None = None,
        phone: str | None = None,
        now: datetime | None = None,
    ) -> StateTransition[UserStatus]:
        """Valida los cambios de perfil y devuelve los campos a actualizar."""
        changes: dict[str, Any] = {"updated_at": now or datetime.now(timezone.utc)}

        if name is not None:
            if len(name.strip()) < NAME_MIN_LENGTH:
                raise ValidationError(
                    "name", f"El nombre debe tener al menos {NAME_MIN_LENGTH} caracteres"
                )
            changes["name"] = name.strip()

        if phone is not None:
            changes["phone"] = Phone.create(phone)

        return StateTransition(changes=changes)

    def apply(self, transition: StateTransition[UserStatus]) -> "User":
        return transition.apply_to(self)

    # === Factories ===

    @classmethod
    def register(cls, user_id: int, data: CreateUserData, now: datetime | None = None) -> "User":
        """Crea un usuario nuevo: rol USER, estado ACTIVE."""
        now = now or datetime.now(timezone.utc)
        return cls(
            id=user_id,
            name=data.name.strip(),
            email=Email.create(data.email),
            document_number=DocumentNumber.create(data.document_number),
            phone=Phone.create(data.phone),
            role=UserRole.USER,
            status=UserStatus.ACTIVE,
            registration_date=now,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            name=data["name"],
            email=Email.create(data["email"]),
            document_number=DocumentNumber.create(data["documentNumber"]),
            phone=Phone.create(data["phone"]),
            role=UserRole(data.get("role", UserRole.USER.value)),
            status=UserStatus(data.get("status", UserStatus.ACTIVE.value)),
            registration_date=parse_datetime(data.get("registrationDate")),
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email.value,
            "documentNumber": self.document_number.value,
            "phone": self.phone.value,
            "role": self.role.value,
            "status": self.status.value,
            "registrationDate": format_datetime(self.registration_date),
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }
