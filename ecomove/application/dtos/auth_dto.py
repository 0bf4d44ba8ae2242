"""DTOs para autenticación y registro."""

from dataclasses import dataclass, field


@dataclass
class LoginCredentials:
    email: str
    password: str = field(repr=False)
    remember_me: bool = False


@dataclass
class RegisterData:
    name: str
    email: str
    document_number: str
    phone: str
    password: str = field(repr=False)
