"""
Integration tests de la traducción de errores a HTTP.

- Cada tipo de error de dominio tiene su status code
- Las excepciones no controladas responden 500 con error_id y sin stack trace
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from ecomove.api.dependencies import get_use_cases
from ecomove.api.errors import status_for
from ecomove.domain.errors import (
    BusinessRuleViolation,
    ConflictError,
    DomainError,
    InvalidTransitionError,
    NotFoundError,
    RepositoryError,
    TransientError,
    ValidationError,
)
from ecomove.main import app


@pytest.mark.parametrize(
    "error, expected",
    [
        (ValidationError("email", "Formato de correo inválido"), 422),
        (NotFoundError("loan", 1), 404),
        (BusinessRuleViolation("Estación inactiva", code="STATION_NOT_ACTIVE"), 409),
        (InvalidTransitionError("loan", "completed", "cancelled"), 409),
        (ConflictError("Préstamo activo", code="USER_HAS_ACTIVE_LOAN"), 409),
        (TransientError("Sin conexión"), 503),
        (RepositoryError("INVALID_TOKEN", status_code=401), 401),
        (RepositoryError("INVALID_RESPONSE"), 502),
        (DomainError("No fue posible crear el préstamo", code="OPERATION_FAILED"), 400),
    ],
)
def test_status_for_each_error_kind(error, expected):
    assert status_for(error) == expected


class TestUnhandledErrors:
    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_unexpected_exception_hides_details(self):
        broken = AsyncMock()
        broken.execute.side_effect = RuntimeError("pool exhausted at 10.0.0.12")
        app.dependency_overrides[get_use_cases] = lambda: {"find_available_transports": broken}

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/v1/transports/available")

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == "INTERNAL_ERROR"
        assert data["error_id"]
        assert "10.0.0.12" not in response.text

    def test_transient_errors_are_503(self):
        failing = AsyncMock()
        failing.execute.side_effect = TransientError("Error de conexión")
        app.dependency_overrides[get_use_cases] = lambda: {"find_available_transports": failing}

        with TestClient(app) as client:
            response = client.get("/api/v1/transports/available")

        assert response.status_code == 503
        assert response.json() == {"detail": "Error de conexión", "code": "NETWORK_ERROR"}
