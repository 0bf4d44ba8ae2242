import pytest

from ecomove.application.error_mapping import (
    CREATE_LOAN_ERRORS,
    CREATE_LOAN_FALLBACK,
    FIND_TRANSPORTS_ERRORS,
    FIND_TRANSPORTS_FALLBACK,
    LOGIN_ERRORS,
    LOGIN_FALLBACK,
    REGISTER_ERRORS,
    REGISTER_FALLBACK,
    UNMAPPED_CODE,
    translate,
)
from ecomove.domain.errors import (
    BusinessRuleViolation,
    ConflictError,
    DomainError,
    NotFoundError,
    RepositoryError,
    TransientError,
    ValidationError,
)


@pytest.mark.parametrize(
    "code, table, fallback, expected_type",
    [
        ("USER_HAS_ACTIVE_LOAN", CREATE_LOAN_ERRORS, CREATE_LOAN_FALLBACK, ConflictError),
        ("INSUFFICIENT_BATTERY", CREATE_LOAN_ERRORS, CREATE_LOAN_FALLBACK, BusinessRuleViolation),
        ("PAYMENT_METHOD_INVALID", CREATE_LOAN_ERRORS, CREATE_LOAN_FALLBACK, ValidationError),
        ("STATION_NOT_FOUND", FIND_TRANSPORTS_ERRORS, FIND_TRANSPORTS_FALLBACK, NotFoundError),
        ("INVALID_CREDENTIALS", LOGIN_ERRORS, LOGIN_FALLBACK, ValidationError),
        ("EMAIL_ALREADY_EXISTS", REGISTER_ERRORS, REGISTER_FALLBACK, ConflictError),
        ("NETWORK_ERROR", REGISTER_ERRORS, REGISTER_FALLBACK, TransientError),
    ],
)
def test_known_codes_map_to_their_kind(code, table, fallback, expected_type):
    error = translate(RepositoryError(code, "raw backend text"), table, fallback)

    assert isinstance(error, expected_type)
    assert error.message == table[code].message
    assert "raw backend text" not in error.message


def test_not_found_keeps_entity_code():
    error = translate(RepositoryError("STATION_NOT_FOUND"), FIND_TRANSPORTS_ERRORS, FIND_TRANSPORTS_FALLBACK)

    assert error.code == "STATION_NOT_FOUND"
    assert error.entity == "station"


def test_unknown_code_uses_fallback_and_hides_raw_code():
    error = translate(RepositoryError("DB_EXPLODED", "stack trace here"), LOGIN_ERRORS, LOGIN_FALLBACK)

    assert type(error) is DomainError
    assert error.message == LOGIN_FALLBACK
    assert error.code == UNMAPPED_CODE


def test_network_error_message_is_shared():
    create = translate(RepositoryError("NETWORK_ERROR"), CREATE_LOAN_ERRORS, CREATE_LOAN_FALLBACK)
    login = translate(RepositoryError("NETWORK_ERROR"), LOGIN_ERRORS, LOGIN_FALLBACK)

    assert create.message == login.message
