"""Rutas del backend REST."""

AUTH_LOGIN = "/api/v1/users/auth/login"
AUTH_REGISTER = "/api/v1/users/auth/register"
AUTH_REFRESH = "/api/v1/users/auth/refresh"
AUTH_LOGOUT = "/api/v1/users/auth/logout"
AUTH_VERIFY_TOKEN = "/api/v1/users/verify-token"

USERS = "/api/v1/users"
USER_PROFILE = "/api/v1/users/profile"

TRANSPORTS = "/api/v1/transports"
TRANSPORTS_AVAILABLE = "/api/v1/transports/available"
TRANSPORTS_NEARBY = "/api/v1/transports/nearby"

STATIONS = "/api/v1/stations"
STATIONS_NEARBY = "/api/v1/stations/nearby"
STATIONS_WITH_TRANSPORTS = "/api/v1/stations/with-transports"
STATIONS_WITH_SPACE = "/api/v1/stations/with-space"

LOANS = "/api/v1/loans"
LOANS_ACTIVE = "/api/v1/loans/active"
LOANS_OVERDUE = "/api/v1/loans/overdue"

HEALTH = "/health"


def user_by_id(user_id: int) -> str:
    return f"{USERS}/{user_id}"


def transport_by_id(transport_id: int) -> str:
    return f"{TRANSPORTS}/{transport_id}"


def station_by_id(station_id: int) -> str:
    return f"{STATIONS}/{station_id}"


def station_transports(station_id: int) -> str:
    return f"{STATIONS}/{station_id}/transports"


def station_transport_count(station_id: int) -> str:
    return f"{STATIONS}/{station_id}/transport-count"


def loan_by_id(loan_id: int) -> str:
    return f"{LOANS}/{loan_id}"


def loan_complete(loan_id: int) -> str:
    return f"{LOANS}/{loan_id}/complete"


def loan_cancel(loan_id: int) -> str:
    return f"{LOANS}/{loan_id}/cancel"
