"""Constantes del dominio de préstamos de micromovilidad."""

DEFAULT_CURRENCY = "COP"

# Reglas de validación (Colombia)
PASSWORD_MIN_LENGTH = 8
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
DOCUMENT_NUMBER_MIN_LENGTH = 8
DOCUMENT_NUMBER_MAX_LENGTH = 11
PHONE_NUMBER_LENGTH = 10
PHONE_COUNTRY_CODE = "57"

# Batería (porcentajes, límite superior inclusivo de cada banda)
BATTERY_CRITICAL_MAX = 10
BATTERY_LOW_MAX = 25
BATTERY_GOOD_MAX = 75
MIN_RENTABLE_BATTERY = BATTERY_CRITICAL_MAX

# Geografía
EARTH_RADIUS_KM = 6371.0
COORDINATE_TOLERANCE = 0.0001
DEFAULT_SEARCH_RADIUS_KM = 5.0

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 60 * 24

# Login: longitud mínima para intentar autenticación (el registro exige PASSWORD_MIN_LENGTH)
LOGIN_PASSWORD_MIN_LENGTH = 6
