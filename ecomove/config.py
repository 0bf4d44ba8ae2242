from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ecomove.application.use_cases.find_available_transports import MissingDistancePolicy
from ecomove.domain.constants import DEFAULT_CURRENCY, DEFAULT_SEARCH_RADIUS_KM, PASSWORD_MIN_LENGTH


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_base_url: str = "http://localhost:3000"
    api_timeout_seconds: float = Field(default=10.0, gt=0)
    api_retry_times: int = Field(default=2, ge=0)
    api_retry_base_delay: float = Field(default=0.3, ge=0)
    use_in_memory: bool = True

    default_currency: str = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)
    password_min_length: int = Field(default=PASSWORD_MIN_LENGTH, ge=1)
    default_search_radius_km: float = Field(default=DEFAULT_SEARCH_RADIUS_KM, gt=0)
    missing_distance_policy: MissingDistancePolicy = MissingDistancePolicy.FIRST

    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
