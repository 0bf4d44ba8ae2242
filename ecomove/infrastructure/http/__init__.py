from ecomove.infrastructure.http.api_client import ApiClient
from ecomove.infrastructure.http.retry import is_transient_error, retry_on_transient

__all__ = ["ApiClient", "is_transient_error", "retry_on_transient"]
