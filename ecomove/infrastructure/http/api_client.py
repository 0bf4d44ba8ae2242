import json
import logging
from typing import Any

import httpx

from ecomove.domain.errors import RepositoryError
from ecomove.infrastructure.http.retry import NETWORK_ERROR, retry_on_transient

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Thin JSON client for the rental backend.

    Every failure is raised as RepositoryError:
    - error bodies `{"code": ..., "message": ...}` keep the backend code,
    - other non-2xx responses get `HTTP_<status>`,
    - timeouts and connection failures get NETWORK_ERROR.

    GET requests are retried on NETWORK_ERROR; writes are never retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        retry_times: int = 2,
        retry_base_delay: float = 0.3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )
        self._retry_times = retry_times
        self._retry_base_delay = retry_base_delay
        self._access_token: str | None = None
        self._refresh_token: str | None = None

    @property
    def access_token(self) -> str | None:
        return self._access_token

    def set_auth_tokens(self, access_token: str, refresh_token: str | None = None) -> None:
        self._access_token = access_token
        self._refresh_token = refresh_token

    def clear_auth_tokens(self) -> None:
        self._access_token = None
        self._refresh_token = None

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        async def _call() -> Any:
            return await self._request("GET", path, params=params)

        return await retry_on_transient(
            _call,
            max_attempts=self._retry_times + 1,
            base_delay=self._retry_base_delay,
        )

    async def post(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        return await self._request("POST", path, payload=payload)

    async def put(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        return await self._request("PUT", path, payload=payload)

    async def patch(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        return await self._request("PATCH", path, payload=payload)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        headers = {"Accept": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        try:
            response = await self._client.request(
                method, path, params=params, json=payload, headers=headers
            )
        except httpx.TimeoutException as exc:
            logger.warning("Backend request timeout", extra={"method": method, "path": path})
            raise RepositoryError(NETWORK_ERROR, f"Timeout: {exc}") from exc
        except httpx.TransportError as exc:
            logger.warning(
                "Backend unreachable", extra={"method": method, "path": path, "error": str(exc)}
            )
            raise RepositoryError(NETWORK_ERROR, str(exc)) from exc

        body: Any = None
        if response.content:
            try:
                body = response.json()
            except json.JSONDecodeError:
                body = None

        if response.is_success:
            return body

        code = body.get("code") if isinstance(body, dict) else None
        message = body.get("message") if isinstance(body, dict) else None
        logger.info(
            "Backend returned an error",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "error_code": code,
            },
        )
        raise RepositoryError(
            code or f"HTTP_{response.status_code}",
            message or response.reason_phrase,
            status_code=response.status_code,
        )
