"""Lectura de las respuestas del backend: `{"data": ..., "message": ..., "success": ...}`."""

from typing import Any, Callable, TypeVar

from ecomove.application.interfaces.pagination import PaginatedResponse
from ecomove.domain.errors import RepositoryError

T = TypeVar("T")


def unwrap(body: Any) -> Any:
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    raise RepositoryError("INVALID_RESPONSE", "Respuesta del backend sin campo 'data'")


def parse_data(data: Any, parser: Callable[[Any], T]) -> T:
    """
    Aplica un parser `from_api` sobre datos ya desenvueltos.

    Un payload con campos faltantes o con tipos inesperados no es un error de
    programación sino una respuesta inválida del backend.
    """
    try:
        return parser(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise RepositoryError("INVALID_RESPONSE", f"Payload del backend inválido: {exc!r}") from exc


def parse_entity(body: Any, parser: Callable[[Any], T]) -> T:
    return parse_data(unwrap(body), parser)


def parse_list(body: Any, parser: Callable[[Any], T]) -> list[T]:
    items = unwrap(body) or []
    if not isinstance(items, list):
        raise RepositoryError("INVALID_RESPONSE", "Se esperaba una lista en 'data'")
    return [parse_data(item, parser) for item in items]


def parse_page(body: Any, parser: Callable[[Any], T]) -> PaginatedResponse[T]:
    page = unwrap(body)
    if not isinstance(page, dict):
        raise RepositoryError("INVALID_RESPONSE", "Se esperaba una página en 'data'")
    return PaginatedResponse(
        data=[parse_data(item, parser) for item in page.get("data", [])],
        total=page.get("total", 0),
        page=page.get("page", 1),
        limit=page.get("limit", 10),
        total_pages=page.get("totalPages", 0),
    )


def is_not_found(error: RepositoryError) -> bool:
    return error.status_code == 404 or error.code == "HTTP_404"
