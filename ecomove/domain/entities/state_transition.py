"""Resultado explícito de una transición de estado de una entidad."""

from dataclasses import dataclass, field, replace
from typing import Any, Generic, Mapping, TypeVar

S = TypeVar("S")
E = TypeVar("E")


@dataclass(frozen=True)
class StateTransition(Generic[S]):
    """
    Cambios producidos por una operación de negocio.

    Las entidades nunca se mutan: la operación devuelve este resultado con
    exactamente los campos que cambian (y el nuevo estado, si aplica) y quien
    llama lo aplica con `apply_to`, que genera una copia actualizada.

    Attributes:
        changes: Campos modificados (nombre de atributo -> nuevo valor).
        status: Nuevo estado, o None si la operación no cambia el estado.
    """

    changes: Mapping[str, Any] = field(default_factory=dict)
    status: S | None = None

    @property
    def changed_fields(self) -> tuple[str, ...]:
        names = tuple(self.changes)
        return names + ("status",) if self.status is not None else names

    def as_updates(self) -> dict[str, Any]:
        updates = dict(self.changes)
        if self.status is not None:
            updates["status"] = self.status
        return updates

    def apply_to(self, entity: E) -> E:
        return replace(entity, **self.as_updates())
