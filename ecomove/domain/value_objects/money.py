"""Value Object Money - representa un valor monetario con su moneda."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ecomove.domain.constants import DEFAULT_CURRENCY
from ecomove.domain.errors import ValidationError


@dataclass(frozen=True)
class Money:
    """
    Value Object inmutable que representa un monto monetario.

    Attributes:
        amount: Monto decimal, nunca negativo.
        currency: Código ISO 4217 de la moneda (ej: COP, USD).
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except InvalidOperation:
                raise ValidationError("amount", f"amount no es numérico: {self.amount!r}")

        if not self.amount.is_finite():
            raise ValidationError("amount", f"amount no es finito: {self.amount}")

        if not self.currency or len(self.currency) != 3:
            raise ValidationError("currency", f"currency debe ser de 3 caracteres: {self.currency!r}")

        if self.amount < 0:
            raise ValidationError("amount", f"amount no puede ser negativo: {self.amount}")

    def add(self, other: "Money") -> "Money":
        self._ensure_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: "Money") -> "Money":
        self._ensure_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise ValidationError("amount", "El resultado de la resta no puede ser negativo")
        return Money(amount=result, currency=self.currency)

    def multiply(self, factor: int | float | Decimal) -> "Money":
        factor = Decimal(str(factor))
        if factor < 0:
            raise ValidationError("factor", f"factor no puede ser negativo: {factor}")
        return Money(amount=self.amount * factor, currency=self.currency)

    def divide(self, divisor: int | float | Decimal) -> "Money":
        divisor = Decimal(str(divisor))
        if divisor <= 0:
            raise ValidationError("divisor", f"divisor debe ser positivo: {divisor}")
        return Money(amount=self.amount / divisor, currency=self.currency)

    def is_greater_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def is_less_than(self, other: "Money") -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    def _ensure_same_currency(self, other: "Money") -> None:
        if not isinstance(other, Money):
            raise TypeError(f"No se puede operar Money con {type(other)}")
        if self.currency != other.currency:
            raise ValidationError(
                "currency",
                f"Monedas diferentes: {self.currency} vs {other.currency}",
            )

    def format(self) -> str:
        """Formato de visualización colombiano: separador de miles con punto."""
        if self.amount == self.amount.to_integral_value():
            digits = f"{self.amount:,.0f}"
        else:
            digits = f"{self.amount:,.2f}"
        digits = digits.replace(",", "_").replace(".", ",").replace("_", ".")
        return f"${digits} {self.currency}"

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    @classmethod
    def create(cls, amount: int | float | str | Decimal, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(amount=amount, currency=currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Crea un Money con valor cero."""
        return cls(amount=Decimal("0"), currency=currency)
