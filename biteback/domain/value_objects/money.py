"""Money value object with currency"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

CENT = Decimal("0.01")

Number = Union[Decimal, int, str]


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str = "EGP"

    def __post_init__(self):
        if isinstance(self.amount, float):
            raise TypeError("Money does not accept floats, use Decimal or str")
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(self.amount))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if not self.currency:
            raise ValueError("Currency required")

    @classmethod
    def zero(cls, currency: str = "EGP") -> "Money":
        return cls(Decimal("0"), currency)

    @classmethod
    def of(cls, amount: Number, currency: str = "EGP") -> "Money":
        return cls(Decimal(str(amount)), currency)

    @classmethod
    def sum(cls, values: Iterable["Money"], currency: str = "EGP") -> "Money":
        total = cls.zero(currency)
        for value in values:
            total = total + value
        return total

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(f"Currency mismatch: {self.currency} != {other.currency}")

    def __add__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, factor: int) -> "Money":
        if not isinstance(factor, (int, Decimal)) or isinstance(factor, bool):
            raise TypeError("Money can only be multiplied by int or Decimal")
        return Money(self.amount * factor, self.currency)

    __rmul__ = __mul__

    def __lt__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        self._check_currency(other)
        return self.amount <= other.amount

    def percentage(self, percent: Number) -> "Money":
        """``percent`` % of this amount, rounded half-up to the cent."""
        value = (self.amount * Decimal(str(percent)) / Decimal("100")).quantize(CENT, rounding=ROUND_HALF_UP)
        return Money(value, self.currency)

    def rounded(self) -> "Money":
        return Money(self.amount.quantize(CENT, rounding=ROUND_HALF_UP), self.currency)

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"
