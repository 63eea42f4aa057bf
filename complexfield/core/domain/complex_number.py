"""
ComplexNumber — Immutable модель комплексного числа

Комплексное число как упорядоченная пара вещественных (re, im).

Представление тотально: любая пара float является валидным значением,
шага нормализации нет. Неконечные компоненты (переполнение произведения)
не отвергаются при конструировании, их обнаруживает is_finite().

Вложение вещественных чисел выполняется только явно, через embed().
Операторы (+, -, *, /) принимают int/float с любой стороны и
вкладывают их тем же embed().
"""

import math
from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# COMPLEX NUMBER MODEL
# =============================================================================


class ComplexNumber(BaseModel):
    """
    Комплексное число re + im·i.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Равенство — точное покомпонентное (0.0 == -0.0). Для сравнения
    с толерантностью используйте complex_arithmetic.is_close.
    """

    re: float = Field(..., strict=True, description="Вещественная часть")
    im: float = Field(0.0, strict=True, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    @field_validator("re", "im")
    @classmethod
    def coerce_to_float(cls, v: float) -> float:
        """Целые компоненты хранятся как float."""
        return float(v)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def from_builtin(cls, value: complex) -> "ComplexNumber":
        """
        Конверсия из встроенного complex.

        Args:
            value: Встроенное комплексное число Python

        Returns:
            ComplexNumber с теми же компонентами
        """
        return cls(re=value.real, im=value.imag)

    def to_builtin(self) -> complex:
        """Конверсия во встроенный complex."""
        return complex(self.re, self.im)

    def __complex__(self) -> complex:
        return self.to_builtin()

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ComplexNumber":
        """
        Построение из сериализованной формы {"re": ..., "im": ...}.

        Payload проверяется против JSON Schema контракта complex_number.

        Args:
            data: Сериализованное комплексное число (dict)

        Returns:
            ComplexNumber

        Raises:
            jsonschema.ValidationError: Если payload не соответствует контракту
                (в том числе при NaN/Inf компонентах)
        """
        from complexfield.core.contracts.validators import validate_complex_number

        validate_complex_number(data)
        return cls(re=data["re"], im=data["im"])

    def to_payload(self) -> Dict[str, float]:
        """
        Сериализованная форма {"re": ..., "im": ...}.

        Строгий JSON не кодирует NaN/Infinity, поэтому payload проверяется
        тем же контрактом, что и в from_payload.

        Raises:
            jsonschema.ValidationError: Если компонента неконечна (NaN/Inf)
        """
        from complexfield.core.contracts.validators import validate_complex_number

        payload = self.model_dump()
        validate_complex_number(payload)
        return payload

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def is_finite(self) -> bool:
        """True если обе компоненты конечны (не NaN, не Inf)."""
        return math.isfinite(self.re) and math.isfinite(self.im)

    def is_real(self) -> bool:
        """True если число лежит на вещественной оси (im == 0)."""
        return self.im == 0.0

    def conjugate(self) -> "ComplexNumber":
        """Комплексно-сопряжённое число (re, -im)."""
        from complexfield.core.math.complex_arithmetic import conjugate

        return conjugate(self)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "ComplexNumber":
        from complexfield.core.math.complex_arithmetic import add

        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        return add(self, rhs)

    def __radd__(self, other: object) -> "ComplexNumber":
        from complexfield.core.math.complex_arithmetic import add

        lhs = _as_operand(other)
        if lhs is None:
            return NotImplemented
        return add(lhs, self)

    def __sub__(self, other: object) -> "ComplexNumber":
        from complexfield.core.math.complex_arithmetic import subtract

        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        return subtract(self, rhs)

    def __rsub__(self, other: object) -> "ComplexNumber":
        from complexfield.core.math.complex_arithmetic import subtract

        lhs = _as_operand(other)
        if lhs is None:
            return NotImplemented
        return subtract(lhs, self)

    def __mul__(self, other: object) -> "ComplexNumber":
        from complexfield.core.math.complex_arithmetic import multiply

        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        return multiply(self, rhs)

    def __rmul__(self, other: object) -> "ComplexNumber":
        from complexfield.core.math.complex_arithmetic import multiply

        lhs = _as_operand(other)
        if lhs is None:
            return NotImplemented
        return multiply(lhs, self)

    def __truediv__(self, other: object) -> "ComplexNumber":
        from complexfield.core.math.complex_arithmetic import divide

        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        return divide(self, rhs)

    def __rtruediv__(self, other: object) -> "ComplexNumber":
        from complexfield.core.math.complex_arithmetic import divide

        lhs = _as_operand(other)
        if lhs is None:
            return NotImplemented
        return divide(lhs, self)

    def __neg__(self) -> "ComplexNumber":
        from complexfield.core.math.complex_arithmetic import negate

        return negate(self)

    def __abs__(self) -> float:
        from complexfield.core.math.complex_arithmetic import norm

        return norm(self)

    def __str__(self) -> str:
        sign = "-" if math.copysign(1.0, self.im) < 0 else "+"
        return f"{self.re}{sign}{abs(self.im)}i"


# =============================================================================
# ВЛОЖЕНИЕ И КОНСТАНТЫ
# =============================================================================


def embed(r: float) -> ComplexNumber:
    """
    Вложение вещественного числа: r → (r, 0).

    Args:
        r: Вещественное число

    Returns:
        ComplexNumber с нулевой мнимой частью

    Examples:
        >>> embed(2.5)
        ComplexNumber(re=2.5, im=0.0)
    """
    return ComplexNumber(re=r, im=0.0)


def _as_operand(value: object) -> Optional[ComplexNumber]:
    # bool — подкласс int, но не вещественное число
    if isinstance(value, ComplexNumber):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return embed(value)


# Аддитивная единица (0, 0)
ZERO: Final[ComplexNumber] = ComplexNumber(re=0.0, im=0.0)

# Мультипликативная единица (1, 0)
ONE: Final[ComplexNumber] = ComplexNumber(re=1.0, im=0.0)

# Мнимая единица (0, 1)
I: Final[ComplexNumber] = ComplexNumber(re=0.0, im=1.0)
