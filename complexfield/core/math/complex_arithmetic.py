"""
Complex Arithmetic — поле комплексных чисел

Модуль реализует полную структуру поля над ComplexNumber:
- Сложение, отрицание, вычитание
- Умножение, обращение, деление
- Норма и квадрат нормы
- Комплексное сопряжение
- Сравнение с учётом толерантности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции чистые: операнды не изменяются, результат — новый экземпляр
2. Только invert/divide могут завершиться ошибкой (DivisionByZero)
3. Деление на ноль никогда не даёт NaN/Inf: всегда exception
4. add(a, negate(a)) == ZERO точно (отрицание — смена знака без округления)
5. multiply(a, conjugate(a)) == embed(norm_squared(a)) точно

ФОРМУЛЫ:
    (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    1 / (a + bi) = a / (a² + b²) - b / (a² + b²) i
    s = max(|a|, |b|), r = a / s, t = b / s:
    1 / (a + bi) = (r / (r² + t²)) / s - (t / (r² + t²)) / s i
    |a + bi|² = a² + b²
    |a + bi| = hypot(a, b)
"""

import logging
import math

from complexfield.core.domain.complex_number import ComplexNumber
from complexfield.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close as is_close_float,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Обращение или деление на нулевой комплексный делитель.

    Поле не определяет 1/0, поэтому invert/divide сигнализируют явно
    вместо распространения NaN/Inf.
    """

    def __init__(self, divisor: ComplexNumber):
        self.divisor = divisor
        super().__init__(f"Complex division by zero: divisor={divisor!r}")


# =============================================================================
# АДДИТИВНАЯ СТРУКТУРА
# =============================================================================


def add(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    """
    Покомпонентное сложение.

    Коммутативно, ассоциативно, нейтральный элемент ZERO.

    Examples:
        >>> add(ComplexNumber(re=1.0, im=2.0), ComplexNumber(re=3.0, im=-1.0))
        ComplexNumber(re=4.0, im=1.0)
    """
    return ComplexNumber(re=a.re + b.re, im=a.im + b.im)


def negate(a: ComplexNumber) -> ComplexNumber:
    """Покомпонентная смена знака."""
    return ComplexNumber(re=-a.re, im=-a.im)


def subtract(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    """Вычитание: add(a, negate(b))."""
    return add(a, negate(b))


# =============================================================================
# МУЛЬТИПЛИКАТИВНАЯ СТРУКТУРА
# =============================================================================


def multiply(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    """
    Комплексное произведение.

    re = a.re*b.re - a.im*b.im
    im = a.re*b.im + a.im*b.re

    Коммутативно, ассоциативно, дистрибутивно относительно add,
    нейтральный элемент ONE, аннулятор ZERO.

    Examples:
        >>> multiply(ComplexNumber(re=0.0, im=1.0), ComplexNumber(re=0.0, im=1.0))
        ComplexNumber(re=-1.0, im=0.0)
    """
    return ComplexNumber(
        re=a.re * b.re - a.im * b.im,
        im=a.re * b.im + a.im * b.re,
    )


def invert(a: ComplexNumber) -> ComplexNumber:
    """
    Мультипликативное обращение.

    1 / a = (a.re / |a|², -a.im / |a|²)

    Компоненты предварительно делятся на s = max(|a.re|, |a.im|), поэтому
    знаменатель r² + t² лежит в [1, 2] и не переполняется и не уходит
    в underflow ни при каком конечном ненулевом a.

    Args:
        a: Ненулевое комплексное число

    Returns:
        Обратное число: multiply(invert(a), a) ≈ ONE.
        Для a с |a| < 1 / float_max (субнормальные компоненты) обратное
        не представимо во float, компоненты результата будут Inf.

    Raises:
        DivisionByZero: Если a.re == 0.0 и a.im == 0.0

    Examples:
        >>> invert(ComplexNumber(re=0.0, im=1.0))
        ComplexNumber(re=0.0, im=-1.0)
    """
    if a.re == 0.0 and a.im == 0.0:
        logger.debug("invert rejected zero divisor %r", a)
        raise DivisionByZero(a)

    scale = max(abs(a.re), abs(a.im))
    r = a.re / scale
    t = a.im / scale
    denom = r * r + t * t

    return ComplexNumber(re=(r / denom) / scale, im=(-t / denom) / scale)


def divide(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    """
    Деление: multiply(a, invert(b)).

    Raises:
        DivisionByZero: Если b — нулевой делитель
    """
    return multiply(a, invert(b))


# =============================================================================
# НОРМА И СОПРЯЖЕНИЕ
# =============================================================================


def norm_squared(a: ComplexNumber) -> float:
    """
    Квадрат нормы: a.re² + a.im².

    Всегда >= 0; равен 0 только для ZERO (с точностью до underflow).
    Переполняется в Inf при |a| > sqrt(float_max); для модуля используйте norm.
    """
    return a.re * a.re + a.im * a.im


def norm(a: ComplexNumber) -> float:
    """
    Норма (модуль): sqrt(a.re² + a.im²).

    Вычисляется через math.hypot без промежуточного квадрата, поэтому
    конечна для любого a с конечными компонентами.
    """
    return math.hypot(a.re, a.im)


def conjugate(a: ComplexNumber) -> ComplexNumber:
    """
    Комплексное сопряжение: (a.re, -a.im).

    Инволюция; дистрибутивно относительно add и multiply;
    неподвижно на вложенных вещественных.
    """
    return ComplexNumber(re=a.re, im=-a.im)


# =============================================================================
# EPSILON-СРАВНЕНИЕ
# =============================================================================


def is_close(
    a: ComplexNumber,
    b: ComplexNumber,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Покомпонентное сравнение с учётом машинной точности.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если обе компоненты близки

    Raises:
        ValueError: Если толерантность отрицательная или NaN/Inf
    """
    return is_close_float(a.re, b.re, rel_tol=rel_tol, abs_tol=abs_tol) and is_close_float(
        a.im, b.im, rel_tol=rel_tol, abs_tol=abs_tol
    )
