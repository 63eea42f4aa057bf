"""
Summation — конечная редукция комплексных функций индекса

Модуль сворачивает функцию f: int → ComplexNumber по префиксу индексов
0..n-1 комплексным сложением:
- reduce_sum: S(f, n) = f(0) + f(1) + ... + f(n-1)
- reduce_sum_trajectory: все частичные суммы S(f, 0), ..., S(f, n)
- sum_values: та же свёртка по готовой последовательности значений

ОПРЕДЕЛЕНИЕ (рекурсия по n):
    S(f, 0) = ZERO
    S(f, k + 1) = S(f, k) + f(k)

Рекурсия реализована ограниченным циклом, порядок сложения — слева направо.

СВОЙСТВА (покрыты тестами):
1. f(x) == ZERO для всех x < n  ⇒  S(f, n) == ZERO
2. f(x) == g(x) для всех x < n  ⇒  S(f, n) == S(g, n)
3. S(f + g, n) == S(f, n) + S(g, n)
4. c · S(f, n) == S(c · f, n)
5. S(f, n) · c == S(f · c, n)
6. conj(S(f, n)) == S(conj ∘ f, n)
7. f(x0) == k и f(x) == ZERO для остальных x < n  ⇒  S(f, n) == k
"""

import logging
from typing import Callable, Iterable

from complexfield.core.domain.complex_number import ZERO, ComplexNumber
from complexfield.core.math.complex_arithmetic import add
from complexfield.core.math.numerical_safeguards import validate_count

logger = logging.getLogger(__name__)

IndexedFamily = Callable[[int], ComplexNumber]


# =============================================================================
# REDUCE SUM
# =============================================================================


def reduce_sum(f: IndexedFamily, n: int) -> ComplexNumber:
    """
    Сумма f(0) + f(1) + ... + f(n-1).

    Args:
        f: Тотальная функция индекса, возвращающая ComplexNumber
        n: Количество слагаемых (n >= 0)

    Returns:
        Комплексная сумма; ZERO при n == 0 (f не вызывается)

    Raises:
        ValueError: Если n не int или n < 0
        TypeError: Если f вернула не ComplexNumber

    Examples:
        >>> from complexfield.core.domain.complex_number import embed
        >>> reduce_sum(lambda x: embed(x), 3)
        ComplexNumber(re=3.0, im=0.0)
        >>> reduce_sum(lambda x: embed(x), 0)
        ComplexNumber(re=0.0, im=0.0)
    """
    validate_count(n, "n")
    logger.debug("reduce_sum over %d terms", n)

    total = ZERO
    for x in range(n):
        total = add(total, _term(f, x))

    return total


def reduce_sum_trajectory(f: IndexedFamily, n: int) -> list[ComplexNumber]:
    """
    Частичные суммы [S(f, 0), S(f, 1), ..., S(f, n)].

    Args:
        f: Тотальная функция индекса, возвращающая ComplexNumber
        n: Количество слагаемых (n >= 0)

    Returns:
        trajectory: Список длины n + 1; trajectory[0] == ZERO,
                    trajectory[-1] == reduce_sum(f, n)

    Raises:
        ValueError: Если n не int или n < 0
        TypeError: Если f вернула не ComplexNumber
    """
    validate_count(n, "n")

    trajectory = [ZERO]
    for x in range(n):
        trajectory.append(add(trajectory[-1], _term(f, x)))

    return trajectory


def sum_values(values: Iterable[ComplexNumber]) -> ComplexNumber:
    """
    Сумма последовательности комплексных чисел слева направо.

    Args:
        values: Итерируемая последовательность ComplexNumber

    Returns:
        Комплексная сумма; ZERO для пустой последовательности

    Raises:
        TypeError: Если элемент не ComplexNumber
    """
    items = list(values)
    return reduce_sum(items.__getitem__, len(items))


def _term(f: IndexedFamily, x: int) -> ComplexNumber:
    value = f(x)
    if not isinstance(value, ComplexNumber):
        raise TypeError(
            f"summand at index {x} must be ComplexNumber, got {type(value).__name__}"
        )
    return value
