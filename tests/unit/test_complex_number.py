"""
Тесты для ComplexNumber — Immutable модель комплексного числа

Проверяет:
1. Конструирование и coercion компонент
2. Immutability (frozen=True)
3. Равенство и hash
4. Вложение вещественных и константы
5. Операторы и явное вложение int/float
6. Конверсии в/из встроенного complex и payload
"""

import math

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from complexfield.core.domain.complex_number import I, ONE, ZERO, ComplexNumber, embed
from complexfield.core.math.complex_arithmetic import DivisionByZero, conjugate


# =============================================================================
# ТЕСТЫ: Конструирование
# =============================================================================


class TestConstruction:
    """Тесты конструирования ComplexNumber."""

    def test_two_components(self):
        """Конструирование из двух вещественных."""
        z = ComplexNumber(re=1.5, im=-2.5)
        assert z.re == 1.5
        assert z.im == -2.5

    def test_imaginary_part_defaults_to_zero(self):
        """Одна компонента → мнимая часть 0."""
        assert ComplexNumber(re=3.0) == ComplexNumber(re=3.0, im=0.0)

    def test_int_components_stored_as_float(self):
        """Целые компоненты хранятся как float."""
        z = ComplexNumber(re=1, im=2)
        assert isinstance(z.re, float)
        assert isinstance(z.im, float)

    def test_string_rejected(self):
        """Строки не принимаются как компоненты."""
        with pytest.raises(ValidationError):
            ComplexNumber(re="1.0", im=0.0)

    def test_bool_rejected(self):
        """bool не принимается как компонента."""
        with pytest.raises(ValidationError):
            ComplexNumber(re=True, im=0.0)

    def test_non_finite_allowed(self):
        """Представление тотально: Inf не отвергается, is_finite его видит."""
        z = ComplexNumber(re=math.inf, im=0.0)
        assert not z.is_finite()
        assert ONE.is_finite()


class TestImmutability:
    """Тесты frozen модели."""

    def test_assignment_raises(self):
        """Присваивание полю запрещено."""
        z = ComplexNumber(re=1.0, im=2.0)
        with pytest.raises(ValidationError):
            z.re = 5.0

    def test_operations_return_new_instances(self):
        """Операторы не изменяют операнды."""
        z = ComplexNumber(re=1.0, im=2.0)
        w = z + ONE
        assert z == ComplexNumber(re=1.0, im=2.0)
        assert w is not z


class TestEquality:
    """Тесты равенства и hash."""

    def test_exact_equality(self):
        """Равенство покомпонентное и точное."""
        assert ComplexNumber(re=1.0, im=2.0) == ComplexNumber(re=1.0, im=2.0)
        assert ComplexNumber(re=1.0, im=2.0) != ComplexNumber(re=1.0, im=2.0 + 1e-15)

    def test_signed_zero_equal(self):
        """(-0.0, -0.0) == ZERO."""
        assert ComplexNumber(re=-0.0, im=-0.0) == ZERO

    def test_hashable(self):
        """Значения пригодны как ключи dict/set."""
        assert len({ComplexNumber(re=1.0, im=2.0), ComplexNumber(re=1.0, im=2.0), ONE}) == 2


# =============================================================================
# ТЕСТЫ: Вложение и константы
# =============================================================================


class TestEmbedAndConstants:
    """Тесты embed и ZERO/ONE/I."""

    def test_embed(self):
        """embed(r) == (r, 0)."""
        assert embed(2.5) == ComplexNumber(re=2.5, im=0.0)
        assert embed(-3) == ComplexNumber(re=-3.0, im=0.0)

    def test_embed_is_real(self):
        """Вложенное число лежит на вещественной оси."""
        assert embed(7.0).is_real()
        assert not I.is_real()

    def test_constants(self):
        """ZERO = (0,0), ONE = (1,0), I = (0,1)."""
        assert ZERO == ComplexNumber(re=0.0, im=0.0)
        assert ONE == ComplexNumber(re=1.0, im=0.0)
        assert I == ComplexNumber(re=0.0, im=1.0)


# =============================================================================
# ТЕСТЫ: Операторы
# =============================================================================


class TestOperators:
    """Тесты операторов и неявного вложения int/float."""

    def test_add_sub(self):
        """+ и - делегируют add/subtract."""
        z = ComplexNumber(re=1.0, im=2.0)
        w = ComplexNumber(re=3.0, im=-1.0)
        assert z + w == ComplexNumber(re=4.0, im=1.0)
        assert z - w == ComplexNumber(re=-2.0, im=3.0)

    def test_mul_div(self):
        """* и / делегируют multiply/divide."""
        assert I * I == embed(-1)
        assert 1 / I == ComplexNumber(re=0.0, im=-1.0)

    def test_real_operand_on_either_side(self):
        """int/float вкладываются через embed с любой стороны."""
        z = ComplexNumber(re=1.0, im=2.0)
        assert z + 1 == ComplexNumber(re=2.0, im=2.0)
        assert 1 + z == ComplexNumber(re=2.0, im=2.0)
        assert 2.0 * z == ComplexNumber(re=2.0, im=4.0)
        assert z * 2 == ComplexNumber(re=2.0, im=4.0)
        assert 3 - z == ComplexNumber(re=2.0, im=-2.0)

    def test_unsupported_operand(self):
        """Строки и bool не вкладываются."""
        with pytest.raises(TypeError):
            ONE + "1"
        with pytest.raises(TypeError):
            ONE + True

    def test_neg_abs(self):
        """Унарный минус и abs()."""
        z = ComplexNumber(re=3.0, im=-4.0)
        assert -z == ComplexNumber(re=-3.0, im=4.0)
        assert abs(z) == 5.0

    def test_division_by_zero_operator(self):
        """/ на ноль → DivisionByZero."""
        with pytest.raises(DivisionByZero):
            ONE / ZERO
        with pytest.raises(DivisionByZero):
            ONE / 0

    def test_conjugate_method(self):
        """z.conjugate() совпадает с conjugate(z)."""
        z = ComplexNumber(re=1.0, im=2.0)
        assert z.conjugate() == conjugate(z)


# =============================================================================
# ТЕСТЫ: Конверсии
# =============================================================================


class TestConversions:
    """Тесты конверсий."""

    def test_builtin_roundtrip(self):
        """complex → ComplexNumber → complex."""
        z = ComplexNumber.from_builtin(complex(1.5, -2.0))
        assert z == ComplexNumber(re=1.5, im=-2.0)
        assert complex(z) == complex(1.5, -2.0)
        assert z.to_builtin() == complex(1.5, -2.0)

    def test_str(self):
        """Строковое представление a+bi / a-bi."""
        assert str(ComplexNumber(re=1.0, im=2.0)) == "1.0+2.0i"
        assert str(ComplexNumber(re=1.0, im=-2.0)) == "1.0-2.0i"
        assert str(ComplexNumber(re=0.0, im=-0.0)) == "0.0-0.0i"

    def test_payload(self):
        """to_payload/from_payload через контракт complex_number."""
        z = ComplexNumber(re=1.0, im=-2.0)
        payload = z.to_payload()
        assert payload == {"re": 1.0, "im": -2.0}
        assert ComplexNumber.from_payload(payload) == z

    def test_invalid_payload_rejected(self):
        """Payload без im не проходит контракт."""
        with pytest.raises(SchemaValidationError):
            ComplexNumber.from_payload({"re": 1.0})
