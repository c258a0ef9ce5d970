"""
Fraction — точная рациональная дробь над произвольным целочисленным типом

Значение хранится как пара (num, den) типа Z (см. SupportsIntegerOps)
и всегда находится в каноническом виде.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после любого конструктора и любой мутации):
1. den >= 0 — знак всегда несёт числитель
2. gcd(num, den) in {0, 1} — дробь несократима
3. Равенство и порядок определяются значением num/den, а не представлением
4. num и den имеют один и тот же тип Z

Алгоритмы сравнения и арифметики сокращают общие множители ДО
перемножения, чтобы промежуточные значения оставались близки к
минимальным:
    a/b + c/d:  g = gcd(b, d), l = b/g, r = d/g
                -> (r*a + l*c) / (b*r)
    a/b * c/d:  (a/gcd(a,d) * c/gcd(c,b)) / (b/gcd(c,b) * d/gcd(a,d))
    a/b ? c/d:  r*a ? l*c

Операнды: Fraction или целое. numbers.Integral приводится к типу
числителя получателя (type(num)(other)); целые иного типа, не
являющиеся numbers.Integral, отклоняются.

Исключения арифметическим ядром не генерируются. Деление на ноль даёт
значение со знаменателем 0 (±1/0 или 0/0); переполнение — ответственность
целочисленного типа.

Базовые операции: normalize, compare, add, multiply, reciprocal.
Операторы Python — тонкие обёртки над ними.
"""

import logging
import numbers
from typing import Any, Final, Generic

from src.core.contracts.integer_contract import (
    IntegerCapabilityError,
    Z,
    check_integer_capability,
    one_like,
    zero_like,
)
from src.core.domain.fraction_state import FractionState
from src.core.math.integer_ops import abs_value, gcd, reduce_pair, sign_of

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ОТОБРАЖЕНИЯ
# =============================================================================

# Текстовая форма для диагностики и логов
DISPLAY_TEMPLATE: Final[str] = "({num}/{den})"

# Форма repr(), воспроизводимая как выражение Python
REPR_TEMPLATE: Final[str] = "Fraction({num!r}, {den!r})"


# =============================================================================
# FRACTION
# =============================================================================


class Fraction(Generic[Z]):
    """
    Рациональная дробь num/den в каноническом виде.

    Бинарные операторы (+, -, *, /) возвращают новое значение и не
    меняют операнды. Составные операторы (+=, -=, *=, /=) и reciprocal()
    меняют экземпляр на месте, поэтому Fraction не хешируется.

    Конкурентная мутация одного экземпляра не поддерживается:
    вызывающий код владеет экземпляром эксклюзивно.

    Examples:
        >>> Fraction(2, 4)
        Fraction(1, 2)
        >>> str(Fraction(1, 2) + Fraction(1, 3))
        '(5/6)'
        >>> Fraction(3, 4) < Fraction(5, 6)
        True
    """

    __slots__ = ("_num", "_den")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, num: Z = 0, den: Z | None = None) -> None:
        """
        Создание дроби с немедленной нормализацией.

        Args:
            num: Числитель (по умолчанию 0)
            den: Знаменатель (по умолчанию единица типа num);
                numbers.Integral приводится к типу num

        Raises:
            IntegerCapabilityError: Если num или den не целочисленного типа,
                либо den нельзя привести к типу num
        """
        check_integer_capability(num, "num")
        if den is None:
            den = one_like(num)
        else:
            check_integer_capability(den, "den")
            coerced = _coerce_to(type(num), den)
            if coerced is None:
                raise IntegerCapabilityError(
                    f"den must have the numerator's type {type(num).__name__} "
                    f"or be a numbers.Integral, got {type(den).__name__}: {den!r}"
                )
            den = coerced

        self._num: Z = num
        self._den: Z = den
        self.normalize()

    @classmethod
    def _from_pair(cls, num: Z, den: Z) -> "Fraction[Z]":
        result = cls.__new__(cls)
        result._num = num
        result._den = den
        result.normalize()
        return result

    @classmethod
    def from_state(cls, state: FractionState) -> "Fraction[int]":
        """Восстановление дроби из сериализуемой модели FractionState."""
        return cls._from_pair(state.num, state.den)

    def to_state(self) -> FractionState:
        """
        Сериализуемый снимок дроби.

        Поддерживается только для int-числителя и int-знаменателя
        (ограничение JSON-контракта).
        """
        return FractionState(num=int(self._num), den=int(self._den))

    # -------------------------------------------------------------------------
    # ДОСТУП
    # -------------------------------------------------------------------------

    @property
    def num(self) -> Z:
        return self._num

    @property
    def den(self) -> Z:
        return self._den

    numerator = num
    denominator = den

    def copy(self) -> "Fraction[Z]":
        result = type(self).__new__(type(self))
        result._num = self._num
        result._den = self._den
        return result

    __copy__ = copy

    # -------------------------------------------------------------------------
    # НОРМАЛИЗАЦИЯ
    # -------------------------------------------------------------------------

    def normalize(self) -> None:
        """
        Приведение пары к каноническому виду на месте.

        1. den < 0 -> смена знака у num и den
        2. common = gcd(num, den)
        3. common in {0, 1} -> уже канонично
        4. иначе num и den делятся на common

        Идемпотентна: повторный вызов ничего не меняет.
        """
        if self._den < zero_like(self._den):
            self._num = -self._num
            self._den = -self._den

        common = gcd(self._num, self._den)
        if common == zero_like(common) or common == one_like(common):
            return

        self._num = self._num // common
        self._den = self._den // common

    # -------------------------------------------------------------------------
    # ОПЕРАНДЫ
    # -------------------------------------------------------------------------

    def _operand_pair(self, other: Any) -> tuple[Z, Z] | None:
        """
        Пара (num, den) операнда в типе числителя получателя.

        Целое трактуется как (other, 1). None, если операнд не Fraction
        и не целое, приводимое к типу получателя.
        """
        kind = type(self._num)
        if isinstance(other, Fraction):
            num = _coerce_to(kind, other._num)
            den = _coerce_to(kind, other._den)
            if num is None or den is None:
                return None
            return num, den

        scalar = _coerce_to(kind, other)
        if scalar is None:
            return None
        return scalar, one_like(scalar)

    def _as_pair(self, other: Any) -> tuple[Z, Z]:
        pair = self._operand_pair(other)
        if pair is None:
            raise IntegerCapabilityError(
                f"other must be a Fraction or an integer convertible to "
                f"{type(self._num).__name__}, got {type(other).__name__}: {other!r}"
            )
        return pair

    # -------------------------------------------------------------------------
    # СРАВНЕНИЕ
    # -------------------------------------------------------------------------

    def compare(self, other: "Fraction[Z] | Z") -> int:
        """
        Трёхзначное сравнение со значением другой дроби или целого.

        Эквивалентно сравнению num1*den2 с num2*den1, но знаменатели
        предварительно сокращаются на их gcd.

        Args:
            other: Fraction или целое того же контракта

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other

        Raises:
            IntegerCapabilityError: Если other не Fraction и не целое
        """
        return self._compare_pair(self._as_pair(other), isinstance(other, Fraction))

    def _compare_pair(self, pair: tuple[Z, Z], is_fraction: bool) -> int:
        num, den = pair
        if is_fraction:
            left, right = self._cross_terms(num, den)
        else:
            left, right = self._scalar_terms(num)

        if left < right:
            return -1
        if right < left:
            return 1
        return 0

    def _cross_terms(self, num: Z, den: Z) -> tuple[Z, Z]:
        if self._den == den:
            if den == zero_like(den):
                logger.debug(
                    "Both denominators are zero, comparing %s and (%s/%s) by numerator",
                    self,
                    num,
                    den,
                )
            return self._num, num

        # gcd == 0 только при нулевых знаменателях, а они обработаны выше
        common = gcd(self._den, den)
        left = self._den // common
        right = den // common
        return right * self._num, left * num

    def _scalar_terms(self, rhs: Z) -> tuple[Z, Z]:
        if self._den == one_like(self._den) or rhs == zero_like(rhs):
            return self._num, rhs
        return self._num, self._den * rhs

    def _compare_operand(self, other: Any) -> int | None:
        pair = self._operand_pair(other)
        if pair is None:
            return None
        return self._compare_pair(pair, isinstance(other, Fraction))

    def __eq__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __ne__(self, other: object) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result != 0

    def __lt__(self, other: Any) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: Any) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._compare_operand(other)
        if result is None:
            return NotImplemented
        return result >= 0

    # -------------------------------------------------------------------------
    # АРИФМЕТИКА: ЯДРО (на месте, над сырыми парами)
    # -------------------------------------------------------------------------

    def _add_pair(self, num: Z, den: Z) -> None:
        zero = zero_like(den)
        if self._den == den:
            if den == zero:
                # Общий множитель не определён: l = r = 1, перекрёстный
                # член равен сумме числителей
                cross = self._num + num
                logger.debug(
                    "Zero-denominator addition %s + (%s/%s) collapsed to sign %s",
                    self,
                    num,
                    den,
                    sign_of(cross),
                )
                self._num = sign_of(cross)
                self._den = zero
                return

            self._num = self._num + num
            self.normalize()
            return

        common = gcd(self._den, den)
        left = self._den // common
        right = den // common
        self._num = right * self._num + left * num
        self._den = self._den * right
        self.normalize()

    def _multiply_pair(self, num: Z, den: Z) -> None:
        # Перекрёстное сокращение: num1 с den2, num2 с den1
        num1, den2 = reduce_pair(self._num, den)
        num2, den1 = reduce_pair(num, self._den)
        self._num = num1 * num2
        self._den = den1 * den2
        self.normalize()

    def _divisor_pair(self, num: Z, den: Z) -> tuple[Z, Z]:
        if num == zero_like(num):
            logger.debug("Division of %s by zero produces a zero denominator", self)
        return self._reciprocal_pair(num, den)

    @staticmethod
    def _reciprocal_pair(num: Z, den: Z) -> tuple[Z, Z]:
        if num < zero_like(num):
            return -den, -num
        return den, num

    def _sum(self, pair: tuple[Z, Z]) -> "Fraction[Z]":
        result = self.copy()
        result._add_pair(*pair)
        return result

    def _difference(self, pair: tuple[Z, Z]) -> "Fraction[Z]":
        num, den = pair
        result = self.copy()
        result._add_pair(-num, den)
        return result

    def _product(self, pair: tuple[Z, Z]) -> "Fraction[Z]":
        result = self.copy()
        result._multiply_pair(*pair)
        return result

    def _quotient(self, pair: tuple[Z, Z]) -> "Fraction[Z]":
        result = self.copy()
        result._multiply_pair(*self._divisor_pair(*pair))
        return result

    # -------------------------------------------------------------------------
    # АРИФМЕТИКА: ИМЕНОВАННЫЕ ОПЕРАЦИИ
    # -------------------------------------------------------------------------

    def add(self, other: "Fraction[Z] | Z") -> "Fraction[Z]":
        """
        Сумма self + other как новое значение.

        Raises:
            IntegerCapabilityError: Если other не Fraction и не целое
        """
        return self._sum(self._as_pair(other))

    def subtract(self, other: "Fraction[Z] | Z") -> "Fraction[Z]":
        """Разность self - other = self + (-other) как новое значение."""
        return self._difference(self._as_pair(other))

    def multiply(self, other: "Fraction[Z] | Z") -> "Fraction[Z]":
        """
        Произведение self * other как новое значение.

        Общие множители числителя одного операнда и знаменателя
        другого сокращаются до умножения.

        Raises:
            IntegerCapabilityError: Если other не Fraction и не целое
        """
        return self._product(self._as_pair(other))

    def divide(self, other: "Fraction[Z] | Z") -> "Fraction[Z]":
        """
        Частное self / other = self * reciprocal(other) как новое значение.

        Деление на ноль не генерирует исключений: результат имеет
        знаменатель 0.
        """
        return self._quotient(self._as_pair(other))

    def negate(self) -> "Fraction[Z]":
        """Противоположное значение: меняется только знак числителя."""
        result = self.copy()
        result._num = -result._num
        return result

    def reciprocal(self) -> None:
        """
        Обращение дроби на месте: num и den меняются местами.

        Если новый знаменатель отрицателен, знак переносится в числитель.
        Повторное обращение восстанавливает исходное значение при den != 0.
        """
        self._num, self._den = self._reciprocal_pair(self._num, self._den)

    # -------------------------------------------------------------------------
    # ОПЕРАТОРЫ
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Fraction[Z]":
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        return self._sum(pair)

    def __sub__(self, other: Any) -> "Fraction[Z]":
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        return self._difference(pair)

    def __mul__(self, other: Any) -> "Fraction[Z]":
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        return self._product(pair)

    def __truediv__(self, other: Any) -> "Fraction[Z]":
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        return self._quotient(pair)

    __radd__ = __add__
    __rmul__ = __mul__

    def __rsub__(self, other: Any) -> "Fraction[Z]":
        # c - f = (-f) + c
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        return self.negate()._sum(pair)

    def __rtruediv__(self, other: Any) -> "Fraction[Z]":
        # c / f = (c/1) * reciprocal(f)
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        return self._from_pair(*pair)._quotient((self._num, self._den))

    def __iadd__(self, other: Any) -> "Fraction[Z]":
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        self._add_pair(*pair)
        return self

    def __isub__(self, other: Any) -> "Fraction[Z]":
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        num, den = pair
        self._add_pair(-num, den)
        return self

    def __imul__(self, other: Any) -> "Fraction[Z]":
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        self._multiply_pair(*pair)
        return self

    def __itruediv__(self, other: Any) -> "Fraction[Z]":
        pair = self._operand_pair(other)
        if pair is None:
            return NotImplemented
        self._multiply_pair(*self._divisor_pair(*pair))
        return self

    def __neg__(self) -> "Fraction[Z]":
        return self.negate()

    def __pos__(self) -> "Fraction[Z]":
        return self.copy()

    def __abs__(self) -> "Fraction[Z]":
        return self._from_pair(abs_value(self._num), abs_value(self._den))

    def __bool__(self) -> bool:
        return self._num != zero_like(self._num)

    # -------------------------------------------------------------------------
    # ОТОБРАЖЕНИЕ
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return DISPLAY_TEMPLATE.format(num=self._num, den=self._den)

    def __repr__(self) -> str:
        return REPR_TEMPLATE.format(num=self._num, den=self._den)


# =============================================================================
# ПРИВЕДЕНИЕ ТИПОВ
# =============================================================================


def _coerce_to(kind: type, value: Any) -> Any | None:
    """
    Приведение целого к типу kind.

    Значение типа kind возвращается как есть; numbers.Integral (кроме bool)
    конвертируется через kind(value). Иначе None.
    """
    if type(value) is kind:
        return value
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return kind(value)
    return None
