"""
Integer Contract — минимальный набор возможностей целочисленного типа

Fraction параметризован типом Z, который обязан поддерживать:
- сложение, вычитание, умножение
- деление нацело (//) и остаток (%), согласованные с алгоритмом Евклида
- унарное отрицание
- полный порядок (<, ==)
- нейтральные элементы 0 и 1 (конструирование из int-литерала)

Контракт выражен через typing.Protocol, а не через наследование:
int, numpy.int64, gmpy2.mpz и пользовательские типы подходят без
регистрации. Проверка переполнения в контракт НЕ входит и остаётся
ответственностью вызывающего кода.
"""

import numbers
from decimal import Decimal
from typing import Any, Final, Protocol, TypeVar, runtime_checkable


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class SupportsIntegerOps(Protocol):
    """Упорядоченное кольцо с делением нацело и остатком."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __floordiv__(self, other: Any) -> Any: ...

    def __mod__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


Z = TypeVar("Z", bound=SupportsIntegerOps)


# Числовые типы, у которых есть все нужные операторы, но которые не
# являются целыми: их // и % не дают точного Евклида.
NON_INTEGER_NUMBER_TYPES: Final[tuple[type, ...]] = (float, complex, Decimal)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerCapabilityError(TypeError):
    """
    Тип не удовлетворяет целочисленному контракту.

    Возникает до создания Fraction: значение с неподходящим типом
    не может попасть в числитель или знаменатель.
    """
    pass


# =============================================================================
# ПРОВЕРКА КОНТРАКТА
# =============================================================================


def is_integer_like(value: Any) -> bool:
    """
    Проверка, может ли значение служить числителем/знаменателем.

    Args:
        value: Проверяемое значение

    Returns:
        True для numbers.Integral и для нечисловых скалярных типов,
        реализующих SupportsIntegerOps и конструируемых из int-литерала;
        False для float, Decimal, complex, Rational, bool и массивов

    Examples:
        >>> is_integer_like(3)
        True
        >>> is_integer_like(3.0)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, (numbers.Number, *NON_INTEGER_NUMBER_TYPES)):
        return False
    if hasattr(value, "__array__"):
        # Массивы (numpy.ndarray и подобные) поэлементны: < не даёт bool
        return False
    if not isinstance(value, SupportsIntegerOps):
        return False
    return _constructible_from_literal(type(value))


def _constructible_from_literal(kind: type) -> bool:
    """Тип должен строить свои 0 и 1 из int-литерала (см. zero_like)."""
    try:
        zero = kind(0)
    except (TypeError, ValueError):
        return False
    return isinstance(zero, kind)


def check_integer_capability(value: Any, name: str = "value") -> None:
    """
    Валидация, что значение удовлетворяет целочисленному контракту.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        IntegerCapabilityError: Если тип не поддерживает контракт
    """
    if not is_integer_like(value):
        raise IntegerCapabilityError(
            f"{name} must satisfy the integer contract "
            f"(ordered ring with // and %), got {type(value).__name__}: {value!r}"
        )


# =============================================================================
# НЕЙТРАЛЬНЫЕ ЭЛЕМЕНТЫ
# =============================================================================


def zero_like(value: Z) -> Z:
    """Аддитивный нейтральный элемент типа value."""
    return type(value)(0)


def one_like(value: Z) -> Z:
    """Мультипликативный нейтральный элемент типа value."""
    return type(value)(1)
