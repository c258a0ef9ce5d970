"""
Общие фикстуры для unit-тестов.

BoxedInt — минимальный пользовательский целочисленный тип, не
зарегистрированный в numbers.Integral. Используется для проверки, что
Fraction и примитивы работают с любым типом, удовлетворяющим
SupportsIntegerOps, а не только с int.
"""

import pytest


class BoxedInt:
    """Обёртка над int, реализующая только целочисленный контракт."""

    def __init__(self, value: int):
        self.value = value

    def __add__(self, other: "BoxedInt") -> "BoxedInt":
        return BoxedInt(self.value + other.value)

    def __sub__(self, other: "BoxedInt") -> "BoxedInt":
        return BoxedInt(self.value - other.value)

    def __mul__(self, other: "BoxedInt") -> "BoxedInt":
        return BoxedInt(self.value * other.value)

    def __floordiv__(self, other: "BoxedInt") -> "BoxedInt":
        return BoxedInt(self.value // other.value)

    def __mod__(self, other: "BoxedInt") -> "BoxedInt":
        return BoxedInt(self.value % other.value)

    def __neg__(self) -> "BoxedInt":
        return BoxedInt(-self.value)

    def __lt__(self, other: "BoxedInt") -> bool:
        return self.value < other.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BoxedInt) and self.value == other.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"BoxedInt({self.value})"


@pytest.fixture
def boxed():
    """Конструктор BoxedInt."""
    return BoxedInt
