"""
Integer Ops — GCD/LCM примитивы над целочисленным контрактом

Модуль содержит чистые функции, на которых построена нормализация и
арифметика Fraction:
- abs_value: модуль числа (для беззнаковых типов — тождественно)
- gcd: наибольший общий делитель (алгоритм Евклида, итеративно)
- lcm: наименьшее общее кратное
- reduce_pair: сокращение пары на gcd без коррекции знака
- sign_of: насыщенный знак в {-1, 0, 1}

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(0, 0) == 0 (sentinel: общий делитель не определён)
2. gcd(m, n) >= 0 для любых m, n
3. lcm(m, n) == 0, если хотя бы один аргумент равен 0
4. Функции тотальны: ошибки возможны только от самого целочисленного типа

Все функции работают с любым типом, удовлетворяющим SupportsIntegerOps
(int, numpy.int64, gmpy2.mpz и т.п.). Нули и единицы берутся из типа
аргумента, поэтому результат имеет тот же тип, что и вход.
"""

from src.core.contracts.integer_contract import Z, one_like, zero_like


# =============================================================================
# МОДУЛЬ И ЗНАК
# =============================================================================


def abs_value(a: Z) -> Z:
    """
    Модуль числа.

    Для беззнаковых типов условие a < 0 никогда не выполняется,
    поэтому функция возвращает аргумент без изменений.

    Args:
        a: Целое число

    Returns:
        -a если a < 0, иначе a

    Examples:
        >>> abs_value(-7)
        7
        >>> abs_value(7)
        7
    """
    return -a if a < zero_like(a) else a


def sign_of(a: Z) -> Z:
    """
    Насыщенный знак числа в {-1, 0, 1} того же типа, что и a.

    Examples:
        >>> sign_of(-42)
        -1
        >>> sign_of(0)
        0
    """
    zero = zero_like(a)
    if a < zero:
        return -one_like(a)
    if zero < a:
        return one_like(a)
    return zero


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd(m: Z, n: Z) -> Z:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Рекурсия (m, n) -> (n, m mod n) развёрнута в цикл: Python не
    гарантирует устранение хвостовых вызовов.

    Args:
        m: Первое целое
        n: Второе целое

    Returns:
        Неотрицательный gcd(m, n); gcd(0, 0) == 0

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 6)
        2
        >>> gcd(0, -5)
        5
        >>> gcd(0, 0)
        0
    """
    zero = zero_like(m)
    if m == zero:
        return abs_value(n)

    while n != zero:
        m, n = n, m % n

    return abs_value(m)


def lcm(m: Z, n: Z) -> Z:
    """
    Наименьшее общее кратное.

    Деление выполняется до умножения, чтобы промежуточное значение
    не превышало результат.

    Args:
        m: Первое целое
        n: Второе целое

    Returns:
        Неотрицательный lcm(m, n); 0 если m == 0 или n == 0

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(-3, 5)
        15
        >>> lcm(0, 9)
        0
    """
    zero = zero_like(m)
    if m == zero or n == zero:
        return zero

    return (abs_value(m) // gcd(m, n)) * abs_value(n)


# =============================================================================
# СОКРАЩЕНИЕ ПАРЫ
# =============================================================================


def reduce_pair(num: Z, den: Z) -> tuple[Z, Z]:
    """
    Сокращение пары (num, den) на их общий делитель.

    Знак не корректируется: функция используется для перекрёстного
    сокращения при умножении, где знаменатели уже неотрицательны.
    При gcd в {0, 1} пара возвращается без изменений.

    Args:
        num: Числитель
        den: Знаменатель

    Returns:
        (num / g, den / g), где g = gcd(num, den)

    Examples:
        >>> reduce_pair(6, 4)
        (3, 2)
        >>> reduce_pair(-6, 4)
        (-3, 2)
        >>> reduce_pair(0, 0)
        (0, 0)
    """
    common = gcd(num, den)
    if common == zero_like(common) or common == one_like(common):
        return num, den

    return num // common, den // common
