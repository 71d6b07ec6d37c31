"""
Partition — Целочисленное деление наследства между детьми

Модуль содержит чистые целочисленные функции распределения:
- Округление half-up (0.5 округляется вверх) без float
- Денежная доля ребёнка (одинаковая для всех детей)
- Сбалансированное распределение недвижимости
- Неделимое распределение земли

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции выполняются в целых числах (без потерь точности float)
2. Σ split_properties(P, n) == P для любых P >= 0, n >= 1
3. max(split) - min(split) <= 1 для недвижимости
4. Ошибка округления денег НЕ перераспределяется между детьми
5. Землю получает только первый ребёнок в порядке сортировки

ФОРМУЛЫ:
    round_half_up(a, b) = floor((2a + b) / 2b)
    money_share(M, n) = round_half_up(M, n)
    property_share(P, n, i) = floor((P + n - 1 - i) / 2n) + floor((P + n + i) / 2n)
"""

from typing import List


# =============================================================================
# VALIDATION
# =============================================================================


def _validate_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _validate_children_count(n_children: int) -> None:
    if n_children < 1:
        raise ValueError(f"n_children must be >= 1, got {n_children}")


# =============================================================================
# ROUNDING
# =============================================================================


def round_half_up(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с округлением half-up.

    Встроенный round() использует banker's rounding (round(2.5) == 2),
    здесь 0.5 всегда округляется вверх: round_half_up(5, 2) == 3.

    Args:
        numerator: Делимое (>= 0)
        denominator: Делитель (>= 1)

    Returns:
        Ближайшее целое к numerator / denominator (0.5 вверх)

    Raises:
        ValueError: Если numerator < 0 или denominator < 1

    Examples:
        >>> round_half_up(1000, 2)
        500
        >>> round_half_up(250, 3)
        83
        >>> round_half_up(500, 3)
        167
        >>> round_half_up(1, 2)
        1
    """
    _validate_non_negative("numerator", numerator)
    if denominator < 1:
        raise ValueError(f"denominator must be >= 1, got {denominator}")

    return (2 * numerator + denominator) // (2 * denominator)


def halve(amount: int) -> int:
    """Половина суммы с округлением half-up."""
    return round_half_up(amount, 2)


# =============================================================================
# MONEY
# =============================================================================


def money_share(total_money: int, n_children: int) -> int:
    """
    Денежная доля одного ребёнка.

    Каждый ребёнок получает одинаковую округлённую долю. Сумма долей может
    отличаться от total_money не более чем на n_children - 1 (остаток не
    перераспределяется).

    Args:
        total_money: Распределяемая сумма (>= 0)
        n_children: Количество детей (>= 1)

    Returns:
        round_half_up(total_money, n_children)
    """
    _validate_children_count(n_children)
    return round_half_up(total_money, n_children)


# =============================================================================
# PROPERTIES
# =============================================================================


def property_share(total_properties: int, n_children: int, index: int) -> int:
    """
    Количество объектов недвижимости для ребёнка с индексом index.

    property_share = floor((P + n - 1 - i) / 2n) + floor((P + n + i) / 2n)

    Для P = 10, n = 4 даёт [2, 2, 3, 3]: остаток достаётся детям с большими
    индексами в порядке сортировки.

    Args:
        total_properties: Распределяемое количество P (>= 0)
        n_children: Количество детей n (>= 1)
        index: Индекс ребёнка в отсортированном порядке (0 <= index < n)

    Returns:
        Количество объектов для ребёнка

    Raises:
        ValueError: Если аргументы вне допустимого диапазона
    """
    _validate_non_negative("total_properties", total_properties)
    _validate_children_count(n_children)
    if not 0 <= index < n_children:
        raise ValueError(f"index must be in [0, {n_children}), got {index}")

    denom = 2 * n_children
    return (
        (total_properties + n_children - 1 - index) // denom
        + (total_properties + n_children + index) // denom
    )


def split_properties(total_properties: int, n_children: int) -> List[int]:
    """
    Сбалансированное распределение недвижимости между n детьми.

    Returns:
        Список долей длины n_children; сумма равна total_properties
    """
    return [
        property_share(total_properties, n_children, index)
        for index in range(n_children)
    ]


# =============================================================================
# LAND
# =============================================================================


def land_share(total_land: int, index: int) -> int:
    """
    Земля неделима: всю площадь получает первый ребёнок (index == 0).

    Args:
        total_land: Площадь земли (m², >= 0)
        index: Индекс ребёнка в отсортированном порядке (>= 0)

    Returns:
        total_land для index == 0, иначе 0
    """
    _validate_non_negative("total_land", total_land)
    _validate_non_negative("index", index)

    return total_land if index == 0 else 0
