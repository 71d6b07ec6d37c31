"""
Age — Возраст в полных годах и правило смертности

Единственное правило смертности: член семьи считается умершим на дату
оценки, если его возраст в полных годах >= DEATH_AGE. Явного флага
"жив/умер" нет.
"""

from datetime import date
from typing import Final


# Возраст смерти (полные годы)
DEATH_AGE: Final[int] = 100


def whole_years_between(birth_date: date, evaluation_date: date) -> int:
    """
    Количество полных лет между датой рождения и датой оценки.

    Год засчитывается, только если в году оценки наступил день рождения
    (сравнение по месяцу и дню). Для evaluation_date < birth_date
    результат отрицательный, поэтому ещё не родившийся член никогда не
    считается умершим.

    Args:
        birth_date: Дата рождения
        evaluation_date: Дата оценки (date или datetime)

    Returns:
        Полные годы (int)

    Examples:
        >>> whole_years_between(date(1947, 5, 1), date(2047, 5, 1))
        100
        >>> whole_years_between(date(1947, 5, 2), date(2047, 5, 1))
        99
    """
    years = evaluation_date.year - birth_date.year
    if (evaluation_date.month, evaluation_date.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def is_deceased(birth_date: date, evaluation_date: date, death_age: int = DEATH_AGE) -> bool:
    """
    Проверка: достиг ли член семьи возраста смерти на дату оценки.

    Args:
        birth_date: Дата рождения
        evaluation_date: Дата оценки
        death_age: Возраст смерти (default: DEATH_AGE)

    Returns:
        True если whole_years_between(...) >= death_age
    """
    return whole_years_between(birth_date, evaluation_date) >= death_age
