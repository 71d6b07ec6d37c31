"""Heritage Distribution Engine — распределение наследства по дереву семьи.

Движок спускается от корня семьи к члену с заданным именем и на каждом шаге
выбирает ровно один режим:
- TARGET_FOUND: член найден (обязан быть жив), поиск останавливается
- DECEASED_DELEGATE: умерший член распределяет своё + полученное между детьми
- ALIVE_DELEGATE: живой член передаёт детям только половину полученных денег
- TERMINAL_ABSENT: детей нет, дальше искать негде

Режим определяется только парой (name == member.name, is_deceased) и
наличием детей. Обход конечен: каждый шаг спускается на уровень ниже.
Обход идёт с явным стеком, поэтому глубина дерева не упирается в лимит
рекурсии интерпретатора; max_depth ограничивает её явно (TreeTooDeep).

Движок чистый: без I/O и без разделяемого изменяемого состояния, все
промежуточные Heritage создаются заново.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Final, Optional, Sequence, Tuple

from src.core.domain.family import Family, Member
from src.core.domain.heritage import Heritage, HeritageError, validate_prices
from src.core.math.age import DEATH_AGE, is_deceased
from src.core.math.partition import halve, land_share, money_share, property_share

logger = logging.getLogger("heritage.distribution")


# Максимальная глубина дерева (рёбер от корня), после которой поиск прерывается
MAX_TREE_DEPTH: Final[int] = 200


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyName(HeritageError):
    """Пустое имя в запросе."""

    pass


class MemberNotFound(HeritageError):
    """В семье нет корня или член с таким именем отсутствует в дереве."""

    pass


class MemberCannotBeDead(HeritageError):
    """Запрошенный член семьи уже достиг возраста смерти на дату оценки."""

    pass


class TreeTooDeep(HeritageError):
    """Глубина обхода превысила max_depth."""

    pass


class AmbiguousSiblingOrder(HeritageError):
    """Два ребёнка умершего члена совпадают по дате рождения и имени."""

    pass


# =============================================================================
# TYPES
# =============================================================================


class MemberMode(str, Enum):
    """Режим обработки члена семьи на шаге обхода."""

    TARGET_FOUND = "target_found"
    DECEASED_DELEGATE = "deceased_delegate"
    ALIVE_DELEGATE = "alive_delegate"
    TERMINAL_ABSENT = "terminal_absent"


@dataclass(frozen=True)
class DistributionConfig:
    """Конфигурация правил распределения.

    - death_age: возраст (полные годы), с которого член считается умершим
    - max_depth: максимальная глубина обхода дерева
    """
    death_age: int = DEATH_AGE
    max_depth: int = MAX_TREE_DEPTH

    def __post_init__(self):
        if self.death_age < 1:
            raise ValueError(f"death_age must be >= 1, got {self.death_age}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")


@dataclass(frozen=True)
class SearchStep:
    """Шаг пути от корня до найденного члена."""

    member_name: str
    mode: MemberMode
    incoming: Heritage


@dataclass(frozen=True)
class DistributionResult:
    """Результат запроса наследства."""

    name: str
    evaluation_date: date
    heritage: Heritage
    total: int

    # Путь от корня до найденного члена (включительно)
    path: Tuple[SearchStep, ...]


_SearchOutcome = Optional[Tuple[Heritage, Tuple[SearchStep, ...]]]


# =============================================================================
# ENGINE
# =============================================================================


class HeritageDistributionEngine:
    """Расчёт наследства члена семьи обходом дерева от корня.

    Правила:
    - Умерший член: деньги делятся поровну (одинаковая округлённая доля),
      недвижимость сбалансированно, земля целиком первому ребёнку.
      Дети сортируются по (birth_date, name).
    - Живой член: детям уходит round(round(money / 2) / n), без
      недвижимости и земли.
    - Найденный член с детьми оставляет себе половину полученных денег,
      без детей все полученные деньги; недвижимость и земля всегда
      остаются целиком.
    """

    def __init__(
        self,
        property_price: int,
        land_extension_unit_price: int,
        config: Optional[DistributionConfig] = None
    ):
        """
        Args:
            property_price: цена одного объекта недвижимости (>= 0)
            land_extension_unit_price: цена одного m² земли (>= 0)
            config: конфигурация правил (death_age, max_depth)

        Raises:
            InvalidPropertyPrice: если property_price < 0
            InvalidLandExtensionUnitPrice: если land_extension_unit_price < 0
        """
        validate_prices(property_price, land_extension_unit_price)

        self.property_price = property_price
        self.land_extension_unit_price = land_extension_unit_price
        self.config = config or DistributionConfig()

    def get_heritage_by_name(
        self,
        name: str,
        family: Family,
        evaluation_date: date
    ) -> int:
        """Денежная оценка наследства члена семьи на дату оценки.

        Args:
            name: имя запрашиваемого члена семьи
            family: семья (root_member)
            evaluation_date: дата оценки

        Returns:
            Суммарная стоимость наследства (int)

        Raises:
            EmptyName: пустое имя
            MemberNotFound: нет корня или имени нет в дереве
            MemberCannotBeDead: запрошенный член уже умер
            TreeTooDeep: дерево глубже max_depth
        """
        return self.evaluate(name, family, evaluation_date).total

    def evaluate(
        self,
        name: str,
        family: Family,
        evaluation_date: date
    ) -> DistributionResult:
        """То же, что get_heritage_by_name, но с наследством и путём поиска."""
        if not name:
            raise EmptyName("Member name cannot be empty")

        root_member = family.root_member
        if root_member is None:
            raise MemberNotFound("Family has no root member")

        outcome = self._search(name, root_member, evaluation_date)
        if outcome is None:
            raise MemberNotFound(f"Member not found in family tree: {name!r}")

        heritage, path = outcome
        total = heritage.total(self.property_price, self.land_extension_unit_price)

        logger.debug(
            "Heritage of %r at %s: %s -> total=%d", name, evaluation_date, heritage, total
        )

        return DistributionResult(
            name=name,
            evaluation_date=evaluation_date,
            heritage=heritage,
            total=total,
            path=path,
        )

    def is_deceased(self, member: Member, evaluation_date: date) -> bool:
        """Член семьи умер, если его возраст в полных годах >= death_age."""
        return is_deceased(member.birth_date, evaluation_date, self.config.death_age)

    # -------------------------------------------------------------------------
    # Tree walk
    # -------------------------------------------------------------------------

    def _search(
        self,
        name: str,
        root_member: Member,
        evaluation_date: date
    ) -> _SearchOutcome:
        """Обход дерева в глубину с явным стеком.

        Порядок посещения совпадает с рекурсивным: дети кладутся на стек в
        обратном порядке, поэтому первым обрабатывается первый ребёнок.
        Глубина обхода не зависит от лимита рекурсии интерпретатора.
        """
        # (член, полученное наследство, глубина, путь от корня до родителя)
        stack: list[Tuple[Member, Heritage, int, Tuple[SearchStep, ...]]] = [
            (root_member, Heritage.empty(), 0, ())
        ]

        while stack:
            member, incoming, depth, path = stack.pop()

            if depth > self.config.max_depth:
                raise TreeTooDeep(
                    f"Family tree deeper than max_depth={self.config.max_depth} "
                    f"(at member {member.name!r})"
                )

            deceased = self.is_deceased(member, evaluation_date)

            # 1. Найденный член
            if member.name == name:
                if deceased:
                    raise MemberCannotBeDead(
                        f"Member {name!r} is already dead at {evaluation_date}"
                    )
                heritage = self._target_heritage(member, incoming)
                logger.debug("%s: %s, heritage=%s", member.name, MemberMode.TARGET_FOUND.value, heritage)
                return heritage, path + (SearchStep(member.name, MemberMode.TARGET_FOUND, incoming),)

            children = member.children
            if not children:
                logger.debug("%s: %s", member.name, MemberMode.TERMINAL_ABSENT.value)
                continue

            # 2. Умерший член распределяет всё между детьми
            if deceased:
                mode = MemberMode.DECEASED_DELEGATE
                inheritances = self._deceased_inheritances(member, children, incoming)
            # 3. Живой член передаёт только половину полученных денег
            else:
                mode = MemberMode.ALIVE_DELEGATE
                inheritances = self._alive_inheritances(children, incoming)

            logger.debug("%s: %s to %d children", member.name, mode.value, len(children))

            child_path = path + (SearchStep(member.name, mode, incoming),)
            for child, child_inheritance in reversed(inheritances):
                stack.append((child, child_inheritance, depth + 1, child_path))

        return None

    def _target_heritage(self, member: Member, incoming: Heritage) -> Heritage:
        own = member.heritage

        # С детьми половина полученных денег остаётся для потомков
        if member.children:
            received_money = halve(incoming.money)
        else:
            received_money = incoming.money

        return Heritage(
            money=own.money + received_money,
            properties=own.properties + incoming.properties,
            land_extension=own.land_extension + incoming.land_extension,
        )

    def _deceased_inheritances(
        self,
        member: Member,
        children: Sequence[Member],
        incoming: Heritage
    ) -> list[Tuple[Member, Heritage]]:
        total = member.heritage.merge(incoming)
        n_children = len(children)

        # Одинаковая доля каждому, остаток округления не перераспределяется
        money_to_give = money_share(total.money, n_children)

        inheritances = []
        for index, child in enumerate(self.sort_children(children)):
            inheritances.append((
                child,
                Heritage(
                    money=money_to_give,
                    properties=property_share(total.properties, n_children, index),
                    land_extension=land_share(total.land_extension, index),
                ),
            ))
        return inheritances

    def _alive_inheritances(
        self,
        children: Sequence[Member],
        incoming: Heritage
    ) -> list[Tuple[Member, Heritage]]:
        child_inheritance = Heritage(
            money=money_share(halve(incoming.money), len(children)),
            properties=0,
            land_extension=0,
        )
        return [(child, child_inheritance) for child in children]

    @staticmethod
    def sort_children(children: Sequence[Member]) -> list[Member]:
        """Сортировка детей по (birth_date, name): строгий полный порядок.

        Raises:
            AmbiguousSiblingOrder: два ребёнка с одинаковыми датой и именем
        """
        ordered = sorted(children, key=lambda child: (child.birth_date, child.name))

        for previous, current in zip(ordered, ordered[1:]):
            if (previous.birth_date, previous.name) == (current.birth_date, current.name):
                raise AmbiguousSiblingOrder(
                    f"Siblings share birth date and name: {current.name!r} ({current.birth_date})"
                )

        return ordered
