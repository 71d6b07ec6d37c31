"""
Family — Контракты дерева семьи и in-memory реализация

Движок распределения работает с двумя capability-контрактами:
- Member: name, birth_date, heritage, children
- Family: root_member

Контракты описаны через typing.Protocol: движок не зависит от конкретной
реализации (in-memory дерево, строки ORM, тестовые заглушки).

FamilyMember / FamilyTree — иммутабельная Pydantic реализация контрактов,
используемая загрузчиком контракта family_tree и тестами.
"""

from datetime import date
from typing import Iterator, Optional, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, Field, model_validator

from .heritage import Heritage


# =============================================================================
# CAPABILITY CONTRACTS
# =============================================================================


@runtime_checkable
class Member(Protocol):
    """Член семьи (read-only контракт)."""

    @property
    def name(self) -> str: ...

    @property
    def birth_date(self) -> date: ...

    @property
    def heritage(self) -> Heritage: ...

    @property
    def children(self) -> Sequence["Member"]: ...


@runtime_checkable
class Family(Protocol):
    """Семья: единственный корневой член дерева (или None)."""

    @property
    def root_member(self) -> Optional[Member]: ...


# =============================================================================
# IN-MEMORY MODELS
# =============================================================================


class FamilyMember(BaseModel):
    """
    Член семьи в in-memory дереве.

    Immutable модель (frozen=True). Порядок children не несёт смысла:
    движок сортирует детей сам.
    """

    name: str = Field(..., min_length=1, description="Имя (уникально в дереве)")
    birth_date: date = Field(..., description="Дата рождения")
    heritage: Heritage = Field(
        default_factory=Heritage.empty, description="Собственное наследство"
    )
    children: tuple["FamilyMember", ...] = Field(
        default=(), description="Дети (без гарантии порядка)"
    )

    model_config = {"frozen": True}

    def iter_members(self) -> Iterator["FamilyMember"]:
        """Обход поддерева в глубину (pre-order), включая самого члена."""
        stack = [self]
        while stack:
            member = stack.pop()
            yield member
            stack.extend(reversed(member.children))


class FamilyTree(BaseModel):
    """
    Семья с единственным корнем.

    Инвариант: имена уникальны во всём дереве (поиск идёт по имени).
    """

    root_member: Optional[FamilyMember] = Field(
        default=None, description="Корневой член семьи"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_names(self) -> "FamilyTree":
        seen: set[str] = set()
        for member in self.iter_members():
            if member.name in seen:
                raise ValueError(f"Duplicate member name in family tree: {member.name!r}")
            seen.add(member.name)
        return self

    def iter_members(self) -> Iterator[FamilyMember]:
        """Все члены семьи в порядке pre-order обхода."""
        if self.root_member is None:
            return iter(())
        return self.root_member.iter_members()

    def find_member(self, name: str) -> Optional[FamilyMember]:
        """
        Поиск члена семьи по имени.

        Args:
            name: Имя члена семьи

        Returns:
            FamilyMember или None, если такого имени нет
        """
        for member in self.iter_members():
            if member.name == name:
                return member
        return None
