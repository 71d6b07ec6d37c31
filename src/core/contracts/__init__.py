"""
Contract Validation Module

Модуль для валидации JSON контрактов (снапшот дерева семьи).
"""

from .validators import (
    ContractValidator,
    FamilyTreeValidator,
    SchemaLoader,
    load_family_tree,
    validate_family_tree,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FamilyTreeValidator",
    # Functions
    "validate_family_tree",
    "load_family_tree",
]
