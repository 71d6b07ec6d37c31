"""
Heritage Distribution Engine — распределение наследства по дереву семьи.
"""

from .engine import (
    MAX_TREE_DEPTH,
    AmbiguousSiblingOrder,
    DistributionConfig,
    DistributionResult,
    EmptyName,
    HeritageDistributionEngine,
    MemberCannotBeDead,
    MemberMode,
    MemberNotFound,
    SearchStep,
    TreeTooDeep,
)

__all__ = [
    "MAX_TREE_DEPTH",
    "HeritageDistributionEngine",
    "DistributionConfig",
    "DistributionResult",
    "SearchStep",
    "MemberMode",
    "EmptyName",
    "MemberNotFound",
    "MemberCannotBeDead",
    "TreeTooDeep",
    "AmbiguousSiblingOrder",
]
