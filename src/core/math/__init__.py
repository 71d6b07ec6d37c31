"""
Core math modules

Целочисленные примитивы распределения наследства и правило возраста.
"""

# Partition
from src.core.math.partition import (
    halve,
    land_share,
    money_share,
    property_share,
    round_half_up,
    split_properties,
)

# Age
from src.core.math.age import (
    DEATH_AGE,
    is_deceased,
    whole_years_between,
)

__all__ = [
    # Partition — Rounding
    "round_half_up",
    "halve",
    # Partition — Shares
    "money_share",
    "property_share",
    "split_properties",
    "land_share",
    # Age — Constants
    "DEATH_AGE",
    # Age — Functions
    "whole_years_between",
    "is_deceased",
]
