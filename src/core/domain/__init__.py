"""
Domain models and value objects.

Contains the Heritage value object, its errors and the Member/Family contracts.
"""

from src.core.domain.family import Family, FamilyMember, FamilyTree, Member
from src.core.domain.heritage import (
    Heritage,
    HeritageError,
    InvalidLandExtension,
    InvalidLandExtensionUnitPrice,
    InvalidMoneyAmount,
    InvalidPropertyCount,
    InvalidPropertyPrice,
    validate_prices,
)

__all__ = [
    # Heritage model
    "Heritage",
    "validate_prices",
    # Heritage errors
    "HeritageError",
    "InvalidMoneyAmount",
    "InvalidPropertyCount",
    "InvalidLandExtension",
    "InvalidPropertyPrice",
    "InvalidLandExtensionUnitPrice",
    # Family contracts
    "Member",
    "Family",
    # In-memory family models
    "FamilyMember",
    "FamilyTree",
]
