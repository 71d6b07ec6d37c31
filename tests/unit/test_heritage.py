"""
Тесты для Heritage — иммутабельного снапшота наследства

Проверяет:
1. Создание и валидацию (отрицательные поля отвергаются)
2. Immutability (frozen=True)
3. Денежную оценку total() и валидацию цен
4. merge() и empty()
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Heritage,
    HeritageError,
    InvalidLandExtension,
    InvalidLandExtensionUnitPrice,
    InvalidMoneyAmount,
    InvalidPropertyCount,
    InvalidPropertyPrice,
    validate_prices,
)


PROPERTY_PRICE = 1_000_000
LAND_PRICE = 300


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestHeritageCreation:
    """Тесты создания Heritage"""

    def test_create_heritage(self) -> None:
        """Валидное наследство сохраняет все три поля"""
        heritage = Heritage(money=1000, properties=2, land_extension=30)
        assert heritage.money == 1000
        assert heritage.properties == 2
        assert heritage.land_extension == 30

    def test_all_zero_accepted(self) -> None:
        """Нулевое наследство допустимо"""
        heritage = Heritage(money=0, properties=0, land_extension=0)
        assert heritage == Heritage.empty()

    def test_negative_money_rejected(self) -> None:
        with pytest.raises(InvalidMoneyAmount, match="-1000"):
            Heritage(money=-1000, properties=2, land_extension=30)

    def test_negative_properties_rejected(self) -> None:
        with pytest.raises(InvalidPropertyCount):
            Heritage(money=1000, properties=-2, land_extension=30)

    def test_negative_land_extension_rejected(self) -> None:
        with pytest.raises(InvalidLandExtension):
            Heritage(money=1000, properties=2, land_extension=-30)

    def test_errors_share_base_class(self) -> None:
        """Все ошибки наследуются от HeritageError, не от ValueError"""
        with pytest.raises(HeritageError):
            Heritage(money=-1, properties=0, land_extension=0)
        assert not issubclass(InvalidMoneyAmount, ValueError)

    def test_heritage_immutable(self) -> None:
        """Heritage immutable (frozen=True)"""
        heritage = Heritage(money=1000, properties=2, land_extension=30)
        with pytest.raises(ValidationError):
            heritage.money = 0  # type: ignore


# =============================================================================
# TOTAL
# =============================================================================


class TestHeritageTotal:
    """Тесты денежной оценки total()"""

    def test_total_calculation(self) -> None:
        """1000 + 2 * 1_000_000 + 30 * 300 = 2_010_000"""
        heritage = Heritage(money=1000, properties=2, land_extension=30)
        assert heritage.total(PROPERTY_PRICE, LAND_PRICE) == 2_010_000

    def test_total_zero_prices(self) -> None:
        """При нулевых ценах стоимость равна деньгам"""
        heritage = Heritage(money=1000, properties=2, land_extension=30)
        assert heritage.total(0, 0) == 1000

    @pytest.mark.parametrize("factor", [0, 1, 2, 7])
    def test_total_linear_in_prices(self, factor: int) -> None:
        """total линейна по каждой из цен"""
        heritage = Heritage(money=5, properties=3, land_extension=11)
        base = heritage.total(0, 0)
        assert heritage.total(factor * 10, 0) - base == factor * (heritage.total(10, 0) - base)
        assert heritage.total(0, factor * 10) - base == factor * (heritage.total(0, 10) - base)

    def test_total_large_values(self) -> None:
        """Целые Python не переполняются"""
        heritage = Heritage(money=2**70, properties=2**40, land_extension=0)
        assert heritage.total(2**40, 0) == 2**70 + 2**80

    def test_negative_property_price_rejected(self) -> None:
        heritage = Heritage(money=1000, properties=2, land_extension=30)
        with pytest.raises(InvalidPropertyPrice):
            heritage.total(-PROPERTY_PRICE, LAND_PRICE)

    def test_negative_land_price_rejected(self) -> None:
        heritage = Heritage(money=1000, properties=2, land_extension=30)
        with pytest.raises(InvalidLandExtensionUnitPrice):
            heritage.total(PROPERTY_PRICE, -LAND_PRICE)

    def test_validate_prices_accepts_zero(self) -> None:
        validate_prices(0, 0)


# =============================================================================
# MERGE
# =============================================================================


class TestHeritageMerge:
    """Тесты merge()"""

    def test_merge_sums_fields(self) -> None:
        own = Heritage(money=10, properties=1, land_extension=5)
        incoming = Heritage(money=3, properties=2, land_extension=0)
        merged = own.merge(incoming)
        assert merged == Heritage(money=13, properties=3, land_extension=5)

    def test_merge_returns_new_instance(self) -> None:
        own = Heritage(money=10, properties=1, land_extension=5)
        merged = own.merge(Heritage.empty())
        assert merged == own
        assert merged is not own
        assert own.money == 10
