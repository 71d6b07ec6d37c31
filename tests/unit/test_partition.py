"""
Тесты для Partition — целочисленного деления наследства

Проверяемые инварианты:
1. round_half_up: 0.5 округляется вверх (в отличие от round())
2. Σ split_properties(P, n) == P
3. max - min <= 1 для недвижимости
4. Денежная доля одинакова для всех детей, остаток не перераспределяется
5. Земля достаётся только первому ребёнку
"""

import pytest

from src.core.math import (
    halve,
    land_share,
    money_share,
    property_share,
    round_half_up,
    split_properties,
)


# =============================================================================
# ТЕСТЫ: Rounding
# =============================================================================


class TestRoundHalfUp:
    """Тесты round_half_up"""

    def test_exact_division(self) -> None:
        assert round_half_up(1000, 2) == 500
        assert round_half_up(9, 3) == 3
        assert round_half_up(0, 5) == 0

    def test_rounds_down_below_half(self) -> None:
        """250 / 3 = 83.33 → 83"""
        assert round_half_up(250, 3) == 83

    def test_rounds_up_above_half(self) -> None:
        """500 / 3 = 166.67 → 167"""
        assert round_half_up(500, 3) == 167

    def test_half_rounds_up(self) -> None:
        """0.5 → вверх, в том числе для чётной целой части"""
        assert round_half_up(1, 2) == 1
        assert round_half_up(5, 2) == 3
        assert round_half_up(25, 10) == 3
        # Встроенный round() здесь дал бы 2
        assert round(5 / 2) == 2

    def test_halve(self) -> None:
        assert halve(500) == 250
        assert halve(3) == 2
        assert halve(0) == 0

    def test_invalid_arguments(self) -> None:
        with pytest.raises(ValueError, match="numerator"):
            round_half_up(-1, 2)
        with pytest.raises(ValueError, match="denominator"):
            round_half_up(1, 0)


# =============================================================================
# ТЕСТЫ: Money
# =============================================================================


class TestMoneyShare:
    """Тесты money_share"""

    def test_even_split(self) -> None:
        assert money_share(1000, 2) == 500

    def test_rounding_not_redistributed(self) -> None:
        """1000 / 3: каждый получает 333, сумма 999 != 1000"""
        share = money_share(1000, 3)
        assert share == 333
        assert share * 3 == 999

    def test_rounding_up_exceeds_total(self) -> None:
        """500 / 3: каждый получает 167, сумма 501 > 500"""
        share = money_share(500, 3)
        assert share * 3 == 501

    @pytest.mark.parametrize("total_money", [0, 1, 7, 100, 1001, 99_999])
    @pytest.mark.parametrize("n_children", [1, 2, 3, 4, 7])
    def test_sum_deviation_bounded(self, total_money: int, n_children: int) -> None:
        """|n * share - total| <= n - 1"""
        share = money_share(total_money, n_children)
        assert abs(share * n_children - total_money) <= max(n_children - 1, 0)

    def test_zero_children_rejected(self) -> None:
        with pytest.raises(ValueError, match="n_children"):
            money_share(100, 0)


# =============================================================================
# ТЕСТЫ: Properties
# =============================================================================


class TestPropertyShare:
    """Тесты сбалансированного распределения недвижимости"""

    def test_reference_split(self) -> None:
        """10 объектов на 4 детей → [2, 2, 3, 3]"""
        assert split_properties(10, 4) == [2, 2, 3, 3]

    def test_single_child_gets_everything(self) -> None:
        assert split_properties(2, 1) == [2]

    def test_fewer_properties_than_children(self) -> None:
        split = split_properties(1, 3)
        assert sum(split) == 1
        assert sorted(split) == [0, 0, 1]

    @pytest.mark.parametrize("total_properties", list(range(0, 25)) + [97, 1000])
    @pytest.mark.parametrize("n_children", [1, 2, 3, 4, 5, 6, 9])
    def test_split_exact_and_balanced(self, total_properties: int, n_children: int) -> None:
        """Σ == P и max - min <= 1"""
        split = split_properties(total_properties, n_children)
        assert len(split) == n_children
        assert sum(split) == total_properties
        assert max(split) - min(split) <= 1

    def test_property_share_matches_split(self) -> None:
        assert [property_share(7, 3, i) for i in range(3)] == split_properties(7, 3)

    def test_index_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="index"):
            property_share(10, 4, 4)
        with pytest.raises(ValueError, match="index"):
            property_share(10, 4, -1)

    def test_negative_total_rejected(self) -> None:
        with pytest.raises(ValueError, match="total_properties"):
            property_share(-1, 2, 0)


# =============================================================================
# ТЕСТЫ: Land
# =============================================================================


class TestLandShare:
    """Тесты неделимой земли"""

    def test_first_child_gets_all(self) -> None:
        assert land_share(100, 0) == 100

    @pytest.mark.parametrize("index", [1, 2, 10])
    def test_other_children_get_nothing(self, index: int) -> None:
        assert land_share(100, index) == 0

    def test_negative_land_rejected(self) -> None:
        with pytest.raises(ValueError, match="total_land"):
            land_share(-5, 0)
