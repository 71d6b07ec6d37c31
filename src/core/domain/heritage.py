"""
Heritage — Иммутабельный снапшот наследства

Три неотрицательные целые величины:
- money: денежная сумма
- properties: количество объектов недвижимости
- land_extension: площадь земли (m²)

Immutable Pydantic модель (frozen=True). Любое изменение наследства создаёт
новый экземпляр; при распределении экземпляры никогда не разделяются
между ветками.

Ошибки валидации поднимаются как доменные исключения (наследники
HeritageError, а не ValueError), поэтому pydantic не оборачивает их в
ValidationError и вызывающий код получает их напрямую.
"""

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class HeritageError(Exception):
    """Базовое исключение для всех ошибок расчёта наследства."""

    pass


class InvalidMoneyAmount(HeritageError):
    """Отрицательная денежная сумма."""

    pass


class InvalidPropertyCount(HeritageError):
    """Отрицательное количество объектов недвижимости."""

    pass


class InvalidLandExtension(HeritageError):
    """Отрицательная площадь земли."""

    pass


class InvalidPropertyPrice(HeritageError):
    """Отрицательная цена объекта недвижимости."""

    pass


class InvalidLandExtensionUnitPrice(HeritageError):
    """Отрицательная цена за m² земли."""

    pass


# =============================================================================
# PRICE VALIDATION
# =============================================================================


def validate_prices(property_price: int, land_extension_unit_price: int) -> None:
    """
    Проверка цен, используемых для денежной оценки наследства.

    Args:
        property_price: Цена одного объекта недвижимости
        land_extension_unit_price: Цена одного m² земли

    Raises:
        InvalidPropertyPrice: Если property_price < 0
        InvalidLandExtensionUnitPrice: Если land_extension_unit_price < 0
    """
    if property_price < 0:
        raise InvalidPropertyPrice(
            f"Property price cannot be negative: {property_price}"
        )

    if land_extension_unit_price < 0:
        raise InvalidLandExtensionUnitPrice(
            f"Land extension unit price cannot be negative: {land_extension_unit_price}"
        )


# =============================================================================
# HERITAGE MODEL
# =============================================================================


class Heritage(BaseModel):
    """
    Наследство: деньги, недвижимость и земля.

    Immutable модель (frozen=True). Все поля всегда >= 0.
    """

    money: int = Field(..., description="Денежная сумма")
    properties: int = Field(..., description="Количество объектов недвижимости")
    land_extension: int = Field(..., description="Площадь земли (m²)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("money")
    @classmethod
    def validate_money(cls, v: int) -> int:
        if v < 0:
            raise InvalidMoneyAmount(f"Money amount cannot be negative: {v}")
        return v

    @field_validator("properties")
    @classmethod
    def validate_properties(cls, v: int) -> int:
        if v < 0:
            raise InvalidPropertyCount(f"Property count cannot be negative: {v}")
        return v

    @field_validator("land_extension")
    @classmethod
    def validate_land_extension(cls, v: int) -> int:
        if v < 0:
            raise InvalidLandExtension(f"Land extension cannot be negative: {v}")
        return v

    @classmethod
    def empty(cls) -> "Heritage":
        """Пустое наследство (0, 0, 0) — стартовое значение у корня дерева."""
        return cls(money=0, properties=0, land_extension=0)

    def merge(self, other: "Heritage") -> "Heritage":
        """
        Покомпонентная сумма двух наследств.

        Args:
            other: Второе наследство (например, полученное от предка)

        Returns:
            Новый экземпляр Heritage
        """
        return Heritage(
            money=self.money + other.money,
            properties=self.properties + other.properties,
            land_extension=self.land_extension + other.land_extension,
        )

    def total(self, property_price: int, land_extension_unit_price: int) -> int:
        """
        Денежная оценка наследства.

        total = money + properties * property_price
                + land_extension * land_extension_unit_price

        Целые числа Python не переполняются, поэтому ограничения разрядности
        здесь нет.

        Args:
            property_price: Цена одного объекта недвижимости (>= 0)
            land_extension_unit_price: Цена одного m² земли (>= 0)

        Returns:
            Суммарная стоимость (int)

        Raises:
            InvalidPropertyPrice: Если property_price < 0
            InvalidLandExtensionUnitPrice: Если land_extension_unit_price < 0
        """
        validate_prices(property_price, land_extension_unit_price)

        return (
            self.money
            + self.properties * property_price
            + self.land_extension * land_extension_unit_price
        )
