"""
Asset Unit Resolver

Переводит идентификатор актива в его десятичный порядок и raw amount одной
целой единицы (10**exponent, с насыщением).
"""

from src.core.domain.asset import AssetCatalog, AssetInfo
from src.core.domain.currency import CurrencyId
from src.core.domain.market_pair import MarketPair
from src.core.math.numerical_safeguards import saturating_mul


def one_unit(asset: AssetInfo) -> int:
    """
    Raw amount одной единицы актива.

    Тотальная функция: при переполнении u128 возвращает BALANCE_MAX.
    """
    return asset.one_unit()


class AssetUnitResolver:
    """Разрешение масштабов активов по каталогу."""

    def __init__(self, catalog: AssetCatalog):
        self.catalog = catalog

    def exponent(self, currency: CurrencyId) -> int:
        """
        Raises:
            UnknownAsset: Если актива нет в каталоге
        """
        return self.catalog.get(currency).exponent

    def one_unit(self, currency: CurrencyId) -> int:
        """
        Raises:
            UnknownAsset: Если актива нет в каталоге
        """
        return one_unit(self.catalog.get(currency))

    def to_raw(self, currency: CurrencyId, units: int) -> int:
        """Целое количество единиц в raw amount (с насыщением)."""
        return saturating_mul(units, self.one_unit(currency))

    def pair_units(self, market_pair: MarketPair) -> tuple[int, int]:
        """
        Масштабы обеих ног пары.

        Returns:
            (base_unit, quote_unit)

        Raises:
            UnknownAsset: Если хотя бы одна нога не разрешается
        """
        base_unit = self.one_unit(market_pair.base_asset)
        quote_unit = self.one_unit(market_pair.quote_asset)
        return base_unit, quote_unit
