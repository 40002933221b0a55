"""
MarketPair — рыночная пара (base, quote)

Пара определяет, какая нога ордера считается base, а какая quote при
расчёте цены: цена = количество quote за одну единицу base.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

from src.core.domain.currency import CurrencyId
from src.core.domain.errors import UnknownAssetInMarketPair
from src.core.domain.order import Order

if TYPE_CHECKING:
    from src.core.domain.asset import AssetCatalog


class MarketPair(BaseModel):
    """
    Упорядоченная пара активов.

    Immutable модель (frozen=True). base_asset != quote_asset.
    """

    base_asset: CurrencyId = Field(..., description="Актив, за единицу которого выражена цена")
    quote_asset: CurrencyId = Field(..., description="Актив, в котором выражена цена")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_distinct_legs(self) -> "MarketPair":
        if self.base_asset == self.quote_asset:
            raise ValueError(f"base_asset and quote_asset must differ, got {self.base_asset}")
        return self

    def contains(self, currency: CurrencyId) -> bool:
        return currency == self.base_asset or currency == self.quote_asset

    def is_selling(self, order: Order) -> bool:
        """
        Классификация ордера относительно пары.

        Returns:
            True если ордер продаёт base, False если продаёт quote

        Raises:
            UnknownAssetInMarketPair: Если token_from не входит в пару
        """
        if order.token_from == self.base_asset:
            return True
        if order.token_from == self.quote_asset:
            return False
        raise UnknownAssetInMarketPair(order.token_from, self)

    def symbol(self, catalog: "AssetCatalog") -> str:
        """Отображение пары, например 'BTC/USDC'."""
        base = catalog.get(self.base_asset).symbol
        quote = catalog.get(self.quote_asset).symbol
        return f"{base}/{quote}"

    def __str__(self) -> str:
        return f"{self.base_asset}/{self.quote_asset}"
