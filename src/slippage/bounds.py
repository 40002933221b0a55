"""
Bound Deriver — персональная граница цены ордера

Граница асимметрична: толерантность ограничивает только ту сторону сделки,
на которой участник несёт риск.

- Продавец base актива (token_from == base): нижняя граница.
  quote-сторона уменьшается на slippage * amount_to (checked, при
  невозможности вычесть берётся исходное значение):

      lower = (amount_to - s * amount_to) / quote_unit
              ---------------------------------------
                     amount_from / base_unit

- Покупатель base актива (token_to == base): верхняя граница.
  quote-сторона увеличивается на slippage * amount_from (с насыщением):

      upper = (amount_from + s * amount_from) / quote_unit
              -----------------------------------------
                        amount_to / base_unit

Ориентация берётся из рыночной пары, а не из самого ордера.
Масштабы пары разрешаются до проверки ориентации, поэтому неизвестный
актив пары всегда даёт UnknownAsset.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.errors import NoLowerBoundForBuyingPrice, NoUpperBoundForSellingPrice
from src.core.domain.market_pair import MarketPair
from src.core.domain.order import Order
from src.core.math.fixed_point import FixedPrice
from src.core.math.numerical_safeguards import checked_sub, saturating_add
from src.slippage.pricing import price
from src.slippage.units import AssetUnitResolver


@dataclass(frozen=True)
class PriceBand:
    """
    Допустимый диапазон цены ордера для отображения.

    Ровно одна из границ задана: lower для продавца, upper для покупателя.
    """

    lower: Optional[FixedPrice]
    upper: Optional[FixedPrice]
    declared: FixedPrice

    def contains(self, offered: FixedPrice) -> bool:
        if self.lower is not None and offered < self.lower:
            return False
        if self.upper is not None and offered > self.upper:
            return False
        return True


class BoundDeriver:
    """Расчёт нижней/верхней границы цены ордера относительно пары."""

    def __init__(self, resolver: AssetUnitResolver):
        self.resolver = resolver

    def lower_bound(self, order: Order, market_pair: MarketPair) -> FixedPrice:
        """
        Худшая (минимальная) цена за единицу base, которую примет продавец.

        Raises:
            UnknownAsset: Если нога пары отсутствует в каталоге
            NoLowerBoundForBuyingPrice: Если ордер не продаёт base
            SlippageOverflow: Если цена не представима
        """
        base_unit, quote_unit = self.resolver.pair_units(market_pair)

        if order.token_from != market_pair.base_asset:
            raise NoLowerBoundForBuyingPrice()

        quote_amount = order.amount_to
        reduced = checked_sub(quote_amount, order.slippage * quote_amount)
        if reduced is None:
            reduced = quote_amount

        return price(reduced, quote_unit, order.amount_from, base_unit)

    def upper_bound(self, order: Order, market_pair: MarketPair) -> FixedPrice:
        """
        Худшая (максимальная) цена за единицу base, которую заплатит покупатель.

        Raises:
            UnknownAsset: Если нога пары отсутствует в каталоге
            NoUpperBoundForSellingPrice: Если ордер не покупает base
            SlippageOverflow: Если цена не представима
        """
        base_unit, quote_unit = self.resolver.pair_units(market_pair)

        if order.token_to != market_pair.base_asset:
            raise NoUpperBoundForSellingPrice()

        quote_amount = order.amount_from
        inflated = saturating_add(quote_amount, order.slippage * quote_amount)

        return price(inflated, quote_unit, order.amount_to, base_unit)

    def declared_price(self, order: Order, market_pair: MarketPair) -> FixedPrice:
        """
        Цена ордера без учёта толерантности.

        Raises:
            UnknownAsset: Если нога пары отсутствует в каталоге
            UnknownAssetInMarketPair: Если ордер не торгует данной парой
            SlippageOverflow: Если цена не представима
        """
        base_unit, quote_unit = self.resolver.pair_units(market_pair)

        if market_pair.is_selling(order):
            return price(order.amount_to, quote_unit, order.amount_from, base_unit)
        return price(order.amount_from, quote_unit, order.amount_to, base_unit)

    def price_band(self, order: Order, market_pair: MarketPair) -> PriceBand:
        """Диапазон цены ордера (например, для показа пользователю до отправки)."""
        declared = self.declared_price(order, market_pair)

        if order.token_to == market_pair.base_asset:
            return PriceBand(
                lower=None,
                upper=self.upper_bound(order, market_pair),
                declared=declared,
            )
        return PriceBand(
            lower=self.lower_bound(order, market_pair),
            upper=None,
            declared=declared,
        )
