"""Slippage Validator — проверка цены fill для обеих сторон сделки

Для уже сопоставленной пары ордеров (taker + maker) и предложенных сумм fill:
1. Масштабы base/quote разрешаются по каталогу (UnknownAsset)
2. price_offered = (quote / quote_unit) / (base / base_unit)
3. Каждый ордер проверяется независимо (dry run):
   - покупатель base: price_offered > upper_bound → отказ
   - иначе (продавец base): price_offered < lower_bound → отказ
   Тип ошибки зависит от флага is_market_maker нарушившего ордера
4. Первая найденная ошибка возвращается вызывающему (без агрегации)

Порядок проверок канонический (продавцы, затем покупатели; маркет-мейкеры
первыми; затем order_id), поэтому перестановка taker/maker не меняет исход.

Лимитные ордера могут пересекать собственную нижнюю границу только при
явно включённом SlippageConfig.limit_orders_cross_lower_bound.

Валидатор stateless: каталог и конфигурация неизменяемы и передаются при
создании, вызовы можно выполнять конкурентно.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.asset import AssetCatalog
from src.core.domain.errors import (
    OfferIsGreaterThanMarketMakerSwapUpperBound,
    OfferIsGreaterThanSwapUpperBound,
    OfferIsLessThanMarketMakerSwapLowerBound,
    OfferIsLessThanSwapLowerBound,
    SlippageError,
    SlippageViolation,
)
from src.core.domain.fill import FillProposal, SwapConfirmation
from src.core.domain.market_pair import MarketPair
from src.core.domain.order import Order
from src.core.logging import get_logger
from src.core.math.fixed_point import FixedPrice
from src.slippage.bounds import BoundDeriver, PriceBand
from src.slippage.pricing import price
from src.slippage.units import AssetUnitResolver

logger = get_logger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SlippageConfig:
    """Конфигурация валидатора.

    Политика границ: только pair-oriented (ориентация из рыночной пары).
    """

    # Лимитный ордер-продавец может исполниться ниже собственной нижней границы
    limit_orders_cross_lower_bound: bool = False


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SlippageCheckResult:
    """Результат проверки fill (форма без исключений)."""

    accepted: bool
    block_reason: str

    # Диагностика
    price_offered: Optional[FixedPrice]
    violating_order_id: Optional[str]
    error: Optional[SlippageError]

    # Детали
    details: str


# =============================================================================
# VALIDATOR
# =============================================================================


class SlippageValidator:
    """Проверка того, что цена fill приемлема для обоих ордеров."""

    def __init__(self, catalog: AssetCatalog, config: SlippageConfig | None = None):
        """Инициализация валидатора.

        Args:
            catalog: неизменяемый каталог активов
            config: конфигурация (опционально, используется default)
        """
        self.catalog = catalog
        self.config = config or SlippageConfig()
        self.resolver = AssetUnitResolver(catalog)
        self.bounds = BoundDeriver(self.resolver)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def lower_bound(self, order: Order, market_pair: MarketPair) -> FixedPrice:
        return self.bounds.lower_bound(order, market_pair)

    def upper_bound(self, order: Order, market_pair: MarketPair) -> FixedPrice:
        return self.bounds.upper_bound(order, market_pair)

    def price_band(self, order: Order, market_pair: MarketPair) -> PriceBand:
        return self.bounds.price_band(order, market_pair)

    def is_selling(self, market_pair: MarketPair, order: Order) -> bool:
        """
        Классификация ордера относительно пары.

        Raises:
            UnknownAsset: Если нога пары отсутствует в каталоге
            UnknownAssetInMarketPair: Если token_from не входит в пару
        """
        self.resolver.pair_units(market_pair)
        return market_pair.is_selling(order)

    def price_offered(
        self,
        market_pair: MarketPair,
        offered_base_amount: int,
        offered_quote_amount: int,
    ) -> FixedPrice:
        """
        Raises:
            UnknownAsset: Если нога пары отсутствует в каталоге
            SlippageOverflow: Если цена не представима (в том числе base == 0)
        """
        base_unit, quote_unit = self.resolver.pair_units(market_pair)
        return price(offered_quote_amount, quote_unit, offered_base_amount, base_unit)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(
        self,
        taker: Order,
        maker: Order,
        market_pair: MarketPair,
        offered_base_amount: int,
        offered_quote_amount: int,
    ) -> None:
        """Проверка fill для обоих ордеров.

        Args:
            taker: входящий (market) ордер
            maker: ордер из книги (limit / market maker)
            market_pair: пара, к которой относятся ордера
            offered_base_amount: предложенное количество base (raw)
            offered_quote_amount: предложенное количество quote (raw)

        Raises:
            SlippageError: первая найденная ошибка
        """
        price_offered = self.price_offered(market_pair, offered_base_amount, offered_quote_amount)

        for order in _canonical_order(taker, maker, market_pair):
            self.check_order(order, price_offered, market_pair)

    def validate_fill(
        self,
        taker: Order,
        maker: Order,
        market_pair: MarketPair,
        proposal: FillProposal,
    ) -> None:
        self.validate(
            taker,
            maker,
            market_pair,
            proposal.offered_base_amount,
            proposal.offered_quote_amount,
        )

    def validate_confirmation(
        self,
        taker: Order,
        maker: Order,
        market_pair: MarketPair,
        confirmation: SwapConfirmation,
    ) -> None:
        """Проверка подтверждения маркет-мейкера (суммы в терминах taker-ордера)."""
        self.resolver.pair_units(market_pair)
        proposal = FillProposal.from_confirmation(confirmation, taker, market_pair)
        self.validate_fill(taker, maker, market_pair, proposal)

    def check_order(self, order: Order, price_offered: FixedPrice, market_pair: MarketPair) -> None:
        """Dry run одного ордера против предложенной цены.

        Raises:
            OfferIsGreaterThan[MarketMaker]SwapUpperBound: покупатель, цена выше границы
            OfferIsLessThan[MarketMaker]SwapLowerBound: продавец, цена ниже границы
            SlippageError: ошибки расчёта границы
        """
        if order.token_to == market_pair.base_asset:
            # Покупатель не принимает цену выше верхней границы
            upper = self.bounds.upper_bound(order, market_pair)
            if price_offered > upper:
                if order.is_market_maker:
                    raise OfferIsGreaterThanMarketMakerSwapUpperBound(
                        order.order_id, price_offered, upper
                    )
                raise OfferIsGreaterThanSwapUpperBound(order.order_id, price_offered, upper)
            return

        # Продавец не принимает цену ниже нижней границы
        lower = self.bounds.lower_bound(order, market_pair)
        if price_offered < lower:
            if self.config.limit_orders_cross_lower_bound and order.is_limit():
                logger.debug(
                    "Limit order %s crosses its lower bound: offered=%s lower=%s",
                    order.order_id,
                    price_offered,
                    lower,
                )
                return
            if order.is_market_maker:
                raise OfferIsLessThanMarketMakerSwapLowerBound(order.order_id, price_offered, lower)
            raise OfferIsLessThanSwapLowerBound(order.order_id, price_offered, lower)

    def evaluate(
        self,
        taker: Order,
        maker: Order,
        market_pair: MarketPair,
        offered_base_amount: int,
        offered_quote_amount: int,
    ) -> SlippageCheckResult:
        """Проверка fill без исключений (для gate-style вызывающих).

        Returns:
            SlippageCheckResult с решением и причиной отказа
        """
        price_offered: Optional[FixedPrice] = None
        try:
            price_offered = self.price_offered(
                market_pair, offered_base_amount, offered_quote_amount
            )
            for order in _canonical_order(taker, maker, market_pair):
                self.check_order(order, price_offered, market_pair)
        except SlippageError as e:
            violating_order_id = e.order_id if isinstance(e, SlippageViolation) else None
            logger.debug(
                "Fill rejected: pair=%s reason=%s order=%s",
                market_pair,
                e.kind.value,
                violating_order_id,
            )
            return SlippageCheckResult(
                accepted=False,
                block_reason=e.kind.value,
                price_offered=price_offered,
                violating_order_id=violating_order_id,
                error=e,
                details=str(e),
            )

        return SlippageCheckResult(
            accepted=True,
            block_reason="",
            price_offered=price_offered,
            violating_order_id=None,
            error=None,
            details=f"PASS: pair={market_pair}, price_offered={price_offered}",
        )


def _canonical_order(taker: Order, maker: Order, market_pair: MarketPair) -> list[Order]:
    """Ордера в порядке проверки, не зависящем от порядка аргументов."""

    def key(order: Order) -> tuple[int, int, str, str]:
        is_buyer = 1 if order.token_to == market_pair.base_asset else 0
        not_market_maker = 0 if order.is_market_maker else 1
        return (is_buyer, not_market_maker, order.order_id, order.account_id)

    return sorted((taker, maker), key=key)
