"""
SlippageError — таксономия ошибок проверки цены исполнения

Все ошибки: ожидаемые, восстановимые исходы. Ядро только возвращает их
вызывающему (matching engine); логирование, ретраи и сообщения пользователю
строятся снаружи по полю `kind`.

Иерархия:

    SlippageError
    ├── UnknownAsset
    ├── UnknownAssetInMarketPair
    ├── SlippageOverflow
    ├── SlippageArithmeticError
    ├── BoundOrientationError
    │   ├── NoLowerBoundForBuyingPrice
    │   └── NoUpperBoundForSellingPrice
    └── SlippageViolation
        ├── OfferIsLessThanSwapLowerBound
        │   └── OfferIsLessThanMarketMakerSwapLowerBound
        └── OfferIsGreaterThanSwapUpperBound
            └── OfferIsGreaterThanMarketMakerSwapUpperBound
"""

from enum import Enum
from typing import Optional


class SlippageErrorKind(str, Enum):
    """Стабильный код ошибки (используется как block_reason)"""

    UNKNOWN_ASSET = "unknown_asset"
    UNKNOWN_ASSET_IN_MARKET_PAIR = "unknown_asset_in_market_pair"
    SLIPPAGE_OVERFLOW = "slippage_overflow"
    ARITHMETIC_ERROR = "arithmetic_error"
    OFFER_IS_LESS_THAN_SWAP_LOWER_BOUND = "offer_is_less_than_swap_lower_bound"
    OFFER_IS_GREATER_THAN_SWAP_UPPER_BOUND = "offer_is_greater_than_swap_upper_bound"
    OFFER_IS_LESS_THAN_MARKET_MAKER_SWAP_LOWER_BOUND = (
        "offer_is_less_than_market_maker_swap_lower_bound"
    )
    OFFER_IS_GREATER_THAN_MARKET_MAKER_SWAP_UPPER_BOUND = (
        "offer_is_greater_than_market_maker_swap_upper_bound"
    )
    NO_LOWER_BOUND_FOR_BUYING_PRICE = "no_lower_bound_for_buying_price"
    NO_UPPER_BOUND_FOR_SELLING_PRICE = "no_upper_bound_for_selling_price"


# =============================================================================
# BASE
# =============================================================================


class SlippageError(Exception):
    """Базовый класс всех ошибок проверки проскальзывания."""

    kind: SlippageErrorKind

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.kind.value)
        self.message = message or self.kind.value


# =============================================================================
# CATALOG / MARKET PAIR
# =============================================================================


class UnknownAsset(SlippageError):
    """Идентификатор актива отсутствует в каталоге."""

    kind = SlippageErrorKind.UNKNOWN_ASSET

    def __init__(self, currency: object, message: Optional[str] = None):
        super().__init__(message or f"Unknown asset: {currency}")
        self.currency = currency


class UnknownAssetInMarketPair(SlippageError):
    """Актив ордера не совпадает ни с одной ногой рыночной пары."""

    kind = SlippageErrorKind.UNKNOWN_ASSET_IN_MARKET_PAIR

    def __init__(self, currency: object, market_pair: object):
        super().__init__(f"Asset {currency} is not part of market pair {market_pair}")
        self.currency = currency
        self.market_pair = market_pair


# =============================================================================
# ARITHMETIC
# =============================================================================


class SlippageOverflow(SlippageError):
    """
    Цена не представима в FixedPrice.

    Возникает и при нулевом base amount (деление на ноль не выполняется).
    """

    kind = SlippageErrorKind.SLIPPAGE_OVERFLOW


class SlippageArithmeticError(SlippageError):
    """Промежуточный шаг масштабирования вышел за пределы Balance."""

    kind = SlippageErrorKind.ARITHMETIC_ERROR


# =============================================================================
# BOUND ORIENTATION (ошибка интеграции, не пользовательская ситуация)
# =============================================================================


class BoundOrientationError(SlippageError):
    """Граница запрошена для неверной стороны ордера."""


class NoLowerBoundForBuyingPrice(BoundOrientationError):
    """Нижняя граница определена только для продавца base актива."""

    kind = SlippageErrorKind.NO_LOWER_BOUND_FOR_BUYING_PRICE


class NoUpperBoundForSellingPrice(BoundOrientationError):
    """Верхняя граница определена только для покупателя base актива."""

    kind = SlippageErrorKind.NO_UPPER_BOUND_FOR_SELLING_PRICE


# =============================================================================
# VIOLATIONS
# =============================================================================


class SlippageViolation(SlippageError):
    """Предложенная цена вне допуска одной из сторон."""

    def __init__(
        self,
        order_id: str,
        price_offered: object,
        bound: object,
        message: Optional[str] = None,
    ):
        super().__init__(
            message
            or f"{self.kind.value}: order={order_id} offered={price_offered} bound={bound}"
        )
        self.order_id = order_id
        self.price_offered = price_offered
        self.bound = bound


class OfferIsLessThanSwapLowerBound(SlippageViolation):
    kind = SlippageErrorKind.OFFER_IS_LESS_THAN_SWAP_LOWER_BOUND


class OfferIsLessThanMarketMakerSwapLowerBound(OfferIsLessThanSwapLowerBound):
    kind = SlippageErrorKind.OFFER_IS_LESS_THAN_MARKET_MAKER_SWAP_LOWER_BOUND


class OfferIsGreaterThanSwapUpperBound(SlippageViolation):
    kind = SlippageErrorKind.OFFER_IS_GREATER_THAN_SWAP_UPPER_BOUND


class OfferIsGreaterThanMarketMakerSwapUpperBound(OfferIsGreaterThanSwapUpperBound):
    kind = SlippageErrorKind.OFFER_IS_GREATER_THAN_MARKET_MAKER_SWAP_UPPER_BOUND
