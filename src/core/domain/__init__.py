"""
Domain models and value objects.

Contains the asset catalog, currency ids, market pairs, orders, fill
proposals and the slippage error taxonomy.
"""

from src.core.domain.asset import (
    DEFAULT_ASSETS,
    EXPONENT_MAX,
    Algo,
    AssetCatalog,
    AssetInfo,
    default_catalog,
)
from src.core.domain.currency import ASSET_ID_MAX, CurrencyId, CurrencyKind
from src.core.domain.errors import (
    BoundOrientationError,
    NoLowerBoundForBuyingPrice,
    NoUpperBoundForSellingPrice,
    OfferIsGreaterThanMarketMakerSwapUpperBound,
    OfferIsGreaterThanSwapUpperBound,
    OfferIsLessThanMarketMakerSwapLowerBound,
    OfferIsLessThanSwapLowerBound,
    SlippageArithmeticError,
    SlippageError,
    SlippageErrorKind,
    SlippageOverflow,
    SlippageViolation,
    UnknownAsset,
    UnknownAssetInMarketPair,
)
from src.core.domain.fill import FillProposal, SwapConfirmation
from src.core.domain.market_pair import MarketPair
from src.core.domain.order import Order, OrderStatus, OrderType

__all__ = [
    # Currency
    "ASSET_ID_MAX",
    "CurrencyId",
    "CurrencyKind",
    # Asset catalog
    "DEFAULT_ASSETS",
    "EXPONENT_MAX",
    "Algo",
    "AssetCatalog",
    "AssetInfo",
    "default_catalog",
    # Market pair / orders
    "MarketPair",
    "Order",
    "OrderStatus",
    "OrderType",
    # Fill
    "FillProposal",
    "SwapConfirmation",
    # Errors
    "BoundOrientationError",
    "NoLowerBoundForBuyingPrice",
    "NoUpperBoundForSellingPrice",
    "OfferIsGreaterThanMarketMakerSwapUpperBound",
    "OfferIsGreaterThanSwapUpperBound",
    "OfferIsLessThanMarketMakerSwapLowerBound",
    "OfferIsLessThanSwapLowerBound",
    "SlippageArithmeticError",
    "SlippageError",
    "SlippageErrorKind",
    "SlippageOverflow",
    "SlippageViolation",
    "UnknownAsset",
    "UnknownAssetInMarketPair",
]
