"""
Тесты для Domain Models

Проверяет:
1. CurrencyId: текстовая форма, полный порядок, hashability
2. AssetInfo / AssetCatalog: валидация таблицы активов
3. MarketPair: классификация ордера (is_selling)
4. Order: инварианты модели
5. FillProposal: перевод подтверждения мейкера в base/quote
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    DEFAULT_ASSETS,
    Algo,
    AssetCatalog,
    AssetInfo,
    BoundOrientationError,
    CurrencyId,
    CurrencyKind,
    FillProposal,
    MarketPair,
    NoLowerBoundForBuyingPrice,
    NoUpperBoundForSellingPrice,
    OfferIsGreaterThanMarketMakerSwapUpperBound,
    OfferIsGreaterThanSwapUpperBound,
    OfferIsLessThanMarketMakerSwapLowerBound,
    OfferIsLessThanSwapLowerBound,
    Order,
    OrderStatus,
    OrderType,
    SlippageArithmeticError,
    SlippageError,
    SlippageErrorKind,
    SlippageOverflow,
    SwapConfirmation,
    UnknownAsset,
    UnknownAssetInMarketPair,
    default_catalog,
)
from src.core.math.numerical_safeguards import BALANCE_MAX
from src.core.math.per_thing import Permill

TDFY = CurrencyId.native()
BTC = CurrencyId.wrapped(2)
ETH = CurrencyId.wrapped(3)
USDC = CurrencyId.wrapped(5)


def make_order(**overrides) -> Order:
    data = {
        "order_id": "req-1",
        "account_id": "alice",
        "token_from": BTC,
        "amount_from": 100_000_000,
        "token_to": USDC,
        "amount_to": 30_000_000_000,
        "order_type": OrderType.MARKET,
        "slippage": Permill.from_percent(1),
    }
    data.update(overrides)
    return Order(**data)


# =============================================================================
# CURRENCY ID
# =============================================================================


class TestCurrencyId:
    """Тесты CurrencyId."""

    def test_parse(self):
        assert CurrencyId.parse("native") == TDFY
        assert CurrencyId.parse("wrapped:2") == BTC
        assert CurrencyId.parse(" Wrapped:3 ") == ETH

    @pytest.mark.parametrize("text", ["", "btc", "wrapped", "wrapped:", "wrapped:x", "native:1"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValidationError):
            CurrencyId.parse(text)

    def test_str_roundtrip(self):
        assert str(TDFY) == "native"
        assert str(BTC) == "wrapped:2"
        assert CurrencyId.parse(str(BTC)) == BTC

    def test_wrapped_requires_asset_id(self):
        with pytest.raises(ValidationError):
            CurrencyId(kind=CurrencyKind.WRAPPED)

    def test_native_forbids_asset_id(self):
        with pytest.raises(ValidationError):
            CurrencyId(kind=CurrencyKind.NATIVE, asset_id=1)

    def test_asset_id_is_u32(self):
        with pytest.raises(ValidationError):
            CurrencyId.wrapped(2**32)

    def test_ordering(self):
        """native меньше любого wrapped, wrapped упорядочены по id."""
        assert TDFY < CurrencyId.wrapped(0)
        assert CurrencyId.wrapped(0) < BTC < ETH
        assert sorted([USDC, TDFY, ETH, BTC]) == [TDFY, BTC, ETH, USDC]

    def test_hashable(self):
        assert len({BTC, CurrencyId.wrapped(2), TDFY}) == 2

    def test_frozen(self):
        with pytest.raises(ValidationError):
            BTC.asset_id = 3


# =============================================================================
# ASSET CATALOG
# =============================================================================


class TestAssetInfo:
    """Тесты AssetInfo."""

    def test_currency_id(self):
        catalog = default_catalog()
        assert catalog.by_symbol("TDFY").currency_id == TDFY
        assert catalog.by_symbol("BTC").currency_id == BTC

    def test_saturating_mul(self):
        catalog = default_catalog()
        assert catalog.by_symbol("BTC").saturating_mul(10) == 1_000_000_000
        assert catalog.by_symbol("TDFY").saturating_mul(912) == 912_000_000_000_000
        assert catalog.by_symbol("USDC").saturating_mul(838_912_012) == 838_912_012_000_000
        assert catalog.by_symbol("ETH").saturating_mul(BALANCE_MAX) == BALANCE_MAX

    def test_exponent_range(self):
        with pytest.raises(ValidationError):
            AssetInfo(asset_id=9, symbol="X", name="X", exponent=256, algo=Algo.WEB3)

    def test_stake_range(self):
        with pytest.raises(ValidationError):
            AssetInfo(
                asset_id=9,
                symbol="X",
                name="X",
                exponent=6,
                algo=Algo.WEB3,
                min_stake=10,
                max_stake=1,
            )


class TestAssetCatalog:
    """Тесты AssetCatalog."""

    def test_default_catalog(self):
        catalog = default_catalog()
        assert len(catalog) == len(DEFAULT_ASSETS) == 5
        assert [a.symbol for a in catalog] == ["TDFY", "BTC", "ETH", "USDT", "USDC"]

    @pytest.mark.parametrize(
        "symbol,exponent",
        [("TDFY", 12), ("BTC", 8), ("ETH", 18), ("USDT", 6), ("USDC", 6)],
    )
    def test_default_exponents(self, symbol, exponent):
        catalog = default_catalog()
        asset = catalog.by_symbol(symbol)
        assert catalog.exponent(asset.currency_id) == exponent
        assert catalog.one_unit(asset.currency_id) == 10**exponent

    def test_get_unknown(self):
        with pytest.raises(UnknownAsset) as exc_info:
            default_catalog().get(CurrencyId.wrapped(99))
        assert exc_info.value.currency == CurrencyId.wrapped(99)

    def test_by_symbol_unknown(self):
        with pytest.raises(UnknownAsset):
            default_catalog().by_symbol("DOGE")

    def test_contains(self):
        catalog = default_catalog()
        assert BTC in catalog
        assert CurrencyId.wrapped(99) not in catalog

    def test_currencies_sorted(self):
        assert default_catalog().currencies() == [
            TDFY,
            BTC,
            ETH,
            CurrencyId.wrapped(4),
            USDC,
        ]

    def test_duplicate_id(self):
        btc = default_catalog().by_symbol("BTC")
        clone = btc.model_copy(update={"symbol": "WBTC"})
        with pytest.raises(ValueError, match="Duplicate asset id"):
            AssetCatalog([btc, clone])

    def test_duplicate_symbol(self):
        btc = default_catalog().by_symbol("BTC")
        clone = btc.model_copy(update={"asset_id": 42})
        with pytest.raises(ValueError, match="Duplicate asset symbol"):
            AssetCatalog([btc, clone])

    def test_single_native(self):
        tdfy = default_catalog().by_symbol("TDFY")
        other = tdfy.model_copy(update={"asset_id": 7, "symbol": "DOT"})
        with pytest.raises(ValueError):
            AssetCatalog([tdfy, other])

    def test_base_chain_must_exist(self):
        usdc = default_catalog().by_symbol("USDC")
        with pytest.raises(ValueError, match="base_chain"):
            AssetCatalog([usdc])

    def test_repr(self):
        assert repr(default_catalog()) == "AssetCatalog([TDFY, BTC, ETH, USDT, USDC])"


# =============================================================================
# MARKET PAIR
# =============================================================================


class TestMarketPair:
    """Тесты MarketPair."""

    def test_distinct_legs(self):
        with pytest.raises(ValidationError):
            MarketPair(base_asset=BTC, quote_asset=BTC)

    def test_accepts_text_form(self):
        pair = MarketPair(base_asset="wrapped:2", quote_asset="wrapped:5")
        assert pair.base_asset == BTC
        assert pair.quote_asset == USDC

    def test_is_selling(self):
        pair = MarketPair(base_asset=BTC, quote_asset=USDC)
        seller = make_order()
        buyer = make_order(
            token_from=USDC,
            amount_from=30_000_000_000,
            token_to=BTC,
            amount_to=100_000_000,
        )
        assert pair.is_selling(seller) is True
        assert pair.is_selling(buyer) is False

    def test_is_selling_foreign_asset(self):
        pair = MarketPair(base_asset=BTC, quote_asset=USDC)
        order = make_order(token_from=ETH)
        with pytest.raises(UnknownAssetInMarketPair) as exc_info:
            pair.is_selling(order)
        assert exc_info.value.currency == ETH

    def test_contains(self):
        pair = MarketPair(base_asset=TDFY, quote_asset=BTC)
        assert pair.contains(TDFY)
        assert pair.contains(BTC)
        assert not pair.contains(ETH)

    def test_symbol(self):
        pair = MarketPair(base_asset=BTC, quote_asset=USDC)
        assert pair.symbol(default_catalog()) == "BTC/USDC"
        assert str(pair) == "wrapped:2/wrapped:5"


# =============================================================================
# ORDER
# =============================================================================


class TestOrder:
    """Тесты Order."""

    def test_defaults(self):
        order = make_order()
        assert order.status == OrderStatus.PENDING
        assert order.is_market_maker is False
        assert order.amount_from_filled == 0
        assert order.is_open()
        assert not order.is_limit()

    def test_slippage_from_int(self):
        """Целое slippage трактуется как части на миллион."""
        assert make_order(slippage=10_000).slippage == Permill.from_percent(1)

    def test_slippage_out_of_range(self):
        with pytest.raises(ValidationError):
            make_order(slippage=1_000_001)

    def test_same_tokens(self):
        with pytest.raises(ValidationError):
            make_order(token_to=BTC)

    def test_filled_exceeds_requested(self):
        with pytest.raises(ValidationError):
            make_order(amount_from_filled=100_000_001)
        with pytest.raises(ValidationError):
            make_order(amount_to_filled=30_000_000_001)

    def test_amount_bounds(self):
        with pytest.raises(ValidationError):
            make_order(amount_from=-1)
        with pytest.raises(ValidationError):
            make_order(amount_to=BALANCE_MAX + 1)

    def test_remaining_amounts(self):
        order = make_order(
            amount_from_filled=40_000_000,
            amount_to_filled=12_000_000_000,
            status=OrderStatus.PARTIALLY_FILLED,
        )
        assert order.remaining_amount_from() == 60_000_000
        assert order.remaining_amount_to() == 18_000_000_000
        assert order.is_open()

    @pytest.mark.parametrize(
        "status,is_open",
        [
            (OrderStatus.PENDING, True),
            (OrderStatus.PARTIALLY_FILLED, True),
            (OrderStatus.COMPLETED, False),
            (OrderStatus.CANCELLED, False),
            (OrderStatus.REJECTED, False),
        ],
    )
    def test_is_open(self, status, is_open):
        assert make_order(status=status).is_open() is is_open

    def test_frozen(self):
        order = make_order()
        with pytest.raises(ValidationError):
            order.amount_to = 1


# =============================================================================
# ERRORS
# =============================================================================


class TestSlippageErrors:
    """Таксономия ошибок."""

    def test_kinds_are_unique(self):
        kinds = [
            UnknownAsset(BTC).kind,
            UnknownAssetInMarketPair(BTC, "pair").kind,
            SlippageOverflow().kind,
            SlippageArithmeticError().kind,
            NoLowerBoundForBuyingPrice().kind,
            NoUpperBoundForSellingPrice().kind,
            OfferIsLessThanSwapLowerBound("o", 1, 2).kind,
            OfferIsLessThanMarketMakerSwapLowerBound("o", 1, 2).kind,
            OfferIsGreaterThanSwapUpperBound("o", 2, 1).kind,
            OfferIsGreaterThanMarketMakerSwapUpperBound("o", 2, 1).kind,
        ]
        assert len(set(kinds)) == len(SlippageErrorKind)

    def test_market_maker_variants_subclass_plain(self):
        assert issubclass(OfferIsLessThanMarketMakerSwapLowerBound, OfferIsLessThanSwapLowerBound)
        assert issubclass(
            OfferIsGreaterThanMarketMakerSwapUpperBound, OfferIsGreaterThanSwapUpperBound
        )

    def test_default_message_is_kind(self):
        error = SlippageOverflow()
        assert str(error) == "slippage_overflow"
        assert error.message == "slippage_overflow"

    def test_violation_message(self):
        error = OfferIsLessThanSwapLowerBound("req-7", "98", "99")
        assert error.order_id == "req-7"
        assert str(error) == "offer_is_less_than_swap_lower_bound: order=req-7 offered=98 bound=99"

    def test_all_are_slippage_errors(self):
        assert isinstance(NoLowerBoundForBuyingPrice(), BoundOrientationError)
        assert isinstance(UnknownAsset(BTC), SlippageError)


# =============================================================================
# FILL PROPOSAL
# =============================================================================


class TestFillProposal:
    """Тесты FillProposal.from_confirmation."""

    def test_taker_sells_base(self):
        pair = MarketPair(base_asset=BTC, quote_asset=USDC)
        taker = make_order()
        confirmation = SwapConfirmation(
            request_id="mm-1",
            amount_to_receive=100_000_000,
            amount_to_send=29_700_000_000,
        )
        proposal = FillProposal.from_confirmation(confirmation, taker, pair)
        assert proposal.offered_base_amount == 100_000_000
        assert proposal.offered_quote_amount == 29_700_000_000

    def test_taker_buys_base(self):
        pair = MarketPair(base_asset=BTC, quote_asset=USDC)
        taker = make_order(
            token_from=USDC,
            amount_from=30_000_000_000,
            token_to=BTC,
            amount_to=100_000_000,
        )
        confirmation = SwapConfirmation(
            request_id="mm-1",
            amount_to_receive=30_300_000_000,
            amount_to_send=100_000_000,
        )
        proposal = FillProposal.from_confirmation(confirmation, taker, pair)
        assert proposal.offered_base_amount == 100_000_000
        assert proposal.offered_quote_amount == 30_300_000_000

    def test_taker_outside_pair(self):
        pair = MarketPair(base_asset=TDFY, quote_asset=ETH)
        confirmation = SwapConfirmation(request_id="mm-1", amount_to_receive=1, amount_to_send=1)
        with pytest.raises(UnknownAssetInMarketPair):
            FillProposal.from_confirmation(confirmation, make_order(), pair)

    def test_negative_amount(self):
        with pytest.raises(ValidationError):
            FillProposal(offered_base_amount=-1, offered_quote_amount=1)
