"""
Asset catalog — статическая таблица активов

Каталог: неизменяемое значение, которое собирается один раз при старте
процесса и передаётся в валидатор явно (никакого глобального состояния).
При сборке проверяется полнота и согласованность таблицы:
- не более одного native актива
- уникальные asset_id и symbol
- base_chain ссылается на актив из того же каталога
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Final, Iterable, Iterator, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.domain.currency import ASSET_ID_MAX, CurrencyId
from src.core.domain.errors import UnknownAsset
from src.core.logging import get_logger
from src.core.math.numerical_safeguards import BALANCE_MAX, saturating_mul, saturating_pow

logger = get_logger(__name__)

# Максимальный десятичный порядок актива (u8)
EXPONENT_MAX: Final[int] = 255


# =============================================================================
# ENUMS
# =============================================================================


class Algo(str, Enum):
    """Алгоритм подписи сети актива"""

    SR25519 = "SR25519"
    SECP256K1 = "SECP256K1"
    WEB3 = "WEB3"


# =============================================================================
# ASSET INFO
# =============================================================================


class AssetInfo(BaseModel):
    """
    Метаданные одного актива каталога.

    Immutable модель (frozen=True). exponent задаёт число дробных знаков
    raw amount и не меняется за время жизни процесса.
    """

    asset_id: int = Field(..., ge=0, le=ASSET_ID_MAX, description="Числовой id актива")
    symbol: str = Field(..., min_length=1, description="Тикер (например, 'BTC')")
    name: str = Field(..., min_length=1, description="Человекочитаемое имя")
    exponent: int = Field(..., ge=0, le=EXPONENT_MAX, description="Число десятичных знаков")
    algo: Algo = Field(..., description="Алгоритм подписи")
    unit_name: Optional[str] = Field(None, description="Имя минимальной единицы ('satoshi')")
    prefix: Optional[str] = Field(None, description="Префикс для отображения")
    base_chain: Optional[str] = Field(None, description="Symbol актива базовой сети")
    min_stake: int = Field(0, ge=0, le=BALANCE_MAX, description="Минимальный стейк (raw)")
    max_stake: int = Field(BALANCE_MAX, ge=0, le=BALANCE_MAX, description="Максимальный стейк (raw)")
    pot: bool = Field(False, description="Депозит требует второго pot-адреса")
    is_native: bool = Field(False, description="Нативный актив сети")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_stake_range(self) -> "AssetInfo":
        if self.min_stake > self.max_stake:
            raise ValueError(
                f"{self.symbol}: min_stake {self.min_stake} > max_stake {self.max_stake}"
            )
        return self

    @property
    def currency_id(self) -> CurrencyId:
        if self.is_native:
            return CurrencyId.native()
        return CurrencyId.wrapped(self.asset_id)

    def one_unit(self) -> int:
        """
        Raw amount одной целой единицы актива: 10**exponent.

        Насыщается на BALANCE_MAX, никогда не бросает исключение.
        """
        return saturating_pow(10, self.exponent)

    def saturating_mul(self, amount: int) -> int:
        """
        Raw amount для amount целых единиц.

        Например, BTC.saturating_mul(10) == 1_000_000_000.
        """
        return saturating_mul(amount, self.one_unit())


# =============================================================================
# CATALOG
# =============================================================================


class AssetCatalog:
    """
    Неизменяемый каталог активов с доступом по CurrencyId и по symbol.
    """

    def __init__(self, assets: Iterable[AssetInfo]):
        self._by_currency: dict[CurrencyId, AssetInfo] = {}
        self._by_symbol: dict[str, AssetInfo] = {}

        native_count = 0
        for asset in assets:
            if asset.currency_id in self._by_currency:
                raise ValueError(f"Duplicate asset id in catalog: {asset.currency_id}")
            if asset.symbol in self._by_symbol:
                raise ValueError(f"Duplicate asset symbol in catalog: {asset.symbol}")
            if asset.is_native:
                native_count += 1

            self._by_currency[asset.currency_id] = asset
            self._by_symbol[asset.symbol] = asset

        if native_count > 1:
            raise ValueError(f"Catalog must define at most one native asset, got {native_count}")

        for asset in self._by_currency.values():
            if asset.base_chain is not None and asset.base_chain not in self._by_symbol:
                raise ValueError(
                    f"{asset.symbol}: base_chain {asset.base_chain!r} is not in the catalog"
                )

    # -------------------------------------------------------------------------
    # Загрузка
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "AssetCatalog":
        """
        Каталог из payload контракта asset_catalog.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
            pydantic.ValidationError: Если метаданные актива некорректны
        """
        from src.core.contracts import validate_asset_catalog

        validate_asset_catalog(payload)
        catalog = cls(AssetInfo.model_validate(item) for item in payload["assets"])
        logger.info("Loaded asset catalog with %d assets", len(catalog))
        return catalog

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "AssetCatalog":
        """Каталог из JSON файла."""
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        logger.debug("Read asset catalog from %s", path)
        return cls.from_dict(payload)

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def get(self, currency: CurrencyId) -> AssetInfo:
        """
        Raises:
            UnknownAsset: Если актива нет в каталоге
        """
        try:
            return self._by_currency[currency]
        except KeyError:
            raise UnknownAsset(currency) from None

    def by_symbol(self, symbol: str) -> AssetInfo:
        try:
            return self._by_symbol[symbol]
        except KeyError:
            raise UnknownAsset(symbol) from None

    def exponent(self, currency: CurrencyId) -> int:
        return self.get(currency).exponent

    def one_unit(self, currency: CurrencyId) -> int:
        return self.get(currency).one_unit()

    def currencies(self) -> list[CurrencyId]:
        return sorted(self._by_currency)

    def __contains__(self, currency: object) -> bool:
        return currency in self._by_currency

    def __iter__(self) -> Iterator[AssetInfo]:
        return iter(self._by_currency[c] for c in self.currencies())

    def __len__(self) -> int:
        return len(self._by_currency)

    def __repr__(self) -> str:
        symbols = ", ".join(asset.symbol for asset in self)
        return f"AssetCatalog([{symbols}])"


# =============================================================================
# DEFAULT CATALOG
# =============================================================================

DEFAULT_ASSETS: Final[tuple[AssetInfo, ...]] = (
    AssetInfo(
        asset_id=1,
        symbol="TDFY",
        name="Tidefi Token",
        exponent=12,
        algo=Algo.SR25519,
        min_stake=10_000_000_000_000,
        max_stake=500_000_000_000_000_000,
        is_native=True,
    ),
    AssetInfo(
        asset_id=2,
        symbol="BTC",
        name="Bitcoin",
        exponent=8,
        algo=Algo.SECP256K1,
        unit_name="satoshi",
        prefix="₿",
        pot=True,
        min_stake=100,
        max_stake=500_000_000,
    ),
    AssetInfo(
        asset_id=3,
        symbol="ETH",
        name="Ethereum",
        exponent=18,
        algo=Algo.WEB3,
        unit_name="wei",
        prefix="Ξ",
        min_stake=100_000,
        max_stake=20_000_000_000_000_000_000,
    ),
    AssetInfo(
        asset_id=4,
        symbol="USDT",
        name="Tether",
        exponent=6,
        algo=Algo.WEB3,
        base_chain="ETH",
        min_stake=1_000_000,
        max_stake=100_000_000_000,
    ),
    AssetInfo(
        asset_id=5,
        symbol="USDC",
        name="USD Coin",
        exponent=6,
        algo=Algo.WEB3,
        base_chain="ETH",
        min_stake=1_000_000,
        max_stake=100_000_000_000,
    ),
)


def default_catalog() -> AssetCatalog:
    """Встроенный каталог (TDFY, BTC, ETH, USDT, USDC)."""
    return AssetCatalog(DEFAULT_ASSETS)
