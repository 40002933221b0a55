"""
Order — Модель swap-ордера

Immutable Pydantic модель ордера, созданного внешним order intake.
Ядро только читает ордера: учёт исполнения (filled amounts, status) ведёт
matching engine.

Ордер продаёт `amount_from` актива `token_from` и хочет получить
`amount_to` актива `token_to`. Толерантность `slippage` применяется
мультипликативно к quote-стороне при расчёте границ цены.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.currency import CurrencyId
from src.core.math.numerical_safeguards import BALANCE_MAX
from src.core.math.per_thing import Permill


# =============================================================================
# ENUMS
# =============================================================================


class OrderType(str, Enum):
    """Тип ордера"""

    MARKET = "market"  # Исполняется сразу, удаляется после любого fill
    LIMIT = "limit"  # Остаётся в книге до полного исполнения


class OrderStatus(str, Enum):
    """Статус ордера"""

    PENDING = "pending"
    CANCELLED = "cancelled"
    PARTIALLY_FILLED = "partially_filled"
    COMPLETED = "completed"
    REJECTED = "rejected"


# =============================================================================
# ORDER MODEL
# =============================================================================


class Order(BaseModel):
    """
    Swap-ордер (maker или taker).

    Immutable модель (frozen=True).
    """

    # Идентификация
    order_id: str = Field(..., min_length=1, description="Идентификатор запроса")
    account_id: str = Field(..., min_length=1, description="Аккаунт владельца")
    is_market_maker: bool = Field(False, description="Создан официальным маркет-мейкером")

    # Продаваемая сторона
    token_from: CurrencyId = Field(..., description="Продаваемый актив")
    amount_from: int = Field(..., ge=0, le=BALANCE_MAX, description="Продаваемое количество (raw)")
    amount_from_filled: int = Field(0, ge=0, le=BALANCE_MAX, description="Уже исполнено (raw)")

    # Покупаемая сторона
    token_to: CurrencyId = Field(..., description="Покупаемый актив")
    amount_to: int = Field(..., ge=0, le=BALANCE_MAX, description="Запрошенное количество (raw)")
    amount_to_filled: int = Field(0, ge=0, le=BALANCE_MAX, description="Уже получено (raw)")

    # Параметры
    status: OrderStatus = Field(OrderStatus.PENDING, description="Статус ордера")
    order_type: OrderType = Field(..., description="market / limit")
    block_number: int = Field(0, ge=0, description="Блок создания ордера")
    slippage: Permill = Field(..., description="Толерантность проскальзывания")

    model_config = {"frozen": True}

    @field_validator("slippage", mode="before")
    @classmethod
    def coerce_slippage(cls, v: Any) -> Any:
        """Целое число трактуется как части на миллион"""
        if isinstance(v, int) and not isinstance(v, bool):
            return Permill(parts=v)
        return v

    @model_validator(mode="after")
    def validate_order(self) -> "Order":
        if self.token_from == self.token_to:
            raise ValueError(f"token_from and token_to must differ, got {self.token_from}")
        if self.amount_from_filled > self.amount_from:
            raise ValueError(
                f"amount_from_filled {self.amount_from_filled} exceeds amount_from {self.amount_from}"
            )
        if self.amount_to_filled > self.amount_to:
            raise ValueError(
                f"amount_to_filled {self.amount_to_filled} exceeds amount_to {self.amount_to}"
            )
        return self

    def remaining_amount_from(self) -> int:
        return self.amount_from - self.amount_from_filled

    def remaining_amount_to(self) -> int:
        return self.amount_to - self.amount_to_filled

    def is_open(self) -> bool:
        """Ордер ещё может исполняться (pending или partially filled)"""
        return self.status in (OrderStatus.PENDING, OrderStatus.PARTIALLY_FILLED)

    def is_limit(self) -> bool:
        return self.order_type == OrderType.LIMIT

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "Order":
        """
        Ордер из payload контракта order.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
            pydantic.ValidationError: Если нарушены инварианты модели
        """
        from src.core.contracts import validate_order

        validate_order(data)
        return cls.model_validate(data)
