"""
Fill proposal — предложение исполнения от matching engine

Эфемерная пара сумм (base, quote), которую движок предлагает перевести в
рамках одного fill. Не сохраняется, живёт только на время одной проверки.

SwapConfirmation: форма, в которой маркет-мейкер подтверждает fill:
суммы выражены относительно taker-ордера, а не рыночной пары.
"""

from typing import Any

from pydantic import BaseModel, Field

from src.core.domain.market_pair import MarketPair
from src.core.domain.order import Order
from src.core.math.numerical_safeguards import BALANCE_MAX


class SwapConfirmation(BaseModel):
    """
    Подтверждение маркет-мейкера.

    amount_to_receive — в активе token_from taker-ордера (получает мейкер).
    amount_to_send    — в активе token_to taker-ордера (отправляет мейкер);
                        может дать частичное или полное исполнение.
    """

    request_id: str = Field(..., min_length=1, description="Id запроса маркет-мейкера")
    amount_to_receive: int = Field(..., ge=0, le=BALANCE_MAX)
    amount_to_send: int = Field(..., ge=0, le=BALANCE_MAX)

    model_config = {"frozen": True}


class FillProposal(BaseModel):
    """Предложенные суммы fill в терминах рыночной пары."""

    offered_base_amount: int = Field(..., ge=0, le=BALANCE_MAX, description="Base (raw)")
    offered_quote_amount: int = Field(..., ge=0, le=BALANCE_MAX, description="Quote (raw)")

    model_config = {"frozen": True}

    @classmethod
    def from_confirmation(
        cls,
        confirmation: SwapConfirmation,
        taker: Order,
        market_pair: MarketPair,
    ) -> "FillProposal":
        """
        Перевод подтверждения мейкера в base/quote суммы.

        Raises:
            UnknownAssetInMarketPair: Если taker не торгует данной парой
        """
        if market_pair.is_selling(taker):
            # taker отдаёт base, мейкер отправляет quote
            return cls(
                offered_base_amount=confirmation.amount_to_receive,
                offered_quote_amount=confirmation.amount_to_send,
            )
        return cls(
            offered_base_amount=confirmation.amount_to_send,
            offered_quote_amount=confirmation.amount_to_receive,
        )

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> tuple[MarketPair, "FillProposal"]:
        """
        Пара и предложение из payload контракта fill_proposal.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
            pydantic.ValidationError: Если base_asset == quote_asset
        """
        from src.core.contracts import validate_fill_proposal

        validate_fill_proposal(data)
        market_pair = MarketPair(base_asset=data["base_asset"], quote_asset=data["quote_asset"])
        proposal = cls(
            offered_base_amount=data["offered_base_amount"],
            offered_quote_amount=data["offered_quote_amount"],
        )
        return market_pair, proposal
