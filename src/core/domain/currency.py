"""
CurrencyId — идентификатор актива

Идентификатор: объединение двух вариантов:
- native             : нативный актив сети
- wrapped(asset_id)  : обёрнутый актив с числовым id (u32)

Порядок полный: native < wrapped(n) для любого n, wrapped упорядочены по id.
Текстовая форма: "native" / "wrapped:<id>".
"""

from enum import Enum
from functools import total_ordering
from typing import Any, Final, Optional

from pydantic import BaseModel, Field, model_validator

# Максимальный AssetId (u32)
ASSET_ID_MAX: Final[int] = (1 << 32) - 1


class CurrencyKind(str, Enum):
    """Вариант идентификатора"""

    NATIVE = "native"
    WRAPPED = "wrapped"


@total_ordering
class CurrencyId(BaseModel):
    """
    Идентификатор актива (native или wrapped).

    Immutable и hashable: используется как ключ каталога.
    """

    kind: CurrencyKind = Field(..., description="native или wrapped")
    asset_id: Optional[int] = Field(
        None, ge=0, le=ASSET_ID_MAX, description="Числовой id (только для wrapped)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def parse_text_form(cls, data: Any) -> Any:
        """Допускает текстовую форму "native" / "wrapped:<id>"."""
        if isinstance(data, str):
            return _parse(data)
        return data

    @model_validator(mode="after")
    def validate_asset_id(self) -> "CurrencyId":
        """asset_id обязателен для wrapped и запрещён для native"""
        if self.kind == CurrencyKind.WRAPPED and self.asset_id is None:
            raise ValueError("wrapped currency requires asset_id")
        if self.kind == CurrencyKind.NATIVE and self.asset_id is not None:
            raise ValueError("native currency cannot carry asset_id")
        return self

    @classmethod
    def native(cls) -> "CurrencyId":
        return cls(kind=CurrencyKind.NATIVE)

    @classmethod
    def wrapped(cls, asset_id: int) -> "CurrencyId":
        return cls(kind=CurrencyKind.WRAPPED, asset_id=asset_id)

    @classmethod
    def parse(cls, text: str) -> "CurrencyId":
        return cls.model_validate(text)

    @property
    def is_native(self) -> bool:
        return self.kind == CurrencyKind.NATIVE

    def sort_key(self) -> tuple[int, int]:
        if self.is_native:
            return (0, 0)
        return (1, self.asset_id)

    def __lt__(self, other: "CurrencyId") -> bool:
        if not isinstance(other, CurrencyId):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        if self.is_native:
            return "native"
        return f"wrapped:{self.asset_id}"


def _parse(text: str) -> dict[str, Any]:
    value = text.strip().lower()
    if value == "native":
        return {"kind": CurrencyKind.NATIVE}

    prefix, sep, raw_id = value.partition(":")
    if prefix != "wrapped" or not sep or not raw_id.isdigit():
        raise ValueError(f"invalid currency id: {text!r}")
    return {"kind": CurrencyKind.WRAPPED, "asset_id": int(raw_id)}
