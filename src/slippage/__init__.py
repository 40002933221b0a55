"""Slippage — проверка цены исполнения swap-ордеров.

Компоненты (от листа к корню):
- AssetUnitResolver: масштаб одной единицы актива
- price: цена quote за единицу base с фиксированной точкой
- BoundDeriver: нижняя/верхняя граница цены ордера
- SlippageValidator: проверка fill для taker и maker
"""

from .bounds import BoundDeriver, PriceBand
from .pricing import price
from .units import AssetUnitResolver, one_unit
from .validator import SlippageCheckResult, SlippageConfig, SlippageValidator

__all__ = [
    "AssetUnitResolver",
    "one_unit",
    "price",
    "BoundDeriver",
    "PriceBand",
    "SlippageValidator",
    "SlippageConfig",
    "SlippageCheckResult",
]
