"""
Contract Validation Module

Модуль для валидации JSON контрактов: каталог активов, ордер, fill proposal.
"""

from .validators import (
    AssetCatalogValidator,
    ContractValidator,
    FillProposalValidator,
    OrderValidator,
    SchemaLoader,
    validate_asset_catalog,
    validate_fill_proposal,
    validate_order,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AssetCatalogValidator",
    "OrderValidator",
    "FillProposalValidator",
    # Functions
    "validate_asset_catalog",
    "validate_order",
    "validate_fill_proposal",
]
