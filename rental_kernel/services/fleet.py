"""
Fleet -- owner of every Asset instance.

Responsibility:
    Stores assets by id in insertion order and routes reserve/return
    requests to the right asset.

Architecture position:
    Kernel > Services. Borrowed by ``ReservationService``; nothing else
    holds references to the Asset objects it owns.

Failure modes:
    - DuplicateAssetIdError on ``add`` with an existing id.
    - UnknownAssetError on ``reserve`` / ``return_asset`` for a missing id.
    - Asset-level failures (not available / not reserved) propagate as-is.
"""

from __future__ import annotations

from rental_kernel.domain.asset import Asset, AssetView, validate_asset_id
from rental_kernel.domain.category import AssetCategory
from rental_kernel.domain.pricing import PricingRegistry
from rental_kernel.domain.values import Money
from rental_kernel.exceptions import DuplicateAssetIdError, UnknownAssetError
from rental_kernel.logging_config import get_logger

logger = get_logger("services.fleet")


class Fleet:
    """In-memory collection of assets keyed by id."""

    def __init__(self, pricing_registry: PricingRegistry | None = None):
        if pricing_registry is None:
            pricing_registry = PricingRegistry.default()
        self._pricing = pricing_registry
        # dict preserves insertion order, which list_all relies on
        self._assets: dict[int, Asset] = {}

    def add(self, asset_id: int, category: AssetCategory | str) -> Asset:
        """
        Create and store a new asset.

        Raises:
            InvalidAssetIdError: id is not a positive integer.
            DuplicateAssetIdError: id already present.
            InvalidCategoryError: category unknown.
        """
        validate_asset_id(asset_id)
        if asset_id in self._assets:
            raise DuplicateAssetIdError(asset_id)
        asset = Asset.create(asset_id, category, self._pricing)
        self._assets[asset_id] = asset
        logger.info("asset_added", extra={
            "asset_id": asset_id,
            "category": asset.category.value,
            "pricing_model": asset.pricing.model.value,
        })
        return asset

    def find(self, asset_id: int) -> Asset | None:
        return self._assets.get(asset_id)

    def list_all(self) -> list[AssetView]:
        return [asset.display() for asset in self._assets.values()]

    def reserve(self, asset_id: int) -> Asset:
        asset = self._require(asset_id)
        asset.reserve()
        return asset

    def return_asset(self, asset_id: int, usage: int) -> Money:
        return self._require(asset_id).return_asset(usage)

    def _require(self, asset_id: int) -> Asset:
        asset = self._assets.get(asset_id)
        if asset is None:
            raise UnknownAssetError(asset_id)
        return asset

    def __len__(self) -> int:
        return len(self._assets)

    def __contains__(self, asset_id: object) -> bool:
        return asset_id in self._assets
