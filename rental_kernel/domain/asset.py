"""
Rentable asset and its availability state machine.

    Available --reserve()--> Reserved --return_asset(usage)--> Available

There is no terminal state; an asset may cycle indefinitely. ``available``
has no public setter, so the two transitions above are the only way to
change it.
"""

from __future__ import annotations

from dataclasses import dataclass

from rental_kernel.domain.category import AssetCategory
from rental_kernel.domain.pricing import PricingRegistry, PricingStrategy
from rental_kernel.domain.values import Money
from rental_kernel.exceptions import (
    AssetNotAvailableError,
    AssetNotReservedError,
    InvalidAssetIdError,
)
from rental_kernel.logging_config import get_logger

logger = get_logger("domain.asset")


def validate_asset_id(asset_id: object) -> int:
    """Return ``asset_id`` if it is a positive int, else raise InvalidAssetIdError."""
    if isinstance(asset_id, bool) or not isinstance(asset_id, int) or asset_id <= 0:
        raise InvalidAssetIdError(asset_id)
    return asset_id


@dataclass(frozen=True)
class AssetView:
    """Read-only projection of an asset for listing."""

    asset_id: int
    category: AssetCategory
    available: bool

    def describe(self) -> str:
        return (
            f"Vehicle ID: {self.asset_id}, Type: {self.category.label}, "
            f"Available: {'Yes' if self.available else 'No'}"
        )


class Asset:
    """A rentable unit. Construct through ``Asset.create``."""

    def __init__(self, asset_id: int, category: AssetCategory, pricing: PricingStrategy):
        self._asset_id = validate_asset_id(asset_id)
        self._category = category
        self._pricing = pricing
        self._available = True

    @classmethod
    def create(
        cls,
        asset_id: int,
        category: AssetCategory | str,
        pricing_registry: PricingRegistry,
    ) -> Asset:
        """
        Build an available asset with its category's pricing bound.

        Raises:
            InvalidCategoryError: unknown category.
            InvalidAssetIdError: id is not a positive integer.
        """
        resolved = AssetCategory.parse(category)
        return cls(asset_id, resolved, pricing_registry.get(resolved))

    @property
    def asset_id(self) -> int:
        return self._asset_id

    @property
    def category(self) -> AssetCategory:
        return self._category

    @property
    def pricing(self) -> PricingStrategy:
        return self._pricing

    @property
    def available(self) -> bool:
        return self._available

    def reserve(self) -> None:
        """Available -> Reserved."""
        if not self._available:
            raise AssetNotAvailableError(self._asset_id)
        self._available = False
        logger.debug("asset_state_changed", extra={
            "asset_id": self._asset_id,
            "from_state": "available",
            "to_state": "reserved",
        })

    def return_asset(self, usage: int) -> Money:
        """Reserved -> Available. Returns the charge for ``usage``."""
        if self._available:
            raise AssetNotReservedError(self._asset_id)
        charge = self._pricing.calculate(usage)
        self._available = True
        logger.debug("asset_state_changed", extra={
            "asset_id": self._asset_id,
            "from_state": "reserved",
            "to_state": "available",
        })
        return charge

    def display(self) -> AssetView:
        return AssetView(
            asset_id=self._asset_id,
            category=self._category,
            available=self._available,
        )

    def __repr__(self) -> str:
        return (
            f"Asset(asset_id={self._asset_id}, category={self._category.value}, "
            f"available={self._available})"
        )
