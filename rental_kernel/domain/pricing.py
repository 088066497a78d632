"""
Pricing strategies and the category-to-strategy registry.

A PricingStrategy is a pure function that maps a usage quantity to a charge.
It has NO side effects and NO access to:
- Clock/time
- I/O
- Asset or session state

Every strategy is linear: ``charge = usage * rate``. The rate and currency
are fixed when the strategy is constructed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum

from rental_kernel.domain.category import AssetCategory
from rental_kernel.domain.values import Money
from rental_kernel.exceptions import InvalidCategoryError


class PricingModel(str, Enum):
    """How usage is measured for billing."""

    PER_HOUR = "per_hour"
    PER_KM = "per_km"


class PricingStrategy(ABC):
    """
    Base class for all pricing strategies.

    Contract:
        ``calculate(usage)`` is deterministic and side-effect free.
        Callers must pass a non-negative integer; the service layer rejects
        anything else before a strategy is reached.
    """

    def __init__(self, rate: Decimal | str | int, currency: str = "USD"):
        self._rate = Money.of(rate, currency)
        if self._rate.is_negative:
            raise ValueError(f"Pricing rate must be non-negative, got {rate}")

    @property
    @abstractmethod
    def model(self) -> PricingModel:
        """The pricing model this strategy implements."""
        ...

    @property
    @abstractmethod
    def unit(self) -> str:
        """Unit of usage, for display (``hours``, ``km``)."""
        ...

    @property
    def rate(self) -> Money:
        """Charge per unit of usage."""
        return self._rate

    def calculate(self, usage: int) -> Money:
        """Return the charge for ``usage`` units."""
        if usage < 0:
            raise ValueError(f"usage must be non-negative, got {usage}")
        return self._rate.times(usage)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rate={self._rate.amount}, currency={self._rate.currency})"


class PerHourPricing(PricingStrategy):
    """Charge by rented hours. Default rate 100 per hour."""

    DEFAULT_RATE = Decimal("100")

    def __init__(self, rate: Decimal | str | int = DEFAULT_RATE, currency: str = "USD"):
        super().__init__(rate, currency)

    @property
    def model(self) -> PricingModel:
        return PricingModel.PER_HOUR

    @property
    def unit(self) -> str:
        return "hours"


class PerKmPricing(PricingStrategy):
    """Charge by distance driven. Default rate 10 per km."""

    DEFAULT_RATE = Decimal("10")

    def __init__(self, rate: Decimal | str | int = DEFAULT_RATE, currency: str = "USD"):
        super().__init__(rate, currency)

    @property
    def model(self) -> PricingModel:
        return PricingModel.PER_KM

    @property
    def unit(self) -> str:
        return "km"


PRICING_MODELS: dict[PricingModel, type[PricingStrategy]] = {
    PricingModel.PER_HOUR: PerHourPricing,
    PricingModel.PER_KM: PerKmPricing,
}


def create_pricing(
    model: PricingModel | str,
    rate: Decimal | str | int,
    currency: str = "USD",
) -> PricingStrategy:
    """Instantiate the strategy class registered for ``model``."""
    return PRICING_MODELS[PricingModel(model)](rate, currency)


class PricingRegistry:
    """
    Maps each asset category to the pricing strategy bound at asset creation.

    Registries are plain instances, not class-level state, so a test or a
    front end can build its own table without affecting others.
    """

    def __init__(self) -> None:
        self._strategies: dict[AssetCategory, PricingStrategy] = {}

    @classmethod
    def default(cls) -> PricingRegistry:
        """Car billed per hour at 100, motorcycle per km at 10, in USD."""
        registry = cls()
        registry.register(AssetCategory.CAR, PerHourPricing())
        registry.register(AssetCategory.MOTORCYCLE, PerKmPricing())
        return registry

    def register(self, category: AssetCategory, strategy: PricingStrategy) -> None:
        """Bind ``strategy`` to ``category``. Each category is bound once."""
        category = AssetCategory.parse(category)
        if category in self._strategies:
            existing = self._strategies[category]
            raise ValueError(
                f"Pricing already registered for {category.value}: {existing!r}"
            )
        self._strategies[category] = strategy

    def get(self, category: AssetCategory | str) -> PricingStrategy:
        """
        Return the strategy for ``category``.

        Raises:
            InvalidCategoryError: if the category is unknown or has no
                strategy registered.
        """
        resolved = AssetCategory.parse(category)
        strategy = self._strategies.get(resolved)
        if strategy is None:
            raise InvalidCategoryError(category)
        return strategy

    def __contains__(self, category: object) -> bool:
        return category in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)
