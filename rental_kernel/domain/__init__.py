"""
Rental kernel domain layer -- pure values and state machines, no I/O.
"""

from rental_kernel.domain.account import Account, ReturnReceipt, Session
from rental_kernel.domain.asset import Asset, AssetView
from rental_kernel.domain.category import AssetCategory
from rental_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from rental_kernel.domain.pricing import (
    PerHourPricing,
    PerKmPricing,
    PricingModel,
    PricingRegistry,
    PricingStrategy,
)
from rental_kernel.domain.values import Money

__all__ = [
    "Account",
    "Asset",
    "AssetCategory",
    "AssetView",
    "Clock",
    "DeterministicClock",
    "Money",
    "PerHourPricing",
    "PerKmPricing",
    "PricingModel",
    "PricingRegistry",
    "PricingStrategy",
    "ReturnReceipt",
    "Session",
    "SystemClock",
]
