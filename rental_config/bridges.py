"""
Config -> Kernel Bridges.

Turns a validated ``RentalConfig`` into kernel objects. These live in
rental_config (the producer) because the kernel never imports
rental_config.

Usage:
    from rental_config.bridges import build_pricing_registry

    config = get_active_config()
    fleet = Fleet(build_pricing_registry(config))
"""

from __future__ import annotations

from rental_config.schema import RentalConfig
from rental_kernel.domain.category import AssetCategory
from rental_kernel.domain.pricing import PricingRegistry, create_pricing


def build_pricing_registry(config: RentalConfig) -> PricingRegistry:
    """Build a PricingRegistry with one strategy per configured category."""
    registry = PricingRegistry()
    for rule in config.pricing:
        registry.register(
            AssetCategory.parse(rule.category),
            create_pricing(rule.model, rule.rate, config.currency),
        )
    return registry
