"""
RentalConfig schema.

Frozen dataclasses that YAML configuration files are parsed into. The
schema holds data only; validation lives in ``rental_config.validator``
and translation into kernel objects lives in ``rental_config.bridges``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


class ConfigError(Exception):
    """Configuration file parsed but is not usable.

    Attributes:
        errors: One human-readable message per problem found.
        source: Path of the offending file, when known.
    """

    code: str = "CONFIG_INVALID"

    def __init__(self, errors: list[str], source: str | None = None):
        self.errors = list(errors)
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(
            f"Configuration validation failed{where}:\n"
            + "\n".join(f"  - {e}" for e in self.errors)
        )


@dataclass(frozen=True)
class PricingRuleDef:
    """Pricing rule for one asset category: ``charge = usage * rate``."""

    category: str  # "car", "motorcycle"
    model: str  # "per_hour", "per_km"
    rate: Decimal


@dataclass(frozen=True)
class RentalConfig:
    """A complete, parsed configuration set."""

    config_id: str
    currency: str
    pricing: tuple[PricingRuleDef, ...]
    log_level: str = "INFO"
    checksum: str = ""

    def rule_for(self, category: str) -> PricingRuleDef | None:
        for rule in self.pricing:
            if rule.category == category:
                return rule
        return None
