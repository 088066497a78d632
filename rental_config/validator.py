"""
Configuration Validator (``rental_config.validator``).

Checks a parsed ``RentalConfig`` before any kernel object is built from it:

* every pricing rule names a known category and a known pricing model
* rates are non-negative
* each category is priced exactly once, and every category is priced
* the currency is a three-letter code
* the logging level is a standard level name

Errors block use of the configuration; warnings are informational.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rental_config.schema import RentalConfig
from rental_kernel.domain.category import AssetCategory
from rental_kernel.domain.pricing import PricingModel
from rental_kernel.domain.values import validate_currency_code

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass
class ConfigValidationResult:
    """``is_valid`` is True only when ``errors`` is empty."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)


def validate_configuration(config: RentalConfig) -> ConfigValidationResult:
    result = ConfigValidationResult()

    known_categories = {c.value for c in AssetCategory}
    known_models = {m.value for m in PricingModel}
    seen: set[str] = set()

    for rule in config.pricing:
        if rule.category not in known_categories:
            result.add_error(f"Unknown asset category '{rule.category}'")
        if rule.model not in known_models:
            result.add_error(
                f"Unknown pricing model '{rule.model}' for category '{rule.category}'"
            )
        if rule.rate < 0:
            result.add_error(
                f"Negative rate {rule.rate} for category '{rule.category}'"
            )
        elif rule.rate == 0:
            result.add_warning(f"Category '{rule.category}' is priced at zero")
        if rule.category in seen:
            result.add_error(f"Category '{rule.category}' priced more than once")
        seen.add(rule.category)

    for missing in sorted(known_categories - seen):
        result.add_error(f"No pricing rule for category '{missing}'")

    try:
        validate_currency_code(config.currency)
    except ValueError as e:
        result.add_error(str(e))

    if config.log_level not in _LOG_LEVELS:
        result.add_error(f"Unknown logging level '{config.log_level}'")

    if result.warnings:
        logging.getLogger("rental_kernel.config").warning(
            "rental_config_warnings",
            extra={"config_id": config.config_id, "warnings": result.warnings},
        )

    return result
