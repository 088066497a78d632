"""
Configuration Loader (``rental_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into a ``RentalConfig``.
Runtime callers go through ``rental_config.get_active_config()``; this
module is the parsing step underneath it.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required key, non-numeric or non-finite rate, or non-mapping
  section  -> ``ConfigError``.
"""

from __future__ import annotations

import hashlib
import json
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from rental_config.schema import ConfigError, PricingRuleDef, RentalConfig


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ConfigError: if the top level is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(["top level must be a mapping"], source=str(path))
    return data


def parse_rate(value: Any, category: str) -> Decimal:
    """Parse a rate from YAML. Floats go through ``str`` so 0.1 stays 0.1."""
    error = ConfigError([f"pricing.{category}.rate must be a number, got {value!r}"])
    if isinstance(value, bool):
        raise error
    try:
        rate = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise error from e
    # NaN and Infinity parse but cannot price anything
    if not rate.is_finite():
        raise error
    return rate


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ConfigError([f"{where}: missing required key '{key}'"])
    return data[key]


def parse_pricing_rule(category: str, data: dict[str, Any]) -> PricingRuleDef:
    """Parse a ``PricingRuleDef`` from one entry of the ``pricing`` mapping."""
    if not isinstance(data, dict):
        raise ConfigError([f"pricing.{category} must be a mapping"])
    return PricingRuleDef(
        category=str(category).strip().lower(),
        model=str(_require(data, "model", f"pricing.{category}")).strip().lower(),
        rate=parse_rate(_require(data, "rate", f"pricing.{category}"), category),
    )


def parse_config(data: dict[str, Any]) -> RentalConfig:
    """
    Parse a ``RentalConfig`` from a loaded YAML dict.

    Postconditions:
        - ``checksum`` is the SHA-256 of the canonical source dict.
        - Pricing rules keep the order they appear in the file.
    """
    pricing = _require(data, "pricing", "config")
    if not isinstance(pricing, dict):
        raise ConfigError(["pricing must be a mapping of category -> rule"])
    logging_section = data.get("logging") or {}

    return RentalConfig(
        config_id=str(_require(data, "config_id", "config")),
        currency=str(data.get("currency", "USD")).strip().upper(),
        pricing=tuple(
            parse_pricing_rule(category, rule)
            for category, rule in pricing.items()
        ),
        log_level=str(logging_section.get("level", "INFO")).strip().upper(),
        checksum=compute_checksum(data),
    )


def load_config_file(path: Path) -> RentalConfig:
    """Load and parse a configuration file (no validation)."""
    return parse_config(load_yaml_file(path))


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Postconditions:
        - Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
