"""
rental_config -- single public entrypoint for rental configuration.

Responsibility:
    Provides the ONLY way to obtain configuration at runtime through
    ``get_active_config()``. Returns a validated, frozen ``RentalConfig``.

Architecture position:
    Configuration sits above ``rental_kernel``. The kernel never imports
    from ``rental_config``; ``rental_config.bridges`` translates the config
    into kernel objects (the pricing registry).

Failure modes:
    - ``FileNotFoundError`` -- the configuration file does not exist.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``ConfigError`` -- the file parsed but failed validation.

Audit relevance:
    Every successful ``get_active_config()`` call logs
    ``rental_config_loaded`` with the config id and SHA-256 checksum, tying
    every charge computed in the session to the exact rates that produced it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rental_config.loader import compute_checksum, load_config_file
from rental_config.schema import ConfigError, PricingRuleDef, RentalConfig
from rental_config.validator import ConfigValidationResult, validate_configuration

_logger = logging.getLogger("rental_kernel.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(config_path: Path | str | None = None) -> RentalConfig:
    """The ONLY public configuration entrypoint.

    Args:
        config_path: Override path to a YAML configuration file.
            Defaults to ``rental_config/sets/default.yaml``.

    Returns:
        A ``RentalConfig`` that passed validation.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If validation fails.
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    config = load_config_file(path)

    validation = validate_configuration(config)
    if not validation.is_valid:
        raise ConfigError(validation.errors, source=str(path))

    _logger.info(
        "rental_config_loaded",
        extra={
            "config_id": config.config_id,
            "checksum": config.checksum,
            "currency": config.currency,
            "pricing_rule_count": len(config.pricing),
            "config_path": str(path),
        },
    )
    return config


__all__ = [
    "ConfigError",
    "ConfigValidationResult",
    "DEFAULT_CONFIG_PATH",
    "PricingRuleDef",
    "RentalConfig",
    "compute_checksum",
    "get_active_config",
    "validate_configuration",
]
