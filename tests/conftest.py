"""
Pytest fixtures for the rental kernel test suite.

Provides:
- Structured logging setup and log capture
- Deterministic clock
- Default configuration and pricing registry
- Fleet, AccountDirectory and ReservationService instances (fresh per test)
"""

import json
import logging
from datetime import datetime, timezone
from io import StringIO

import pytest

from rental_config import get_active_config
from rental_config.bridges import build_pricing_registry
from rental_kernel.domain.clock import DeterministicClock
from rental_kernel.domain.pricing import PricingRegistry
from rental_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from rental_kernel.services import AccountDirectory, Fleet, ReservationService

TEST_USERNAME = "alice"
TEST_PASSWORD = "s3cret"
FIXED_TIME = datetime(2026, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture rental_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, logged_in_service):
            logged_in_service.add_asset(1, "car")
            logs = captured_logs()
            assert any(r["message"] == "asset_added" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("rental_kernel")
    original_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(original_level)


# =============================================================================
# Clock and configuration fixtures
# =============================================================================


@pytest.fixture
def deterministic_clock():
    """Provide a deterministic clock for testing."""
    return DeterministicClock(FIXED_TIME)


@pytest.fixture
def default_config():
    """The configuration shipped in rental_config/sets/default.yaml."""
    return get_active_config()


@pytest.fixture
def pricing_registry(default_config) -> PricingRegistry:
    return build_pricing_registry(default_config)


# =============================================================================
# Service fixtures
# =============================================================================


@pytest.fixture
def fleet(pricing_registry) -> Fleet:
    return Fleet(pricing_registry)


@pytest.fixture
def directory() -> AccountDirectory:
    return AccountDirectory()


@pytest.fixture
def service(fleet, directory, deterministic_clock) -> ReservationService:
    """A logged-out service with one registered account (alice / s3cret)."""
    svc = ReservationService(fleet, directory, clock=deterministic_clock)
    svc.sign_up(TEST_USERNAME, TEST_PASSWORD)
    return svc


@pytest.fixture
def logged_in_service(service) -> ReservationService:
    service.login(TEST_USERNAME, TEST_PASSWORD)
    return service
