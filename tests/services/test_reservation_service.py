"""
ReservationService tests.

Covers the session state machine (LoggedOut / LoggedIn), the reserve/return
protocol, usage validation, receipts, and log context binding.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from rental_kernel.domain.asset import AssetView
from rental_kernel.domain.category import AssetCategory
from rental_kernel.domain.values import Money
from rental_kernel.exceptions import (
    AlreadyLoggedInError,
    AssetNotAvailableError,
    AssetNotReservedError,
    AuthFailedError,
    DuplicateAssetIdError,
    InvalidCategoryError,
    InvalidCredentialsError,
    InvalidUsageError,
    NotLoggedInError,
    UnknownAssetError,
)
from rental_kernel.logging_config import LogContext
from tests.conftest import FIXED_TIME, TEST_PASSWORD, TEST_USERNAME


# =============================================================================
# Session state machine
# =============================================================================


class TestLoggedOut:

    def test_initial_state(self, service):
        assert service.session is None
        assert not service.is_logged_in

    @pytest.mark.parametrize("call", [
        lambda s: s.logout(),
        lambda s: s.add_asset(1, AssetCategory.CAR),
        lambda s: s.list_assets(),
        lambda s: s.reserve(1),
        lambda s: s.return_asset(1, 1),
    ])
    def test_session_commands_rejected(self, service, call):
        with pytest.raises(NotLoggedInError):
            call(service)

    def test_not_logged_in_names_command(self, service):
        with pytest.raises(NotLoggedInError) as exc_info:
            service.reserve(1)
        assert exc_info.value.command == "reserve"

    def test_sign_up_empty_fields(self, service):
        with pytest.raises(InvalidCredentialsError):
            service.sign_up("", "x")
        with pytest.raises(InvalidCredentialsError):
            service.sign_up("x", "")


class TestLogin:

    def test_login_binds_session(self, service, deterministic_clock):
        session = service.login(TEST_USERNAME, TEST_PASSWORD)
        assert service.is_logged_in
        assert service.session is session
        assert session.username == TEST_USERNAME
        assert session.started_at == FIXED_TIME

    def test_bad_credentials_stay_logged_out(self, service):
        with pytest.raises(AuthFailedError):
            service.login(TEST_USERNAME, "wrong")
        assert not service.is_logged_in

    def test_login_twice_rejected(self, logged_in_service):
        first = logged_in_service.session
        with pytest.raises(AlreadyLoggedInError) as exc_info:
            logged_in_service.login(TEST_USERNAME, TEST_PASSWORD)
        assert exc_info.value.username == TEST_USERNAME
        assert logged_in_service.session is first

    def test_sign_up_while_logged_in_rejected(self, logged_in_service):
        with pytest.raises(AlreadyLoggedInError):
            logged_in_service.sign_up("bob", "pw")

    def test_login_sets_log_context(self, logged_in_service):
        ctx = LogContext.get_all()
        assert ctx["username"] == TEST_USERNAME
        assert ctx["session_id"] == str(logged_in_service.session.session_id)

    def test_failed_login_logged_without_secret(self, service, captured_logs):
        with pytest.raises(AuthFailedError):
            service.login(TEST_USERNAME, "wrong-secret")
        records = captured_logs()
        assert any(r["message"] == "login_failed" for r in records)
        assert all("wrong-secret" not in str(r) for r in records)

    def test_new_session_each_login(self, logged_in_service, deterministic_clock):
        first = logged_in_service.session
        logged_in_service.logout()
        deterministic_clock.advance(60)
        second = logged_in_service.login(TEST_USERNAME, TEST_PASSWORD)
        assert second.session_id != first.session_id
        assert second.started_at == FIXED_TIME + timedelta(seconds=60)


class TestLogout:

    def test_logout_clears_session(self, logged_in_service):
        logged_in_service.logout()
        assert logged_in_service.session is None
        assert LogContext.get_all() == {}

    def test_logout_twice_rejected(self, logged_in_service):
        logged_in_service.logout()
        with pytest.raises(NotLoggedInError):
            logged_in_service.logout()

    def test_fleet_survives_logout(self, logged_in_service):
        logged_in_service.add_asset(1, AssetCategory.CAR)
        logged_in_service.reserve(1)
        logged_in_service.logout()
        logged_in_service.login(TEST_USERNAME, TEST_PASSWORD)
        assert logged_in_service.list_assets() == [
            AssetView(1, AssetCategory.CAR, False)
        ]


# =============================================================================
# Fleet commands
# =============================================================================


class TestAddAndList:

    def test_add_returns_view(self, logged_in_service):
        view = logged_in_service.add_asset(1, "car")
        assert view == AssetView(1, AssetCategory.CAR, True)

    def test_duplicate_id(self, logged_in_service, fleet):
        logged_in_service.add_asset(1, AssetCategory.CAR)
        with pytest.raises(DuplicateAssetIdError):
            logged_in_service.add_asset(1, AssetCategory.MOTORCYCLE)
        assert len(fleet) == 1

    def test_invalid_category(self, logged_in_service, fleet):
        with pytest.raises(InvalidCategoryError):
            logged_in_service.add_asset(1, "spaceship")
        assert len(fleet) == 0

    def test_list_is_pure_query(self, logged_in_service):
        logged_in_service.add_asset(2, AssetCategory.MOTORCYCLE)
        logged_in_service.add_asset(1, AssetCategory.CAR)
        logged_in_service.reserve(1)
        first = logged_in_service.list_assets()
        second = logged_in_service.list_assets()
        assert first == second
        assert [v.asset_id for v in first] == [2, 1]


class TestReserveReturn:

    def test_reserve_unknown(self, logged_in_service):
        with pytest.raises(UnknownAssetError):
            logged_in_service.reserve(42)

    def test_reserve_twice(self, logged_in_service):
        logged_in_service.add_asset(1, AssetCategory.CAR)
        view = logged_in_service.reserve(1)
        assert view.available is False
        with pytest.raises(AssetNotAvailableError):
            logged_in_service.reserve(1)

    def test_return_car(self, logged_in_service):
        logged_in_service.add_asset(1, AssetCategory.CAR)
        logged_in_service.reserve(1)
        receipt = logged_in_service.return_asset(1, 3)
        assert receipt.charge == Money.of(300)
        assert receipt.unit == "hours"
        assert receipt.category is AssetCategory.CAR
        assert receipt.usage == 3
        assert receipt.returned_at == FIXED_TIME
        assert logged_in_service.list_assets()[0].available is True

    def test_return_motorcycle(self, logged_in_service):
        logged_in_service.add_asset(2, AssetCategory.MOTORCYCLE)
        logged_in_service.reserve(2)
        receipt = logged_in_service.return_asset(2, 7)
        assert receipt.charge.amount == Decimal("70")
        assert receipt.unit == "km"

    def test_return_zero_usage(self, logged_in_service):
        logged_in_service.add_asset(1, AssetCategory.CAR)
        logged_in_service.reserve(1)
        assert logged_in_service.return_asset(1, 0).charge == Money.zero()

    def test_return_huge_usage_is_not_rounded(self, logged_in_service):
        usage = 10**30 + 1
        logged_in_service.add_asset(1, AssetCategory.CAR)
        logged_in_service.reserve(1)
        receipt = logged_in_service.return_asset(1, usage)
        assert receipt.charge.amount == Decimal(100 * usage)
        assert str(receipt.charge.amount) == "100000000000000000000000000000100"

    def test_return_twice(self, logged_in_service):
        logged_in_service.add_asset(1, AssetCategory.CAR)
        logged_in_service.reserve(1)
        logged_in_service.return_asset(1, 1)
        with pytest.raises(AssetNotReservedError):
            logged_in_service.return_asset(1, 1)

    def test_return_unknown(self, logged_in_service):
        with pytest.raises(UnknownAssetError):
            logged_in_service.return_asset(9, 1)

    @pytest.mark.parametrize("usage", [-1, 2.5, "3", True, None])
    def test_invalid_usage_leaves_asset_reserved(self, logged_in_service, usage):
        logged_in_service.add_asset(1, AssetCategory.CAR)
        logged_in_service.reserve(1)
        with pytest.raises(InvalidUsageError) as exc_info:
            logged_in_service.return_asset(1, usage)
        assert exc_info.value.usage == usage
        assert logged_in_service.list_assets()[0].available is False

    def test_return_logged_with_charge(self, logged_in_service, captured_logs):
        logged_in_service.add_asset(1, AssetCategory.CAR)
        logged_in_service.reserve(1)
        logged_in_service.return_asset(1, 2)
        record = next(r for r in captured_logs() if r["message"] == "asset_returned")
        assert record["charge"] == "200"
        assert record["currency"] == "USD"
        assert record["username"] == TEST_USERNAME
