"""
ReservationService -- the command surface of the rental kernel.

Responsibility
--------------
Implements the session state machine and the reserve/return protocol on top
of ``Fleet`` and ``AccountDirectory``, producing a charge on every return.

Session state machine
---------------------
::

    LoggedOut --login()--> LoggedIn --logout()--> LoggedOut

* LoggedOut accepts only ``sign_up`` and ``login``.
* LoggedIn accepts ``add_asset``, ``list_assets``, ``reserve``,
  ``return_asset`` and ``logout``; ``sign_up`` and ``login`` are rejected
  with ``AlreadyLoggedInError``.

Architecture position
---------------------
**Kernel > Services** -- the only component a front end talks to. The
service owns no records of its own: it holds the current ``Session`` and
borrows the Fleet and AccountDirectory passed to it.

Failure modes
-------------
Every failure is a ``RentalKernelError`` subclass and leaves state unchanged:

* ``NotLoggedInError`` / ``AlreadyLoggedInError`` -- wrong session state.
* ``AuthFailedError`` -- bad credentials; the service stays logged out.
* ``InvalidUsageError`` -- negative or non-integer usage on return, raised
  before the asset is touched.
* Fleet / asset / directory errors propagate unchanged.

Usage::

    service = ReservationService(Fleet(), AccountDirectory())
    service.sign_up("alice", "secret")
    service.login("alice", "secret")
    service.add_asset(1, AssetCategory.CAR)
    service.reserve(1)
    receipt = service.return_asset(1, usage=3)   # receipt.charge == 300 USD
"""

from __future__ import annotations

from typing import Any, Callable

from rental_kernel.domain.account import Account, ReturnReceipt, Session
from rental_kernel.domain.asset import AssetView
from rental_kernel.domain.category import AssetCategory
from rental_kernel.domain.clock import Clock, SystemClock
from rental_kernel.domain.commands import (
    AddAsset,
    Command,
    ListAssets,
    Login,
    Logout,
    Reserve,
    Return,
    SignUp,
)
from rental_kernel.exceptions import (
    AlreadyLoggedInError,
    AuthFailedError,
    InvalidUsageError,
    NotLoggedInError,
    UnsupportedCommandError,
)
from rental_kernel.logging_config import LogContext, get_logger
from rental_kernel.services.account_directory import AccountDirectory
from rental_kernel.services.fleet import Fleet

logger = get_logger("services.reservation")


class ReservationService:
    """
    Orchestrates accounts and fleet for a single interactive session.

    Contract
    --------
    * One command is fully processed before the next; no locking is done.
    * Fleet and AccountDirectory are mutated only through this service.

    Non-goals
    ---------
    * Does NOT persist anything across process restarts.
    * Does NOT support more than one concurrent session.
    """

    def __init__(
        self,
        fleet: Fleet,
        directory: AccountDirectory,
        clock: Clock | None = None,
    ):
        self._fleet = fleet
        self._directory = directory
        self._clock = clock or SystemClock()
        self._session: Session | None = None

        self._handlers: dict[type, Callable[[Any], Any]] = {
            SignUp: lambda c: self.sign_up(c.username, c.password),
            Login: lambda c: self.login(c.username, c.password),
            Logout: lambda c: self.logout(),
            AddAsset: lambda c: self.add_asset(c.asset_id, c.category),
            ListAssets: lambda c: self.list_assets(),
            Reserve: lambda c: self.reserve(c.asset_id),
            Return: lambda c: self.return_asset(c.asset_id, c.usage),
        }

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def is_logged_in(self) -> bool:
        return self._session is not None

    # =========================================================================
    # Logged-out commands
    # =========================================================================

    def sign_up(self, username: str, password: str) -> Account:
        self._require_logged_out("sign_up")
        return self._directory.sign_up(username, password)

    def login(self, username: str, password: str) -> Session:
        self._require_logged_out("login")
        try:
            account = self._directory.authenticate(username, password)
        except AuthFailedError:
            logger.warning("login_failed", extra={"account_username": username})
            raise

        self._session = Session(account=account, started_at=self._clock.now())
        LogContext.set(
            session_id=str(self._session.session_id),
            username=account.username,
        )
        logger.info("login_succeeded", extra={
            "started_at": self._session.started_at,
        })
        return self._session

    # =========================================================================
    # Logged-in commands
    # =========================================================================

    def logout(self) -> None:
        session = self._require_session("logout")
        logger.info("logout", extra={
            "session_started_at": session.started_at,
        })
        self._session = None
        LogContext.clear()

    def add_asset(self, asset_id: int, category: AssetCategory | str) -> AssetView:
        self._require_session("add_asset")
        return self._fleet.add(asset_id, category).display()

    def list_assets(self) -> list[AssetView]:
        self._require_session("list_assets")
        return self._fleet.list_all()

    def reserve(self, asset_id: int) -> AssetView:
        self._require_session("reserve")
        asset = self._fleet.reserve(asset_id)
        logger.info("asset_reserved", extra={
            "asset_id": asset_id,
            "category": asset.category.value,
        })
        return asset.display()

    def return_asset(self, asset_id: int, usage: int) -> ReturnReceipt:
        self._require_session("return_asset")
        if isinstance(usage, bool) or not isinstance(usage, int) or usage < 0:
            raise InvalidUsageError(usage)

        charge = self._fleet.return_asset(asset_id, usage)
        asset = self._fleet.find(asset_id)
        receipt = ReturnReceipt(
            asset_id=asset_id,
            category=asset.category,
            usage=usage,
            unit=asset.pricing.unit,
            charge=charge,
            returned_at=self._clock.now(),
        )
        logger.info("asset_returned", extra={
            "asset_id": asset_id,
            "usage": usage,
            "unit": receipt.unit,
            "charge": charge.amount,
            "currency": charge.currency,
        })
        return receipt

    # =========================================================================
    # Command dispatch
    # =========================================================================

    def execute(self, command: Command) -> Any:
        """
        Run a typed command payload and return the matching operation's result.

        Raises:
            UnsupportedCommandError: no handler for the payload type.
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise UnsupportedCommandError(type(command).__name__)
        with LogContext.bind(command=command.name):
            return handler(command)

    # =========================================================================
    # Guards
    # =========================================================================

    def _require_session(self, command: str) -> Session:
        if self._session is None:
            raise NotLoggedInError(command)
        return self._session

    def _require_logged_out(self, command: str) -> None:
        if self._session is not None:
            raise AlreadyLoggedInError(command, self._session.username)
