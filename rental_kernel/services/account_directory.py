"""
AccountDirectory -- owner of registered credentials.

Secrets are stored and compared as given. The comparison is constant-time
(``hmac.compare_digest``) but there is no hashing; a deployment that stores
real passwords must hash them before they reach this directory.
"""

from __future__ import annotations

import hmac

from rental_kernel.domain.account import Account
from rental_kernel.exceptions import (
    AuthFailedError,
    DuplicateUsernameError,
    InvalidCredentialsError,
)
from rental_kernel.logging_config import get_logger

logger = get_logger("services.account_directory")


class AccountDirectory:
    """Registered accounts keyed by username."""

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}

    def sign_up(self, username: str, password: str) -> Account:
        """
        Register a new account.

        Raises:
            InvalidCredentialsError: username or password is empty.
            DuplicateUsernameError: username already registered.
        """
        if not username or not password:
            raise InvalidCredentialsError()
        if username in self._accounts:
            raise DuplicateUsernameError(username)
        account = Account(username=username, password_secret=password)
        self._accounts[username] = account
        logger.info("account_registered", extra={"account_username": username})
        return account

    def authenticate(self, username: str, password: str) -> Account:
        """
        Return the account whose credentials match exactly.

        Raises:
            AuthFailedError: unknown username or wrong password.
        """
        account = self._accounts.get(username)
        if account is None or not hmac.compare_digest(
            account.password_secret.encode("utf-8"), password.encode("utf-8")
        ):
            raise AuthFailedError(username)
        return account

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, username: object) -> bool:
        return username in self._accounts
