"""Accounts, sessions and return receipts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from rental_kernel.domain.category import AssetCategory
from rental_kernel.domain.values import Money


@dataclass(frozen=True)
class Account:
    """A registered user. Immutable once created."""

    username: str
    password_secret: str = field(repr=False)


@dataclass(frozen=True)
class Session:
    """The binding of an authenticated account to the current interaction."""

    account: Account
    started_at: datetime
    session_id: UUID = field(default_factory=uuid4)

    @property
    def username(self) -> str:
        return self.account.username


@dataclass(frozen=True)
class ReturnReceipt:
    """Outcome of returning an asset. Transient; the kernel does not keep it."""

    asset_id: int
    category: AssetCategory
    usage: int
    unit: str
    charge: Money
    returned_at: datetime
