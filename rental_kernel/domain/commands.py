"""
Command payloads accepted by ``ReservationService.execute``.

Front ends parse and validate raw input, then hand the kernel one of these
values. Payloads carry data only; all behavior lives in the service.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from rental_kernel.domain.category import AssetCategory


@dataclass(frozen=True)
class SignUp:
    name: ClassVar[str] = "sign_up"

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class Login:
    name: ClassVar[str] = "login"

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class Logout:
    name: ClassVar[str] = "logout"


@dataclass(frozen=True)
class AddAsset:
    name: ClassVar[str] = "add_asset"

    asset_id: int
    category: AssetCategory | str


@dataclass(frozen=True)
class ListAssets:
    name: ClassVar[str] = "list_assets"


@dataclass(frozen=True)
class Reserve:
    name: ClassVar[str] = "reserve"

    asset_id: int


@dataclass(frozen=True)
class Return:
    name: ClassVar[str] = "return_asset"

    asset_id: int
    usage: int


Command = SignUp | Login | Logout | AddAsset | ListAssets | Reserve | Return
