"""
Typed Exception Hierarchy for the Rental Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Every failure the kernel reports is recoverable and is rendered by whatever
front end sits on top of it (console menu, test harness, HTTP adapter).
Front ends must decide what to show by exception TYPE and by the
machine-readable ``code`` -- never by parsing message text:

    try:
        service.reserve(asset_id)
    except AssetNotAvailableError as e:
        render(f"Vehicle {e.asset_id} is already booked")
    except RentalKernelError as e:
        render(f"Error: {e}")            # generic fallback

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    RentalKernelError (base)
    |
    +-- ValidationError
    |   +-- InvalidUsageError
    |   +-- InvalidAssetIdError
    |   +-- UnsupportedCommandError
    |
    +-- AccountError
    |   +-- InvalidCredentialsError
    |   +-- DuplicateUsernameError
    |
    +-- AuthError
    |   +-- AuthFailedError
    |   +-- NotLoggedInError
    |   +-- AlreadyLoggedInError
    |
    +-- AssetError
        +-- InvalidCategoryError
        +-- DuplicateAssetIdError
        +-- UnknownAssetError
        +-- AssetNotAvailableError
        +-- AssetNotReservedError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category     | Code                 | When Raised
-------------|----------------------|------------------------------------------
Validation   | INVALID_USAGE        | Return with negative / non-integer usage
             | INVALID_ASSET_ID     | Asset id is not a positive integer
             | UNSUPPORTED_COMMAND  | execute() received an unknown command
-------------|----------------------|------------------------------------------
Account      | INVALID_CREDENTIALS  | Sign-up with empty username or password
             | DUPLICATE_USERNAME   | Sign-up with a username already taken
-------------|----------------------|------------------------------------------
Auth         | AUTH_FAILED          | Unknown user or wrong password
             | NOT_LOGGED_IN        | Session-only command without a session
             | ALREADY_LOGGED_IN    | Sign-up / login while a session is active
-------------|----------------------|------------------------------------------
Asset        | INVALID_CATEGORY     | Category not recognized
             | DUPLICATE_ASSET_ID   | Asset id already in the fleet
             | UNKNOWN_ASSET        | Asset id not in the fleet
             | ASSET_NOT_AVAILABLE  | Reserve on an already reserved asset
             | ASSET_NOT_RESERVED   | Return on an available asset

===============================================================================
DESIGN DECISIONS
===============================================================================

1. Inherit from Exception, not ValueError/KeyError, so domain errors are
   catchable as one group and never confused with programming errors.

2. ``code`` is a class attribute so front ends can map codes without
   instantiating anything.

3. Context is stored as attributes (``asset_id``, ``username``, ...) so it
   survives structured logging. Passwords are NEVER stored on an exception.
"""


class RentalKernelError(Exception):
    """
    Base exception for all rental kernel errors.

    All subclasses must have a ``code`` class attribute for machine-readable
    error identification.
    """

    code: str = "RENTAL_KERNEL_ERROR"


# Validation exceptions


class ValidationError(RentalKernelError):
    """Base exception for malformed command input."""

    code: str = "VALIDATION_ERROR"


class InvalidUsageError(ValidationError):
    """Usage reported on return is negative or not an integer."""

    code: str = "INVALID_USAGE"

    def __init__(self, usage: object):
        self.usage = usage
        super().__init__(f"Usage must be a non-negative integer, got {usage!r}")


class InvalidAssetIdError(ValidationError):
    """Asset id is not a positive integer."""

    code: str = "INVALID_ASSET_ID"

    def __init__(self, asset_id: object):
        self.asset_id = asset_id
        super().__init__(f"Asset id must be a positive integer, got {asset_id!r}")


class UnsupportedCommandError(ValidationError):
    """Command payload type has no handler."""

    code: str = "UNSUPPORTED_COMMAND"

    def __init__(self, command_type: str):
        self.command_type = command_type
        super().__init__(f"Unsupported command: {command_type}")


# Account exceptions


class AccountError(RentalKernelError):
    """Base exception for account directory errors."""

    code: str = "ACCOUNT_ERROR"


class InvalidCredentialsError(AccountError):
    """Username or password is empty."""

    code: str = "INVALID_CREDENTIALS"

    def __init__(self, reason: str = "Username or password cannot be empty."):
        self.reason = reason
        super().__init__(reason)


class DuplicateUsernameError(AccountError):
    """Username is already registered."""

    code: str = "DUPLICATE_USERNAME"

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already taken: {username}")


# Auth exceptions


class AuthError(RentalKernelError):
    """Base exception for session and authentication errors."""

    code: str = "AUTH_ERROR"


class AuthFailedError(AuthError):
    """
    Credentials did not match a registered account.

    Unknown usernames and wrong passwords are reported identically.
    """

    code: str = "AUTH_FAILED"

    def __init__(self, username: str):
        self.username = username
        super().__init__("Invalid credentials.")


class NotLoggedInError(AuthError):
    """Command requires an active session."""

    code: str = "NOT_LOGGED_IN"

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Login required for {command}")


class AlreadyLoggedInError(AuthError):
    """Command is only accepted while logged out."""

    code: str = "ALREADY_LOGGED_IN"

    def __init__(self, command: str, username: str):
        self.command = command
        self.username = username
        super().__init__(
            f"Cannot {command} while logged in as {username}; log out first"
        )


# Asset exceptions


class AssetError(RentalKernelError):
    """Base exception for fleet and asset state errors."""

    code: str = "ASSET_ERROR"


class InvalidCategoryError(AssetError):
    """Category is not a recognized asset category."""

    code: str = "INVALID_CATEGORY"

    def __init__(self, category: object):
        self.category = category
        super().__init__(f"Invalid asset category: {category!r}")


class DuplicateAssetIdError(AssetError):
    """Asset id is already present in the fleet."""

    code: str = "DUPLICATE_ASSET_ID"

    def __init__(self, asset_id: int):
        self.asset_id = asset_id
        super().__init__(f"Asset already exists: {asset_id}")


class UnknownAssetError(AssetError):
    """Asset id is not present in the fleet."""

    code: str = "UNKNOWN_ASSET"

    def __init__(self, asset_id: int):
        self.asset_id = asset_id
        super().__init__(f"Asset not found: {asset_id}")


class AssetNotAvailableError(AssetError):
    """Asset is already reserved."""

    code: str = "ASSET_NOT_AVAILABLE"

    def __init__(self, asset_id: int):
        self.asset_id = asset_id
        super().__init__(f"Asset {asset_id} is not available")


class AssetNotReservedError(AssetError):
    """Asset is not currently reserved, so it cannot be returned."""

    code: str = "ASSET_NOT_RESERVED"

    def __init__(self, asset_id: int):
        self.asset_id = asset_id
        super().__init__(f"Asset {asset_id} is not reserved")
