"""
Rental kernel -- reservation lifecycle and charge computation.

Front ends (console menu, tests, any other adapter) create a
``ReservationService`` and drive it with validated commands; every failure
comes back as a typed ``RentalKernelError``.
"""

from rental_kernel.domain.category import AssetCategory
from rental_kernel.exceptions import RentalKernelError
from rental_kernel.services import AccountDirectory, Fleet, ReservationService

__version__ = "0.1.0"

__all__ = [
    "AccountDirectory",
    "AssetCategory",
    "Fleet",
    "RentalKernelError",
    "ReservationService",
]
