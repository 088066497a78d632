"""
Rental kernel services -- stateful owners and the command surface.

- ``Fleet``: owns assets.
- ``AccountDirectory``: owns accounts.
- ``ReservationService``: session state machine and reserve/return protocol.
"""

from rental_kernel.services.account_directory import AccountDirectory
from rental_kernel.services.fleet import Fleet
from rental_kernel.services.reservation_service import ReservationService

__all__ = [
    "AccountDirectory",
    "Fleet",
    "ReservationService",
]
