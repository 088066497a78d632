"""CLI main loop: welcome menu, rental menu, command dispatch."""

import logging
import sys
from collections.abc import Callable

import yaml

from rental_config import ConfigError, RentalConfig, get_active_config
from rental_config.bridges import build_pricing_registry
from rental_kernel.domain.commands import (
    AddAsset,
    ListAssets,
    Login,
    Logout,
    Reserve,
    Return,
    SignUp,
)
from rental_kernel.exceptions import (
    AssetNotAvailableError,
    InvalidCategoryError,
    RentalKernelError,
    UnknownAssetError,
)
from rental_kernel.logging_config import StructuredFormatter, configure_logging, get_logger
from rental_kernel.services import AccountDirectory, Fleet, ReservationService
from scripts.cli import config as cli_config
from scripts.cli.menu import (
    VEHICLE_TYPE_CHOICES,
    print_rental_menu,
    print_vehicle_types,
    print_welcome_menu,
)
from scripts.cli.prompts import ask, ask_non_negative_int
from scripts.cli.util import fmt_amount

logger = get_logger("cli")


class _FlushingFileHandler(logging.FileHandler):
    """FileHandler that flushes after every emit so interactive.log updates immediately."""

    def emit(self, record: logging.LogRecord) -> None:
        super().emit(record)
        self.flush()


def build_service(config: RentalConfig) -> ReservationService:
    """Wire a ReservationService priced by ``config``."""
    fleet = Fleet(build_pricing_registry(config))
    return ReservationService(fleet, AccountDirectory())


# ---------------------------------------------------------------------------
# Logged-out actions
# ---------------------------------------------------------------------------


def handle_sign_up(service: ReservationService) -> None:
    username = ask("Enter username: ")
    password = ask("Enter password: ")
    try:
        service.execute(SignUp(username, password))
        print("Signup successful.")
    except RentalKernelError as e:
        print(f"Error: {e}")


def handle_login(service: ReservationService) -> bool:
    username = ask("Username: ")
    password = ask("Password: ")
    try:
        service.execute(Login(username, password))
    except RentalKernelError as e:
        print(str(e))
        return False
    print("Login successful!")
    return True


# ---------------------------------------------------------------------------
# Logged-in actions
# ---------------------------------------------------------------------------


def handle_add_vehicle(service: ReservationService) -> None:
    asset_id = ask_non_negative_int("Enter Vehicle ID: ")
    print_vehicle_types()
    choice = ask("Choice: ")
    category = VEHICLE_TYPE_CHOICES.get(choice, choice)
    try:
        view = service.execute(AddAsset(asset_id, category))
        print(f"{view.category.label} {view.asset_id} added.")
    except InvalidCategoryError:
        print("Invalid type.")
    except RentalKernelError as e:
        print(f"Error: {e}")


def handle_view_vehicles(service: ReservationService) -> None:
    views = service.execute(ListAssets())
    if not views:
        print("No vehicles in the fleet.")
    for view in views:
        print(view.describe())


def handle_book_vehicle(service: ReservationService) -> None:
    asset_id = ask_non_negative_int("Enter Vehicle ID to book: ")
    try:
        service.execute(Reserve(asset_id))
        print("Vehicle booked successfully.")
    except (UnknownAssetError, AssetNotAvailableError):
        print("Vehicle not available.")
    except RentalKernelError as e:
        print(f"Error: {e}")


def handle_return_vehicle(service: ReservationService) -> None:
    asset_id = ask_non_negative_int("Enter Vehicle ID to return: ")
    # Only ask for usage when the vehicle is actually out.
    views = {view.asset_id: view for view in service.execute(ListAssets())}
    view = views.get(asset_id)
    if view is None or view.available:
        print("Invalid vehicle or already returned.")
        return
    usage = ask_non_negative_int("Enter hours/km used: ")
    try:
        receipt = service.execute(Return(asset_id, usage))
        print(f"Vehicle returned. Charge: {fmt_amount(receipt.charge)}")
    except RentalKernelError as e:
        print(f"Error: {e}")


def handle_logout(service: ReservationService) -> None:
    service.execute(Logout())
    print("Logged out.")


RENTAL_ACTIONS: dict[str, Callable[[ReservationService], None]] = {
    "1": handle_add_vehicle,
    "2": handle_view_vehicles,
    "3": handle_book_vehicle,
    "4": handle_return_vehicle,
    "5": handle_logout,
}


# ---------------------------------------------------------------------------
# Loops
# ---------------------------------------------------------------------------


def rental_loop(service: ReservationService) -> None:
    """Run the rental menu until the user logs out."""
    while service.is_logged_in:
        print_rental_menu()
        choice = ask("")
        action = RENTAL_ACTIONS.get(choice)
        if action is None:
            print("Invalid option.")
            continue
        action(service)


def welcome_loop(service: ReservationService) -> None:
    """Run the welcome menu until the user picks Exit."""
    while True:
        print_welcome_menu()
        choice = ask("")
        if choice == "1":
            handle_sign_up(service)
        elif choice == "2":
            if handle_login(service):
                rental_loop(service)
        elif choice == "3":
            print("Goodbye!")
            return
        else:
            print("Invalid option.")


def main() -> int:
    cli_config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = _FlushingFileHandler(str(cli_config.LOG_FILE), mode="a")
    handler.setFormatter(StructuredFormatter())

    configure_logging(handler=handler)

    try:
        config = get_active_config(cli_config.CONFIG_PATH)
    except (ConfigError, FileNotFoundError, yaml.YAMLError) as exc:
        print(f"  ERROR: {exc}", file=sys.stderr)
        return 1

    # Re-apply level now that the config file is known
    logging.getLogger("rental_kernel").setLevel(cli_config.LOG_LEVEL or config.log_level)
    service = build_service(config)
    logger.info("interactive_cli_started", extra={"log_path": str(cli_config.LOG_FILE)})
    print(f"  Logging to: {cli_config.LOG_FILE}", file=sys.stderr)

    try:
        welcome_loop(service)
    except (EOFError, KeyboardInterrupt):
        print()
    logger.info("interactive_cli_stopped")
    return 0
