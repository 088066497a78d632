"""CLI menus: welcome menu, rental menu, vehicle type picker."""

from rental_kernel.domain.category import AssetCategory

# Menu number -> category. Anything else is passed to the kernel as-is
# and rejected there as an invalid category.
VEHICLE_TYPE_CHOICES: dict[str, AssetCategory] = {
    "1": AssetCategory.CAR,
    "2": AssetCategory.MOTORCYCLE,
}


def print_welcome_menu():
    print()
    print("--- Welcome to Vehicle Rental System ---")
    print("1. Sign Up")
    print("2. Login")
    print("3. Exit")


def print_rental_menu():
    print()
    print("--- Vehicle Rental Menu ---")
    print("1. Add Vehicle")
    print("2. View Vehicles")
    print("3. Book Vehicle")
    print("4. Return Vehicle")
    print("5. Logout")


def print_vehicle_types():
    for number, category in VEHICLE_TYPE_CHOICES.items():
        print(f"{number}. {category.label}")
