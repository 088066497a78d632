"""Asset categories known to the kernel."""

from enum import Enum

from rental_kernel.exceptions import InvalidCategoryError


class AssetCategory(str, Enum):
    """Category of a rentable asset. Each category has exactly one pricing rule."""

    CAR = "car"
    MOTORCYCLE = "motorcycle"

    @property
    def label(self) -> str:
        """Display name, e.g. ``Car``."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: "AssetCategory | str") -> "AssetCategory":
        """
        Resolve a category from an enum member or its name/value.

        Matching is case-insensitive (``"Car"``, ``"CAR"`` and ``"car"`` all
        resolve to ``CAR``).

        Raises:
            InvalidCategoryError: if the value names no known category.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise InvalidCategoryError(value)
