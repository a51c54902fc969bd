"""Domain errors raised by application services."""

from uuid import UUID


class RecompTrackerError(Exception):
    """Base error for the recomp tracker."""


class ProfileNotFoundError(RecompTrackerError):
    """Raised when a user has no saved profile."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"No profile for user {user_id}")
        self.user_id = user_id


class FoodNotFoundError(RecompTrackerError):
    """Raised when a food name is not in the merged catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown food: {name}")
        self.name = name


class EntryNotFoundError(RecompTrackerError):
    """Raised when a log entry does not exist for the user."""

    def __init__(self, entry_id: UUID) -> None:
        super().__init__(f"Log entry not found: {entry_id}")
        self.entry_id = entry_id


class InvalidUnitError(RecompTrackerError):
    """Raised when a quantity is entered in a unit the food is not measured in."""

    def __init__(self, name: str, unit: str) -> None:
        super().__init__(f"{name} cannot be logged in {unit}")
        self.name = name
        self.unit = unit
