"""Domain errors for the deficiency tracker."""


class DeficiencyTrackerError(Exception):
    """Base class for errors surfaced to callers."""


class UnitMismatchError(DeficiencyTrackerError):
    """Raised when amounts with different units are combined or compared."""

    def __init__(
        self, expected_unit: str, actual_unit: str, nutrient: str | None = None
    ) -> None:
        self.nutrient = nutrient
        self.expected_unit = expected_unit
        self.actual_unit = actual_unit
        subject = f" for {nutrient}" if nutrient else ""
        super().__init__(
            f"Unit mismatch{subject}: expected {expected_unit!r}, got {actual_unit!r}"
        )


class StoreUnavailableError(DeficiencyTrackerError):
    """Raised when the intake log store cannot be read or written."""
