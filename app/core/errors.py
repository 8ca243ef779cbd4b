from collections.abc import Iterable

from app.models.booking import Violation


class BookingValidationError(Exception):
    """Submitted fields were rejected. Carries every violation found, never empty."""

    def __init__(self, violations: Iterable[Violation]):
        self.violations = list(violations)
        if not self.violations:
            raise ValueError("BookingValidationError requires at least one violation")
        super().__init__("; ".join(f"{v.field}: {v.message}" for v in self.violations))

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.violations]


class SlotMismatchError(BookingValidationError):
    """The chosen time is not offered on the chosen date."""

    def __init__(self, time: str, offered: list[str]):
        self.time = time
        self.offered = offered
        super().__init__([Violation(field="time", message="Please select an available time slot for this date")])


class NotificationError(Exception):
    """An email transport failed to deliver a message."""

    def __init__(self, recipient: str, reason: str):
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Failed to notify {recipient}: {reason}")
