from enum import StrEnum

from pydantic import BaseModel, Field

from app.models.booking import Violation


class TemplateKind(StrEnum):
    OPERATOR_CONSULTATION_ALERT = "operator-consultation-alert"
    REQUESTER_CONSULTATION_CONFIRMATION = "requester-consultation-confirmation"
    OPERATOR_BOOTCAMP_ALERT = "operator-bootcamp-alert"


class SubmissionState(StrEnum):
    RECEIVED = "received"
    VALIDATED = "validated"
    NOTIFYING = "notifying"
    COMPLETED = "completed"
    FAILED = "failed"


class SubmissionOutcome(StrEnum):
    COMPLETED = "completed"
    COMPLETED_WITH_WARNING = "completed_with_warning"
    FAILED_VALIDATION = "failed_validation"
    FAILED_NOTIFICATION = "failed_notification"


class NotificationOutcome(BaseModel):
    recipient: str
    kind: TemplateKind
    ok: bool
    error: str | None = None


class SubmissionResult(BaseModel):
    outcome: SubmissionOutcome
    message: str
    violations: list[Violation] = Field(default_factory=list)
    # Best-effort notification failures; never surfaced to the client
    warnings: list[str] = Field(default_factory=list)

    @property
    def state(self) -> SubmissionState:
        if self.outcome in (SubmissionOutcome.COMPLETED, SubmissionOutcome.COMPLETED_WITH_WARNING):
            return SubmissionState.COMPLETED
        return SubmissionState.FAILED

    @property
    def succeeded(self) -> bool:
        return self.state is SubmissionState.COMPLETED
