from app.models.booking import AGE_GROUP_SESSIONS, BootcampRequest, ConsultationRequest, Violation
from app.models.submission import (
    NotificationOutcome,
    SubmissionOutcome,
    SubmissionResult,
    SubmissionState,
    TemplateKind,
)

__all__ = [
    "AGE_GROUP_SESSIONS",
    "BootcampRequest",
    "ConsultationRequest",
    "Violation",
    "NotificationOutcome",
    "SubmissionOutcome",
    "SubmissionResult",
    "SubmissionState",
    "TemplateKind",
]
