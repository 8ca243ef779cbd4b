"""Runs a submission from raw fields to a final result.

Operator alerts are load-bearing: if one fails, the submission fails.
The requester confirmation is best-effort and only attempted once the
operator alert has gone out; its failure is logged and attached to the
result as a warning while the caller still sees success.
"""

import logging
from datetime import date
from typing import Any

from app.core.errors import BookingValidationError
from app.models.submission import (
    SubmissionOutcome,
    SubmissionResult,
    SubmissionState,
    TemplateKind,
)
from app.services.notifier import Notifier
from app.services.validation_service import validate_bootcamp, validate_consultation

logger = logging.getLogger(__name__)

CONSULTATION_OK_MESSAGE = "Form submitted successfully"
CONSULTATION_FAILED_MESSAGE = "Failed to send notification email"
BOOTCAMP_OK_MESSAGE = "Registration successful"
BOOTCAMP_FAILED_MESSAGE = "Error processing registration"
VALIDATION_FAILED_MESSAGE = "Please correct the highlighted fields"


def _rejected(flow: str, exc: BookingValidationError) -> SubmissionResult:
    logger.info("%s submission %s -> %s: %s", flow, SubmissionState.RECEIVED, SubmissionState.FAILED, exc)
    return SubmissionResult(
        outcome=SubmissionOutcome.FAILED_VALIDATION,
        message=VALIDATION_FAILED_MESSAGE,
        violations=exc.violations,
    )


async def submit_consultation(
    payload: Any,
    notifier: Notifier,
    operator_email: str,
    today: date,
) -> SubmissionResult:
    try:
        request = validate_consultation(payload, today)
    except BookingValidationError as e:
        return _rejected("Consultation", e)

    logger.info(
        "Consultation submission %s: %s <%s> for %s %s",
        SubmissionState.VALIDATED,
        request.full_name,
        request.email,
        request.date.isoformat(),
        request.time,
    )

    logger.debug("Consultation submission %s: operator alert", SubmissionState.NOTIFYING)
    operator = await notifier.send(operator_email, TemplateKind.OPERATOR_CONSULTATION_ALERT, request)
    if not operator.ok:
        logger.error("Consultation submission %s: operator alert failed: %s", SubmissionState.FAILED, operator.error)
        return SubmissionResult(
            outcome=SubmissionOutcome.FAILED_NOTIFICATION,
            message=CONSULTATION_FAILED_MESSAGE,
        )

    requester = await notifier.send(str(request.email), TemplateKind.REQUESTER_CONSULTATION_CONFIRMATION, request)
    if not requester.ok:
        warning = f"Requester confirmation to {requester.recipient} failed: {requester.error}"
        logger.warning("Consultation submission %s with warning: %s", SubmissionState.COMPLETED, warning)
        return SubmissionResult(
            outcome=SubmissionOutcome.COMPLETED_WITH_WARNING,
            message=CONSULTATION_OK_MESSAGE,
            warnings=[warning],
        )

    logger.info("Consultation submission %s", SubmissionState.COMPLETED)
    return SubmissionResult(outcome=SubmissionOutcome.COMPLETED, message=CONSULTATION_OK_MESSAGE)


async def submit_bootcamp(payload: Any, notifier: Notifier, operator_email: str) -> SubmissionResult:
    """Validate an enrollment and alert the operator. The family gets no email from this flow."""
    try:
        request = validate_bootcamp(payload)
    except BookingValidationError as e:
        return _rejected("Bootcamp", e)

    logger.info(
        "Bootcamp submission %s: %s <%s>, %s",
        SubmissionState.VALIDATED,
        request.full_name,
        request.email,
        request.age_group,
    )
    operator = await notifier.send(operator_email, TemplateKind.OPERATOR_BOOTCAMP_ALERT, request)
    if not operator.ok:
        logger.error("Bootcamp submission %s: operator alert failed: %s", SubmissionState.FAILED, operator.error)
        return SubmissionResult(
            outcome=SubmissionOutcome.FAILED_NOTIFICATION,
            message=BOOTCAMP_FAILED_MESSAGE,
        )
    logger.info("Bootcamp submission %s", SubmissionState.COMPLETED)
    return SubmissionResult(outcome=SubmissionOutcome.COMPLETED, message=BOOTCAMP_OK_MESSAGE)
