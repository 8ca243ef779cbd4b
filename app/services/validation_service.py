import logging
from collections.abc import Mapping
from datetime import date
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.errors import BookingValidationError, SlotMismatchError
from app.models.booking import (
    PAST_DATE_ERROR,
    PAST_DATE_MESSAGE,
    BootcampRequest,
    ConsultationRequest,
    Violation,
)
from app.services.slot_service import slots_for

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Wording shown next to each form field
FIELD_MESSAGES: dict[str, str] = {
    "firstName": "First name must be at least 2 characters",
    "lastName": "Last name must be at least 2 characters",
    "email": "Please enter a valid email address",
    "subject": "Please select a subject",
    "plan": "Please select a plan",
    "message": "Please provide more details about your situation",
    "date": "Please select a date",
    "time": "Please select a time slot",
    "ageGroup": "Please select an age group",
    "parentName": "Parent/Guardian name must be at least 2 characters",
    "parentEmail": "Please enter a valid email address",
    "parentPhone": "Please enter a valid phone number",
}

BODY_FIELD = "body"


def _violations_from(exc: ValidationError) -> list[Violation]:
    """One violation per offending field, in the order pydantic reported them."""
    seen: set[str] = set()
    out: list[Violation] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else BODY_FIELD
        if field in seen:
            continue
        seen.add(field)
        if err.get("type") == PAST_DATE_ERROR:
            message = PAST_DATE_MESSAGE
        elif field == BODY_FIELD:
            message = "Request body must be a JSON object"
        else:
            message = FIELD_MESSAGES.get(field, err.get("msg", "Invalid value"))
        out.append(Violation(field=field, message=message))
    return out


def _parse(model: type[ModelT], payload: Any, context: dict[str, Any] | None = None) -> ModelT:
    if not isinstance(payload, Mapping):
        raise BookingValidationError([Violation(field=BODY_FIELD, message="Request body must be a JSON object")])
    try:
        return model.model_validate(dict(payload), context=context)
    except ValidationError as e:
        raise BookingValidationError(_violations_from(e)) from e


def validate_consultation(payload: Any, today: date) -> ConsultationRequest:
    """Check a consultation booking and return it normalized.

    Field checks, including a date before ``today``, are accumulated so the
    client can show every problem at once. Only when they all pass is the
    time checked against the slots offered on that date.

    Raises BookingValidationError, or SlotMismatchError for a time that the
    chosen date does not offer.
    """
    request = _parse(ConsultationRequest, payload, context={"today": today})
    offered = slots_for(request.date)
    if request.time not in offered:
        logger.debug("Time %s not offered on %s (offered: %s)", request.time, request.date, offered)
        raise SlotMismatchError(request.time, offered)
    return request


def validate_bootcamp(payload: Any) -> BootcampRequest:
    return _parse(BootcampRequest, payload)
