from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_notifier, get_operator_email, get_today
from app.api.responses import submission_response
from app.api.schemas.booking import SubmissionResponse
from app.services.notifier import Notifier
from app.services.submission_service import submit_consultation

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post(
    "",
    response_model=SubmissionResponse,
    responses={400: {"model": SubmissionResponse}, 500: {"model": SubmissionResponse}},
)
async def submit_consultation_request(
    payload: Any = Body(...),
    notifier: Notifier = Depends(get_notifier),
    operator_email: str = Depends(get_operator_email),
    today: date = Depends(get_today),
) -> JSONResponse:
    """Book a free consultation. Alerts the operator, then confirms to the requester."""
    result = await submit_consultation(payload, notifier, operator_email, today)
    return submission_response(result)
