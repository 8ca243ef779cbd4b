from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_notifier, get_operator_email
from app.api.responses import submission_response
from app.api.schemas.booking import SubmissionResponse
from app.services.notifier import Notifier
from app.services.submission_service import submit_bootcamp

router = APIRouter(prefix="/bootcamp", tags=["bootcamp"])


@router.post(
    "",
    response_model=SubmissionResponse,
    responses={400: {"model": SubmissionResponse}, 500: {"model": SubmissionResponse}},
)
async def enroll_in_bootcamp(
    payload: Any = Body(...),
    notifier: Notifier = Depends(get_notifier),
    operator_email: str = Depends(get_operator_email),
) -> JSONResponse:
    result = await submit_bootcamp(payload, notifier, operator_email)
    return submission_response(result)
