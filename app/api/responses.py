from fastapi import status
from fastapi.responses import JSONResponse

from app.api.schemas.booking import SubmissionResponse
from app.models.submission import SubmissionOutcome, SubmissionResult

_STATUS_BY_OUTCOME = {
    SubmissionOutcome.COMPLETED: status.HTTP_200_OK,
    SubmissionOutcome.COMPLETED_WITH_WARNING: status.HTTP_200_OK,
    SubmissionOutcome.FAILED_VALIDATION: status.HTTP_400_BAD_REQUEST,
    SubmissionOutcome.FAILED_NOTIFICATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def submission_response(result: SubmissionResult) -> JSONResponse:
    """Map a submission result onto exactly one of OK / client error / server error."""
    body = SubmissionResponse(
        success=result.succeeded,
        message=result.message,
        errors=result.violations,
    )
    return JSONResponse(status_code=_STATUS_BY_OUTCOME[result.outcome], content=body.model_dump(mode="json"))
