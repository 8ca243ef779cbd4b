from pydantic import BaseModel, Field

from app.models.booking import Violation


class SubmissionResponse(BaseModel):
    success: bool
    message: str
    errors: list[Violation] = Field(default_factory=list)


class SlotsResponse(BaseModel):
    date: str  # YYYY-MM-DD
    weekend: bool
    slots: list[str]
    # Client's selection after re-checking it against this date; None when not offered
    time: str | None = None
    time_cleared: bool = False
