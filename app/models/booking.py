import datetime as dt
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

Subject = Literal["python", "java", "web", "math"]
Plan = Literal["starter", "focused", "quarterly", "not-sure"]
AgeGroup = Literal["kids", "teens"]

PAST_DATE_ERROR = "date_in_past"
PAST_DATE_MESSAGE = "Please select a date that is not in the past"

# age group -> (label, session time)
AGE_GROUP_SESSIONS: dict[str, tuple[str, str]] = {
    "kids": ("Kids (9-13)", "Saturdays at 11AM"),
    "teens": ("Teens (14+)", "Saturdays at 3PM"),
}


class _RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
        frozen=True,
    )


class ConsultationRequest(_RequestModel):
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    email: EmailStr
    subject: Subject
    plan: Plan
    message: str = Field(min_length=10)
    date: dt.date
    time: str = Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")

    @field_validator("date", mode="before")
    @classmethod
    def iso_date_string(cls, value: object) -> dt.date:
        # Only ISO text; numbers would otherwise parse as Unix timestamps
        if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError("date_type", "Date must be an ISO-8601 date string")
        try:
            return dt.date.fromisoformat(value.strip())
        except ValueError:
            raise PydanticCustomError("date_parsing", "Date must be an ISO-8601 date string") from None

    @field_validator("date")
    @classmethod
    def not_in_past(cls, value: dt.date, info: ValidationInfo) -> dt.date:
        # "today" comes from the validation context; without it there is nothing to compare to
        today = (info.context or {}).get("today")
        if today is not None and value < today:
            raise PydanticCustomError(PAST_DATE_ERROR, PAST_DATE_MESSAGE)
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class BootcampRequest(_RequestModel):
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    email: EmailStr
    age_group: AgeGroup
    parent_name: str = Field(min_length=2)
    parent_email: EmailStr
    parent_phone: str = Field(min_length=10)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def age_group_label(self) -> str:
        return AGE_GROUP_SESSIONS[self.age_group][0]

    @property
    def session_time(self) -> str:
        return AGE_GROUP_SESSIONS[self.age_group][1]


class Violation(BaseModel):
    """One rejected field, named as the client sent it."""

    field: str
    message: str
