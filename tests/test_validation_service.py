from __future__ import annotations

from datetime import timedelta

import pytest

from app.core.errors import BookingValidationError, SlotMismatchError
from app.models.booking import BootcampRequest, ConsultationRequest
from app.services.validation_service import (
    PAST_DATE_MESSAGE,
    validate_bootcamp,
    validate_consultation,
)
from conftest import SATURDAY, TODAY, TUESDAY, bootcamp_payload, consultation_payload


class TestConsultation:
    def test_valid_request_is_normalized(self) -> None:
        request = validate_consultation(
            consultation_payload(firstName="  Ada ", message="  I want to get better at recursion.  "),
            TODAY,
        )
        assert isinstance(request, ConsultationRequest)
        assert request.first_name == "Ada"
        assert request.full_name == "Ada Lovelace"
        assert request.date == SATURDAY
        assert request.time == "09:00"
        assert request.message == "I want to get better at recursion."

    def test_unknown_fields_are_ignored(self) -> None:
        request = validate_consultation(consultation_payload(referrer="newsletter"), TODAY)
        assert request.plan == "starter"

    def test_all_field_violations_are_reported_together(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_consultation(
                consultation_payload(
                    firstName="A",
                    email="not-an-email",
                    subject="cooking",
                    plan="",
                    message="short",
                ),
                TODAY,
            )
        assert exc_info.value.fields == ["firstName", "email", "subject", "plan", "message"]
        messages = {v.field: v.message for v in exc_info.value.violations}
        assert messages["firstName"] == "First name must be at least 2 characters"
        assert messages["email"] == "Please enter a valid email address"

    def test_empty_body_reports_every_field(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_consultation({}, TODAY)
        assert set(exc_info.value.fields) == {
            "firstName",
            "lastName",
            "email",
            "subject",
            "plan",
            "message",
            "date",
            "time",
        }

    def test_non_object_body_is_rejected(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_consultation(["not", "an", "object"], TODAY)
        assert exc_info.value.fields == ["body"]

    def test_malformed_time_is_a_time_violation(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_consultation(consultation_payload(time="9am"), TODAY)
        assert exc_info.value.fields == ["time"]

    def test_weekend_time_on_weekday_is_slot_mismatch(self) -> None:
        with pytest.raises(SlotMismatchError) as exc_info:
            validate_consultation(consultation_payload(date=TUESDAY.isoformat(), time="11:00"), TODAY)
        assert exc_info.value.fields == ["time"]
        assert exc_info.value.time == "11:00"
        assert "11:00" not in exc_info.value.offered

    def test_weekday_evening_time_on_weekend_is_slot_mismatch(self) -> None:
        with pytest.raises(SlotMismatchError):
            validate_consultation(consultation_payload(date=SATURDAY.isoformat(), time="20:00"), TODAY)

    def test_slot_mismatch_is_a_validation_error(self) -> None:
        assert issubclass(SlotMismatchError, BookingValidationError)

    def test_slot_check_waits_for_field_checks(self) -> None:
        # A field violation is reported instead of the date/time mismatch
        with pytest.raises(BookingValidationError) as exc_info:
            validate_consultation(
                consultation_payload(date=TUESDAY.isoformat(), time="11:00", lastName="L"),
                TODAY,
            )
        assert not isinstance(exc_info.value, SlotMismatchError)
        assert exc_info.value.fields == ["lastName"]

    @pytest.mark.parametrize("days_ago", [1, 2, 30, 365])
    def test_past_dates_are_rejected(self, days_ago: int) -> None:
        past = TODAY - timedelta(days=days_ago)
        time = "09:00" if past.weekday() >= 5 else "16:00"
        with pytest.raises(BookingValidationError) as exc_info:
            validate_consultation(consultation_payload(date=past.isoformat(), time=time), TODAY)
        assert exc_info.value.fields == ["date"]
        assert exc_info.value.violations[0].message == PAST_DATE_MESSAGE

    def test_today_is_accepted(self) -> None:
        request = validate_consultation(consultation_payload(date=TODAY.isoformat(), time="15:00"), TODAY)
        assert request.date == TODAY

    def test_past_date_is_reported_with_other_field_violations(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_consultation(
                consultation_payload(firstName="A", date=(TODAY - timedelta(days=2)).isoformat(), time="09:00"),
                TODAY,
            )
        assert exc_info.value.fields == ["firstName", "date"]
        messages = {v.field: v.message for v in exc_info.value.violations}
        assert messages["date"] == PAST_DATE_MESSAGE

    @pytest.mark.parametrize("value", [1792800000, 1792800000.0, "1792800000", True])
    def test_non_iso_date_is_rejected(self, value) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_consultation(consultation_payload(date=value, time="09:00"), TODAY)
        assert exc_info.value.fields == ["date"]
        assert exc_info.value.violations[0].message == "Please select a date"

    def test_iso_date_with_surrounding_spaces(self) -> None:
        request = validate_consultation(consultation_payload(date=f" {SATURDAY.isoformat()} "), TODAY)
        assert request.date == SATURDAY


class TestBootcamp:
    def test_valid_enrollment(self) -> None:
        request = validate_bootcamp(bootcamp_payload(ageGroup="teens"))
        assert isinstance(request, BootcampRequest)
        assert request.age_group_label == "Teens (14+)"
        assert request.session_time == "Saturdays at 3PM"

    def test_kids_session(self) -> None:
        request = validate_bootcamp(bootcamp_payload())
        assert request.age_group_label == "Kids (9-13)"
        assert request.session_time == "Saturdays at 11AM"

    def test_short_parent_phone_is_rejected(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_bootcamp(bootcamp_payload(parentPhone="555-1234"))
        assert exc_info.value.fields == ["parentPhone"]
        assert exc_info.value.violations[0].message == "Please enter a valid phone number"

    def test_unknown_age_group_and_bad_parent_email(self) -> None:
        with pytest.raises(BookingValidationError) as exc_info:
            validate_bootcamp(bootcamp_payload(ageGroup="adults", parentEmail="mary at home"))
        assert exc_info.value.fields == ["ageGroup", "parentEmail"]
