"""
Shared fixtures: a fixed "today", valid request payloads and an in-memory
notifier that records every delivery attempt.

Tests never send real email.
"""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_notifier, get_operator_email, get_today
from app.core.errors import NotificationError
from app.main import app
from app.services.notifier import Notifier

TODAY = date(2026, 10, 19)  # a Monday
SATURDAY = date(2026, 10, 24)
TUESDAY = date(2026, 10, 20)
OPERATOR = "ops@codeclarity.io"
REQUESTER = "ada.lovelace@gmail.com"


class RecordingNotifier(Notifier):
    """Records (recipient, subject, html) per attempt; fails for recipients in ``fail_for``."""

    def __init__(self, fail_for: tuple[str, ...] = ()):
        self.fail_for = set(fail_for)
        self.attempts: list[tuple[str, str, str]] = []

    async def deliver(self, recipient: str, subject: str, html: str) -> None:
        self.attempts.append((recipient, subject, html))
        if recipient in self.fail_for:
            raise NotificationError(recipient, "mailbox unavailable")

    @property
    def recipients(self) -> list[str]:
        return [a[0] for a in self.attempts]


def consultation_payload(**overrides) -> dict:
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": REQUESTER,
        "subject": "python",
        "plan": "starter",
        "message": "I want to get better at recursion.",
        "date": SATURDAY.isoformat(),
        "time": "09:00",
    }
    payload.update(overrides)
    return payload


def bootcamp_payload(**overrides) -> dict:
    payload = {
        "firstName": "Tim",
        "lastName": "Berners",
        "email": "tim@gmail.com",
        "ageGroup": "kids",
        "parentName": "Mary Lee",
        "parentEmail": "mary@gmail.com",
        "parentPhone": "555-123-4567",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def client(notifier: RecordingNotifier):
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_operator_email] = lambda: OPERATOR
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
