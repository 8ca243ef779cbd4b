from datetime import date
from functools import lru_cache

from app.core.config import settings
from app.services.notifier import Notifier, build_notifier


@lru_cache
def get_notifier() -> Notifier:
    """Email transport for the process, built once from settings."""
    return build_notifier(settings)


def get_operator_email() -> str:
    return settings.operator_email


def get_today() -> date:
    return settings.today()
