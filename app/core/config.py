from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from backend project root so it loads regardless of cwd
_BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BACKEND_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Env
    env: str = "development"

    # Dates are validated against "today" in this zone; empty means server local time
    booking_timezone: str = ""

    # Email transport: "smtp", "resend" or "console". Empty picks from what is configured.
    email_backend: str = ""
    email_timeout_seconds: float = 20.0

    # SMTP (e.g. Gmail)
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""

    # Resend HTTP API
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com/emails"

    from_email: str = "onboarding@resend.dev"
    from_name: str = "CodeClarity"
    # Inbox that receives booking and enrollment alerts
    operator_email: str = "codeclarityteam@gmail.com"

    site_name: str = "CodeClarity"

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def smtp_enabled(self) -> bool:
        return bool(self.smtp_host and self.smtp_user and self.smtp_password and self.from_email)

    @property
    def resolved_email_backend(self) -> str:
        if self.email_backend:
            return self.email_backend.lower()
        if self.resend_api_key:
            return "resend"
        if self.smtp_enabled:
            return "smtp"
        return "console"

    def today(self) -> date:
        """Current calendar date in the booking time zone."""
        if self.booking_timezone:
            return datetime.now(ZoneInfo(self.booking_timezone)).date()
        return date.today()


settings = Settings()
