from datetime import date

from app.core.config import settings
from app.models.booking import BootcampRequest, ConsultationRequest
from app.models.submission import TemplateKind


def _html_escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_display_date(d: date) -> str:
    """e.g. October 24th, 2026"""
    return f"{d.strftime('%B')} {_ordinal(d.day)}, {d.year}"


def _wrap(title: str, body: str, footer_title: str, footer_items: list[str], ordered: bool) -> str:
    tag = "ol" if ordered else "ul"
    items = "".join(f"<li>{item}</li>" for item in footer_items)
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #2563eb;">{title}</h2>
  {body}
  <div style="margin-top: 20px; padding: 15px; background: #f0f9ff; border-radius: 8px; border: 1px solid #bae6fd;">
    <h3 style="color: #0369a1; margin-top: 0;">{footer_title}</h3>
    <{tag} style="margin: 0; padding-left: 20px;">{items}</{tag}>
  </div>
</div>
"""


def _panel(rows: list[str], heading: str | None = None) -> str:
    head = f'<h3 style="color: #1e40af; margin-top: 0;">{heading}</h3>' if heading else ""
    return (
        '<div style="background: #f8fafc; padding: 20px; border-radius: 8px; margin: 20px 0;">'
        f"{head}{''.join(rows)}</div>"
    )


def _row(label: str, value: str) -> str:
    return f"<p><strong>{label}:</strong> {_html_escape(value)}</p>"


def build_operator_consultation_html(request: ConsultationRequest) -> str:
    rows = [
        _row("Name", request.full_name),
        _row("Email", str(request.email)),
        _row("Subject", request.subject),
        _row("Plan", request.plan),
        _row("Preferred Date", format_display_date(request.date)),
        _row("Preferred Time", request.time),
        "<p><strong>Message:</strong></p>",
        f'<p style="white-space: pre-wrap;">{_html_escape(request.message)}</p>',
    ]
    return _wrap(
        "New Booking Request",
        _panel(rows),
        "Next Steps",
        [
            "Review the booking request details above",
            "Confirm availability for the requested date and time",
            "Send a confirmation email to the student",
            "Add the session to your calendar",
        ],
        ordered=True,
    )


def build_requester_confirmation_html(request: ConsultationRequest) -> str:
    rows = [
        f"<p>Hi {_html_escape(request.first_name)},</p>",
        f"<p>Thank you for requesting a consultation with {_html_escape(settings.site_name)}. "
        "We've received your booking request for:</p>",
        _row("Date", format_display_date(request.date)),
        _row("Time", request.time),
        _row("Subject", request.subject),
        "<p>We'll review your request and get back to you within 24 hours to confirm your session.</p>",
        "<p>If you have any questions in the meantime, feel free to reply to this email.</p>",
    ]
    return _wrap(
        "Thank You for Your Interest!",
        _panel(rows),
        "What to Expect",
        [
            "Confirmation of your session time",
            "Meeting link (for online sessions)",
            "Brief questionnaire to help us prepare",
        ],
        ordered=False,
    )


def build_operator_bootcamp_html(request: BootcampRequest) -> str:
    student = _panel(
        [
            _row("Name", request.full_name),
            _row("Email", str(request.email)),
            _row("Age Group", request.age_group_label),
            _row("Session Time", request.session_time),
        ],
        heading="Student Information:",
    )
    parent = _panel(
        [
            _row("Name", request.parent_name),
            _row("Email", str(request.parent_email)),
            _row("Phone", request.parent_phone),
        ],
        heading="Parent/Guardian Information:",
    )
    return _wrap(
        "New Bootcamp Registration",
        student + parent,
        "Next Steps:",
        [
            "Add student to the appropriate class roster",
            "Send welcome package",
            "Schedule initial assessment call",
        ],
        ordered=True,
    )


def render_message(kind: TemplateKind, payload: ConsultationRequest | BootcampRequest) -> tuple[str, str]:
    """Return (subject, html) for a template kind. Raises TypeError on a payload of the wrong type."""
    if kind is TemplateKind.OPERATOR_CONSULTATION_ALERT and isinstance(payload, ConsultationRequest):
        return "New Booking Request", build_operator_consultation_html(payload)
    if kind is TemplateKind.REQUESTER_CONSULTATION_CONFIRMATION and isinstance(payload, ConsultationRequest):
        return f"Your {settings.site_name} Consultation Request", build_requester_confirmation_html(payload)
    if kind is TemplateKind.OPERATOR_BOOTCAMP_ALERT and isinstance(payload, BootcampRequest):
        return "New Bootcamp Registration", build_operator_bootcamp_html(payload)
    raise TypeError(f"Cannot render {kind.value} from {type(payload).__name__}")
