import logging
import os

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import bootcamp, contact, slots
from app.api.schemas.booking import SubmissionResponse
from app.core.config import settings, _ENV_FILE
from app.models.booking import Violation

if os.getenv("ENV") != "production":
    logging.basicConfig(level=logging.DEBUG)
else:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
    )
logger = logging.getLogger(__name__)


app = FastAPI(
    title="CodeClarity Booking API",
    description="Consultation booking and bootcamp enrollment intake",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(contact.router, prefix="/api")
app.include_router(bootcamp.router, prefix="/api")
app.include_router(slots.router, prefix="/api")


def _cors_headers(origin: str | None) -> dict[str, str]:
    """Add CORS headers to error responses so the browser doesn't block them."""
    headers = {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }
    if origin and origin in settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = origin
    elif settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = settings.cors_origins_list[0]
    return headers


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Unparseable bodies and bad query params get the same shape as field violations."""
    violations: list[Violation] = []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            violations.append(Violation(field="body", message="Request body must be valid JSON"))
            continue
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query")]
        violations.append(Violation(field=".".join(loc) or "body", message=err.get("msg", "Invalid request")))
    body = SubmissionResponse(success=False, message="Invalid request", errors=violations)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(mode="json"),
        headers=_cors_headers(request.headers.get("origin")),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a JSON error; include CORS so 500 responses are not blocked by browser."""
    origin = request.headers.get("origin")
    headers = _cors_headers(origin)
    if isinstance(exc, HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.detail},
            headers=headers,
        )
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Something went wrong. Please try again."},
        headers=headers,
    )


@app.on_event("startup")
def startup_log() -> None:
    logger.info("Loading .env from: %s (exists: %s)", _ENV_FILE, _ENV_FILE.exists())
    logger.info("Email backend: %s, operator inbox: %s", settings.resolved_email_backend, settings.operator_email)
    if settings.resolved_email_backend == "console":
        logger.warning(
            "Email delivery NOT configured; messages are only logged. Set RESEND_API_KEY or SMTP_* in %s",
            _ENV_FILE,
        )
    if settings.booking_timezone:
        logger.info("Booking dates checked against %s", settings.booking_timezone)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
