"""FastAPI server for SkimQ readable summaries"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skimq.api.models import ErrorResponse
from skimq.api.routes.health import router as health_router
from skimq.api.routes.summary import router as summary_router
from skimq.config import API_HOST, API_PORT, APP_ENV, APP_NAME, APP_VERSION
from skimq.observability.logging import get_logger
from skimq.observability.telemetry import counter
from skimq.utils.redaction import redact

# Load environment variables from .env file
load_dotenv()

logger = get_logger(__name__)

app = FastAPI(title=APP_NAME, version=APP_VERSION)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Validation error handler that only exposes field names to clients.

    Side Effects:
        - Logs field locations and error types (URL redacted)
        - Increments validation error counter
    """
    errors = exc.errors()
    # Field locations and error types only; "input" may carry the sender address
    logger.warning(
        "Validation error on %s: %s",
        redact(str(request.url)),
        [(err["loc"], err["type"]) for err in errors],
    )
    counter("api.validation_errors")

    body = ErrorResponse(
        detail="Invalid request format. Please check your request and try again.",
        error_count=len(errors),
        invalid_fields=[str(err["loc"][-1]) for err in errors],
    )
    return JSONResponse(status_code=422, content=body.model_dump())


# CORS: dashboard origins come from env; localhost is added in development only
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("SKIMQ_ALLOWED_ORIGINS", "").split(",")
    if origin.strip()
]

if APP_ENV == "development":
    ALLOWED_ORIGINS.extend(
        [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)

app.include_router(health_router)
app.include_router(summary_router)

logger.info("%s %s ready (env=%s)", APP_NAME, APP_VERSION, APP_ENV)


def main() -> None:
    """Run the API with uvicorn (console script: skimq-api)."""
    import uvicorn

    uvicorn.run("skimq.api.app:app", host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    main()
