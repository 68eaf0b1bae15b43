from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_analyzer.api.schemas import ErrorResponse
from resume_analyzer.logging.logger import Log
from resume_analyzer.processor.exceptions import (
    EmptyExtractionError,
    ExtractionFailureError,
    MalformedStructuredResultError,
    ModelUnavailableError,
    PipelineError,
    SizeExceededError,
    UnsupportedFormatError,
)

NO_FILE_MESSAGE = "No file uploaded"

# Client input and unusable documents are 4xx; model-side failures are 5xx.
STATUS_BY_ERROR: dict[type[PipelineError], int] = {
    UnsupportedFormatError: 400,
    SizeExceededError: 413,
    EmptyExtractionError: 400,
    ExtractionFailureError: 422,
    ModelUnavailableError: 503,
    MalformedStructuredResultError: 502,
}


def status_for(exc: PipelineError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 500


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    """Render a pipeline failure as ``{"error": ..., "details": ...}``."""
    return error_response(status_for(exc), exc.message, exc.details)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """The only form field is the upload, so any invalid form means no usable file."""
    Log.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    return error_response(400, NO_FILE_MESSAGE)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unexpected error handling {request.url.path}: {exc}")
    return error_response(500, PipelineError.default_message)
