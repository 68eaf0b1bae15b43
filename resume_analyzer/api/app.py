"""
FastAPI application exposing the resume analysis pipeline.

Provides endpoints for:
- Analyzing an uploaded resume (PDF or plain text)
- Liveness probing
"""

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from resume_analyzer.api.errors import (
    NO_FILE_MESSAGE,
    error_response,
    pipeline_error_handler,
    request_validation_handler,
    unexpected_error_handler,
)
from resume_analyzer.api.schemas import AnalyzeResponse, ErrorResponse, HealthResponse
from resume_analyzer.config.settings import Settings
from resume_analyzer.logging.logger import Log
from resume_analyzer.processor.exceptions import PipelineError
from resume_analyzer.processor.processor import Processor, build_processor


def create_app(settings: Settings, processor: Processor | None = None) -> FastAPI:
    """Build the HTTP application around a configured processor."""
    app = FastAPI(
        title="Resume Analyzer API",
        description="Structured resume feedback from an uploaded PDF or text file",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.processor = processor if processor is not None else build_processor(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PipelineError, pipeline_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    @app.post(
        "/api/analyze",
        response_model=AnalyzeResponse,
        responses={
            400: {"model": ErrorResponse},
            413: {"model": ErrorResponse},
            422: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
            502: {"model": ErrorResponse},
            503: {"model": ErrorResponse},
        },
    )
    async def analyze_resume(request: Request, resume: UploadFile | None = File(None)):
        """Analyze an uploaded resume and return structured feedback."""
        if resume is None:
            return error_response(400, NO_FILE_MESSAGE)

        max_bytes = request.app.state.settings.max_upload_bytes
        try:
            # One byte past the limit is enough for the validator to reject it.
            file_bytes = await resume.read(max_bytes + 1)
        finally:
            await resume.close()

        file_name = resume.filename or ""
        Log.info(f"Received upload {file_name!r} ({len(file_bytes)} bytes)")

        analysis = await run_in_threadpool(
            request.app.state.processor.analyze,
            file_bytes,
            resume.content_type or "",
            file_name,
        )
        return AnalyzeResponse(analysis=analysis.to_dict())

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Liveness probe."""
        return HealthResponse()

    return app
