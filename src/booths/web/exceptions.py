"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from booths.application.commands import SubmissionBlockedError
from booths.application.config import ConfigError
from booths.application.templates.manager import TemplateNotFoundError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Template not found: {exc.name}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(SubmissionBlockedError)
    async def submission_blocked_handler(
        request: Request, exc: SubmissionBlockedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Configuration cannot be submitted",
                "error_type": "submission_blocked",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        # Pydantic input values are not always JSON serializable
        details = [
            {key: value for key, value in detail.items() if key != "value"}
            for detail in exc.details
        ]
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": details,
            },
        )
