"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog_api.api import auth, posts, users
from blog_api.config import get_settings
from blog_api.exceptions import BlogAPIError, Unauthorized, ValidationFailed

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting blog API ({settings.environment})")
    yield


app = FastAPI(
    title="Blog API",
    description="Token-authenticated users and their blog posts",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def error_response(error: BlogAPIError) -> JSONResponse:
    content = {"error": error.message}
    if error.details:
        content["messages"] = error.details
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(error, Unauthorized) else None
    return JSONResponse(status_code=error.status_code, content=content, headers=headers)


@app.exception_handler(BlogAPIError)
async def handle_blog_api_error(request: Request, exc: BlogAPIError):
    """Map failure kinds to their status codes."""
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    """Report malformed request bodies and parameters as 422."""
    # Drop the rejected input so passwords never reach the log or the response
    errors = jsonable_encoder(
        [{key: value for key, value in error.items() if key != "input"} for error in exc.errors()]
    )
    logger.warning(f"Validation failed on {request.method} {request.url.path}: {errors}")
    return error_response(ValidationFailed(details=errors))


@app.exception_handler(Exception)
async def handle_internal_error(request: Request, exc: Exception):
    """Log unexpected failures and answer with an opaque 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(BlogAPIError())


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(posts.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
