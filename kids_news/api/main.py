"""FastAPI application for the Kids News Generator."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core.errors import ConfigurationError, FormatError, GenerationError, ServiceError
from ..logging import configure_logging, use_json_logs
from .routes import articles, images, chat

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    configure_logging(json_format=use_json_logs())
    logger.info("Kids News Generator API started")
    yield


app = FastAPI(
    title="Kids News Generator API",
    description="""
Generate funny, educational news articles for children aged 6-10.

## Features
- **Articles**: A multi-paragraph news article with a cartoon illustration per paragraph
- **Image Studio**: Generate a new image at 1K/2K/4K, or edit an uploaded one
- **Quick Chat**: Ask a question and get a short fun fact

## Errors
Every error responds with `{"detail": "<message>"}`:
- 400: invalid input (e.g. blank topic)
- 500: server is missing its Gemini API key
- 502: Gemini failed or returned unusable text
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _status_for(error: GenerationError) -> int:
    if isinstance(error, ConfigurationError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    if isinstance(error, (ServiceError, FormatError)):
        return status.HTTP_502_BAD_GATEWAY
    return status.HTTP_400_BAD_REQUEST


@app.exception_handler(GenerationError)
async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    """Report generation failures with their message verbatim."""
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


# Include routers
app.include_router(articles.router, prefix="/articles", tags=["Articles"])
app.include_router(images.router, prefix="/images", tags=["Image Studio"])
app.include_router(chat.router, prefix="/chat", tags=["Quick Chat"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
