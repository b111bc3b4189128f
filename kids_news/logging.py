"""Structured logging infrastructure.

Provides JSON-formatted logging for production and human-readable
logging for development, plus an ArticleLogger helper for article
generation events.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

# Structured fields copied from log records into JSON output
_EXTRA_FIELDS = ("topic", "stage", "duration", "paragraph", "image_status", "error_type")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        for field_name in _EXTRA_FIELDS:
            if hasattr(record, field_name):
                log_data[field_name] = getattr(record, field_name)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def use_json_logs() -> bool:
    """True unless LOG_FORMAT=text is set in the environment."""
    return os.getenv("LOG_FORMAT", "json").lower() != "text"


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class ArticleLogger:
    """Logger for article generation events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("article_generation")

    def generation_started(self, topic: str) -> None:
        self.logger.info(
            "Article generation started",
            extra={"topic": topic, "stage": "started"},
        )

    def stage_completed(self, topic: str, stage: str, duration: Optional[float] = None) -> None:
        extra = {"topic": topic, "stage": stage}
        if duration is not None:
            extra["duration"] = round(duration, 2)
        self.logger.info(f"Stage completed: {stage}", extra=extra)

    def image_outcome(
        self,
        topic: str,
        paragraph: int,
        image_status: str,
        error: Optional[Exception] = None,
    ) -> None:
        """Record how one paragraph's illustration turned out."""
        extra = {"topic": topic, "stage": "images", "paragraph": paragraph, "image_status": image_status}
        if error is not None:
            extra["error_type"] = type(error).__name__
            self.logger.error(
                f"Error generating image for paragraph {paragraph}: {error}",
                extra=extra,
            )
        elif image_status == "missing":
            self.logger.warning(f"No inline image data found for paragraph {paragraph}", extra=extra)
        else:
            self.logger.info(f"Illustrated paragraph {paragraph}", extra=extra)

    def generation_completed(self, topic: str, duration: float) -> None:
        self.logger.info(
            "Article generation completed",
            extra={"topic": topic, "stage": "completed", "duration": round(duration, 2)},
        )

    def generation_failed(self, topic: str, error: Exception, stage: Optional[str] = None) -> None:
        extra = {"topic": topic, "stage": stage or "failed", "error_type": type(error).__name__}
        self.logger.error(f"Article generation failed: {error}", extra=extra, exc_info=True)


# Global article logger instance
article_logger = ArticleLogger()
