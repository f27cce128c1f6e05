from functools import lru_cache

from fastapi import Request

import code_reviewer.config as config
from code_reviewer.gemini import GeminiReviewer
from code_reviewer.service import ReviewService


@lru_cache
def get_settings():
    return config.Settings()


def build_review_service(settings: config.Settings) -> ReviewService:
    return ReviewService(GeminiReviewer.from_settings(settings))


def get_review_service(request: Request) -> ReviewService:
    """Return the service built at startup and stored on the application state."""
    return request.app.state.review_service
