import logging
from typing import Any, Mapping, Optional, Protocol

from code_reviewer.errors import EmptyReviewError, InvalidCodeError, ReviewFailedError


class ContentGenerator(Protocol):
    async def generate_content(self, prompt: str) -> Optional[str]: ...


class ReviewService:
    """Validates a review request, calls the model adapter and checks its answer."""

    def __init__(self, generator: ContentGenerator):
        self.generator = generator

    async def get_review(self, payload: Mapping[str, Any]) -> str:
        code = payload.get("code") if isinstance(payload, Mapping) else None

        if not isinstance(code, str) or not code.strip():
            raise InvalidCodeError()

        try:
            review = await self.generator.generate_content(code)
        except Exception as e:
            logging.exception(f"Error in get_review: {e}")
            raise ReviewFailedError() from e

        if review is None:
            logging.warning("Review generator returned no result.")
            raise EmptyReviewError()

        return review
