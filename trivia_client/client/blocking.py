"""Blocking client built on httpx.Client."""

import logging

import httpx

from trivia_client.client.base import (
    CATEGORIES_PATH,
    QUESTIONS_PATH,
    BaseTriviaClient,
    translate_errors,
)
from trivia_client.config.settings import Settings, get_settings
from trivia_client.models.trivia import CategoryResponse, QuestionRequest, QuestionResponse

logger = logging.getLogger(__name__)


class TriviaClient(BaseTriviaClient):
    """Fetches categories and questions, blocking the calling thread."""

    def _get(self, path: str, params: dict[str, str] | None = None) -> bytes:
        url = self.url_for(path)
        logger.debug("GET %s params=%s", url, params or {})
        with translate_errors(url):
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(url, params=params)
                response.raise_for_status()
                return response.content

    def fetch_categories(self) -> CategoryResponse:
        """
        Fetch every trivia category.

        Returns:
            The decoded category list

        Raises:
            TransportError: If the API cannot be reached or answers non-2xx
            DecodeError: If the body is not a valid categories response
        """
        return CategoryResponse.from_json(self._get(CATEGORIES_PATH))

    def fetch_questions(self, request: QuestionRequest) -> QuestionResponse:
        """
        Fetch questions matching a request.

        The response_code is not checked; call raise_for_response_code()
        on the result to treat API-level failures as errors.
        """
        return QuestionResponse.from_json(self._get(QUESTIONS_PATH, request.to_query()))


def fetch_categories(settings: Settings | None = None) -> CategoryResponse:
    """Fetch categories with a client built from settings."""
    return TriviaClient.from_settings(settings or get_settings()).fetch_categories()


def fetch_questions(
    request: QuestionRequest, settings: Settings | None = None
) -> QuestionResponse:
    """Fetch questions with a client built from settings."""
    return TriviaClient.from_settings(settings or get_settings()).fetch_questions(request)
