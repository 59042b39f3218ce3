"""Non-blocking client built on httpx.AsyncClient."""

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


class AsyncTriviaClient(BaseTriviaClient):
    """Fetches categories and questions, suspending at network I/O."""

    async def _get(self, path: str, params: dict[str, str] | None = None) -> bytes:
        url = self.url_for(path)
        logger.debug("GET %s params=%s", url, params or {})
        with translate_errors(url):
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.content

    async def fetch_categories(self) -> CategoryResponse:
        """Fetch every trivia category."""
        return CategoryResponse.from_json(await self._get(CATEGORIES_PATH))

    async def fetch_questions(self, request: QuestionRequest) -> QuestionResponse:
        """Fetch questions matching a request; response_code is left to the caller."""
        return QuestionResponse.from_json(
            await self._get(QUESTIONS_PATH, request.to_query())
        )


async def fetch_categories(settings: Settings | None = None) -> CategoryResponse:
    """Fetch categories with a client built from settings."""
    client = AsyncTriviaClient.from_settings(settings or get_settings())
    return await client.fetch_categories()


async def fetch_questions(
    request: QuestionRequest, settings: Settings | None = None
) -> QuestionResponse:
    """Fetch questions with a client built from settings."""
    client = AsyncTriviaClient.from_settings(settings or get_settings())
    return await client.fetch_questions(request)
