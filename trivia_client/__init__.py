"""Typed blocking and async client for the Open Trivia DB API."""

from trivia_client.client import AsyncTriviaClient, TriviaClient
from trivia_client.errors import (
    ApiResponseError,
    DecodeError,
    HttpStatusError,
    TransportError,
    TriviaError,
    UnknownVariantError,
)
from trivia_client.models import (
    Category,
    CategoryResponse,
    Question,
    QuestionDifficulty,
    QuestionRequest,
    QuestionResponse,
    QuestionType,
    ResponseCode,
)

__version__ = "0.1.0"

__all__ = [
    "ApiResponseError",
    "AsyncTriviaClient",
    "Category",
    "CategoryResponse",
    "DecodeError",
    "HttpStatusError",
    "Question",
    "QuestionDifficulty",
    "QuestionRequest",
    "QuestionResponse",
    "QuestionType",
    "ResponseCode",
    "TransportError",
    "TriviaClient",
    "TriviaError",
    "UnknownVariantError",
]
