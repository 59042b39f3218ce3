"""Data models for the Open Trivia DB API."""

from .trivia import (
    Category,
    CategoryResponse,
    Question,
    QuestionDifficulty,
    QuestionRequest,
    QuestionResponse,
    QuestionType,
    ResponseCode,
    decode_model,
)

__all__ = [
    "Category",
    "CategoryResponse",
    "Question",
    "QuestionDifficulty",
    "QuestionRequest",
    "QuestionResponse",
    "QuestionType",
    "ResponseCode",
    "decode_model",
]
