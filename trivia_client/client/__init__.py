"""Blocking and non-blocking Open Trivia DB clients."""

from .asynchronous import AsyncTriviaClient
from .base import CATEGORIES_PATH, QUESTIONS_PATH, BaseTriviaClient
from .blocking import TriviaClient

__all__ = [
    "AsyncTriviaClient",
    "BaseTriviaClient",
    "CATEGORIES_PATH",
    "QUESTIONS_PATH",
    "TriviaClient",
]
