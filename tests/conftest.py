"""Shared test fixtures and configuration for pytest."""

import json
import logging
from typing import Any, Callable

import httpx
import pytest

from trivia_client.client.base import CATEGORIES_PATH, QUESTIONS_PATH
from trivia_client.config.settings import get_settings


class FakeTriviaApi:
    """httpx.MockTransport handler that serves canned Open Trivia DB bodies."""

    def __init__(self, categories: Any, questions: Any):
        self.bodies = {CATEGORIES_PATH: categories, QUESTIONS_PATH: questions}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.bodies.get(request.url.path)
        if body is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(body, (str, bytes)):
            return httpx.Response(200, content=body)
        return httpx.Response(200, json=body)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test see a freshly loaded Settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def categories_payload() -> dict[str, Any]:
    """Create a sample categories response body."""
    return {
        "trivia_categories": [
            {"id": 9, "name": "General Knowledge"},
            {"id": 10, "name": "Entertainment: Books"},
            {"id": 22, "name": "Geography"},
        ]
    }


@pytest.fixture
def question_payload() -> dict[str, Any]:
    """Create a sample multiple choice question object."""
    return {
        "category": "Geography",
        "type": "multiple",
        "difficulty": "easy",
        "question": "What is the capital of France?",
        "correct_answer": "Paris",
        "incorrect_answers": ["London", "Berlin", "Madrid"],
    }


@pytest.fixture
def questions_payload(question_payload: dict[str, Any]) -> dict[str, Any]:
    """Create a sample questions response body."""
    return {
        "response_code": 0,
        "results": [
            question_payload,
            {
                "category": "Science: Computers",
                "type": "boolean",
                "difficulty": "hard",
                "question": "The first computer bug was an actual moth.",
                "correct_answer": "True",
                "incorrect_answers": ["False"],
            },
        ],
    }


@pytest.fixture
def trivia_api(
    categories_payload: dict[str, Any], questions_payload: dict[str, Any]
) -> FakeTriviaApi:
    """Create a fake API serving the sample payloads."""
    return FakeTriviaApi(categories_payload, questions_payload)


@pytest.fixture
def refuse_connection() -> Callable[[httpx.Request], httpx.Response]:
    """Create a handler that fails like a closed port."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    return handler


@pytest.fixture
def respond_with() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Create handlers returning a fixed status and raw body."""

    def factory(status_code: int = 200, body: str | dict = "") -> Callable:
        def handler(request: httpx.Request) -> httpx.Response:
            if isinstance(body, dict):
                return httpx.Response(status_code, content=json.dumps(body))
            return httpx.Response(status_code, content=body)

        return handler

    return factory


@pytest.fixture
def broken_gzip() -> Callable[[httpx.Request], httpx.Response]:
    """Create a handler whose body claims gzip but is not compressed."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip")

    return handler
