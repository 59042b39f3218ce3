"""Tests for the blocking client."""

import httpx
import pytest

from trivia_client.client import blocking
from trivia_client.client.blocking import TriviaClient
from trivia_client.errors import DecodeError, HttpStatusError, TransportError
from trivia_client.models.trivia import QuestionDifficulty, QuestionRequest


def make_client(handler) -> TriviaClient:
    return TriviaClient(base_url="https://trivia.test", transport=httpx.MockTransport(handler))


class TestFetchCategories:
    """Test TriviaClient.fetch_categories."""

    def test_returns_decoded_categories(self, trivia_api):
        """Test a successful categories fetch."""
        response = make_client(trivia_api).fetch_categories()

        assert [c.name for c in response.trivia_categories] == [
            "General Knowledge",
            "Entertainment: Books",
            "Geography",
        ]

    def test_sends_get_without_params(self, trivia_api):
        """Test that the categories endpoint is called with no query."""
        make_client(trivia_api).fetch_categories()

        request = trivia_api.requests[0]
        assert request.method == "GET"
        assert str(request.url) == "https://trivia.test/api_category.php"

    def test_connection_refused_is_transport_error(self, refuse_connection):
        """Test that a refused connection is not reported as a decode error."""
        with pytest.raises(TransportError) as exc_info:
            make_client(refuse_connection).fetch_categories()

        assert not isinstance(exc_info.value, HttpStatusError)
        assert exc_info.value.url == "https://trivia.test/api_category.php"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout_is_transport_error(self):
        """Test that a read timeout is a transport failure."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransportError):
            make_client(handler).fetch_categories()

    def test_server_error_is_http_status_error(self, respond_with):
        """Test that a 5xx response raises HttpStatusError."""
        with pytest.raises(HttpStatusError) as exc_info:
            make_client(respond_with(503, "Service Unavailable")).fetch_categories()

        assert exc_info.value.status_code == 503

    def test_broken_content_encoding_is_decode_error(self, broken_gzip):
        """Test that an undecompressable body is a DecodeError, not a raw httpx error."""
        with pytest.raises(DecodeError) as exc_info:
            make_client(broken_gzip).fetch_categories()

        assert isinstance(exc_info.value.__cause__, httpx.DecodingError)

    def test_malformed_body_is_decode_error(self, respond_with):
        """Test that an unexpected JSON shape raises DecodeError."""
        with pytest.raises(DecodeError):
            make_client(respond_with(200, {"categories": []})).fetch_categories()


class TestFetchQuestions:
    """Test TriviaClient.fetch_questions."""

    def test_returns_typed_questions(self, trivia_api):
        """Test that questions are fully decoded, not returned as raw text."""
        response = make_client(trivia_api).fetch_questions(QuestionRequest(amount=2))

        assert response.response_code == 0
        assert response.results[0].difficulty == QuestionDifficulty.EASY
        assert response.results[1].correct_answer == "True"

    def test_sends_query_parameters(self, trivia_api):
        """Test that the request is serialized into the query string."""
        request = QuestionRequest(amount=10, category=9, difficulty=QuestionDifficulty.HARD)
        make_client(trivia_api).fetch_questions(request)

        sent = trivia_api.requests[0]
        assert sent.url.path == "/api.php"
        assert dict(sent.url.params) == {"amount": "10", "category": "9", "difficulty": "hard"}

    def test_connection_refused_is_transport_error(self, refuse_connection):
        """Test that a refused connection surfaces as TransportError."""
        with pytest.raises(TransportError):
            make_client(refuse_connection).fetch_questions(QuestionRequest(amount=1))

    def test_not_found_is_http_status_error(self, respond_with):
        """Test that a 404 raises HttpStatusError."""
        with pytest.raises(HttpStatusError) as exc_info:
            make_client(respond_with(404, "")).fetch_questions(QuestionRequest(amount=1))

        assert exc_info.value.status_code == 404

    def test_api_failure_code_is_returned(self, respond_with):
        """Test that a non-zero response_code is left for the caller."""
        client = make_client(respond_with(200, {"response_code": 1, "results": []}))
        response = client.fetch_questions(QuestionRequest(amount=50))

        assert not response.ok


class TestModuleFunctions:
    """Test the settings-driven convenience functions."""

    def test_fetch_categories_uses_settings(self, monkeypatch, trivia_api):
        """Test that the base URL comes from the environment."""
        monkeypatch.setenv("TRIVIA_BASE_URL", "https://mirror.test")
        monkeypatch.setattr(
            TriviaClient,
            "from_settings",
            classmethod(
                lambda cls, settings: cls(
                    base_url=settings.base_url,
                    timeout=settings.timeout_seconds,
                    transport=httpx.MockTransport(trivia_api),
                )
            ),
        )

        response = blocking.fetch_categories()

        assert len(response.trivia_categories) == 3
        assert trivia_api.requests[0].url.host == "mirror.test"
