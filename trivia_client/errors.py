"""Exceptions raised by the trivia client."""

from collections.abc import Iterable


class TriviaError(Exception):
    """Base class for every error raised by trivia_client."""


class TransportError(TriviaError):
    """The API could not be reached (DNS, connection, timeout)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class HttpStatusError(TransportError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"HTTP {status_code} from {url}", url=url)
        self.status_code = status_code


class DecodeError(TriviaError):
    """The response body is not valid JSON or does not match the expected shape."""


class UnknownVariantError(DecodeError):
    """An enum-like field holds a value outside its closed set."""

    def __init__(self, field: str, value: object, allowed: Iterable[str]):
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Unknown value {value!r} for '{field}' "
            f"(expected one of: {', '.join(self.allowed)})"
        )


class ApiResponseError(TriviaError):
    """The API reported a non-zero response_code."""

    def __init__(self, response_code: int, description: str):
        super().__init__(f"API response code {response_code}: {description}")
        self.response_code = response_code
        self.description = description
