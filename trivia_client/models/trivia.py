"""Pydantic models mirroring the Open Trivia DB wire format."""

from collections.abc import Mapping
from enum import Enum, IntEnum
from typing import TypeVar

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError

from trivia_client.errors import ApiResponseError, DecodeError, UnknownVariantError

ModelT = TypeVar("ModelT", bound=BaseModel)


class QuestionType(str, Enum):
    """Question answer formats."""

    MULTIPLE = "multiple"
    BOOLEAN = "boolean"


class QuestionDifficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ResponseCode(IntEnum):
    """Status codes carried in the body of a questions response."""

    SUCCESS = 0
    NO_RESULTS = 1
    INVALID_PARAMETER = 2
    TOKEN_NOT_FOUND = 3
    TOKEN_EMPTY = 4
    RATE_LIMIT = 5


RESPONSE_CODE_DESCRIPTIONS = {
    ResponseCode.SUCCESS: "Returned results successfully",
    ResponseCode.NO_RESULTS: "Not enough questions for the query",
    ResponseCode.INVALID_PARAMETER: "Invalid parameter in the query",
    ResponseCode.TOKEN_NOT_FOUND: "Session token does not exist",
    ResponseCode.TOKEN_EMPTY: "Session token has returned all possible questions",
    ResponseCode.RATE_LIMIT: "Too many requests, only one request per 5 seconds",
}

# Fields decoded from a closed set of strings, keyed by wire name
VARIANT_FIELDS: dict[str, type[Enum]] = {
    "type": QuestionType,
    "difficulty": QuestionDifficulty,
}


class Category(BaseModel):
    """A trivia category."""

    id: StrictInt = Field(..., ge=0, description="Category identifier used in queries")
    name: StrictStr = Field(..., description="Display name")

    model_config = {"frozen": True}


class CategoryResponse(BaseModel):
    """Body of GET /api_category.php."""

    trivia_categories: list[Category] = Field(
        ...,
        description="All categories known to the API",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "trivia_categories": [{"id": 9, "name": "General Knowledge"}],
            }
        },
    }

    def duplicate_ids(self) -> list[int]:
        """Category ids that appear more than once, in first-seen order."""
        seen: set[int] = set()
        duplicates: list[int] = []
        for category in self.trivia_categories:
            if category.id in seen and category.id not in duplicates:
                duplicates.append(category.id)
            seen.add(category.id)
        return duplicates

    @classmethod
    def from_json(cls, data: str | bytes) -> "CategoryResponse":
        """Decode a categories response body."""
        return decode_model(cls, data)


class QuestionRequest(BaseModel):
    """Query parameters for GET /api.php."""

    amount: int = Field(
        ...,
        ge=1,
        le=50,
        description="Number of questions to fetch",
    )
    category: int | None = Field(None, ge=1, description="Restrict to one category id")
    difficulty: QuestionDifficulty | None = Field(None, description="Restrict difficulty")
    type: QuestionType | None = Field(None, description="Restrict question type")

    model_config = {
        "frozen": True,
        "json_schema_extra": {"example": {"amount": 10, "difficulty": "easy"}},
    }

    def to_query(self) -> dict[str, str]:
        """Serialize into URL query parameters, omitting unset filters."""
        return {
            key: str(value)
            for key, value in self.model_dump(mode="json", exclude_none=True).items()
        }

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "QuestionRequest":
        """Parse URL query parameters back into a request."""
        return cls.model_validate(dict(params))


class Question(BaseModel):
    """A single trivia question as returned by the API."""

    category: StrictStr = Field(..., description="Category display name")
    type: QuestionType = Field(..., description="Answer format")
    difficulty: QuestionDifficulty = Field(..., description="Difficulty level")
    question: StrictStr = Field(..., description="Question text")
    correct_answer: StrictStr = Field(..., description="The correct answer text")
    incorrect_answers: list[StrictStr] = Field(
        ...,
        description="Wrong answer texts, in API order",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "category": "Geography",
                "type": "multiple",
                "difficulty": "easy",
                "question": "What is the capital of France?",
                "correct_answer": "Paris",
                "incorrect_answers": ["London", "Berlin", "Madrid"],
            }
        },
    }

    @property
    def answers(self) -> list[str]:
        """All answer texts, correct answer first."""
        return [self.correct_answer, *self.incorrect_answers]

    def is_correct(self, answer: str) -> bool:
        return answer == self.correct_answer

    @property
    def has_conflicting_answers(self) -> bool:
        """True if the correct answer is also listed as incorrect."""
        return self.correct_answer in self.incorrect_answers


class QuestionResponse(BaseModel):
    """Body of GET /api.php."""

    response_code: StrictInt = Field(..., description="API status, 0 on success")
    results: list[Question] = Field(..., description="Returned questions")

    model_config = {"frozen": True}

    @property
    def status(self) -> ResponseCode | None:
        """The named response code, or None if the API sent an unknown one."""
        try:
            return ResponseCode(self.response_code)
        except ValueError:
            return None

    @property
    def ok(self) -> bool:
        return self.response_code == ResponseCode.SUCCESS

    def raise_for_response_code(self) -> None:
        """Raise ApiResponseError unless the API reported success."""
        if self.ok:
            return
        status = self.status
        description = (
            RESPONSE_CODE_DESCRIPTIONS[status] if status is not None else "Unknown response code"
        )
        raise ApiResponseError(self.response_code, description)

    @classmethod
    def from_json(cls, data: str | bytes) -> "QuestionResponse":
        """Decode a questions response body."""
        return decode_model(cls, data)


def decode_model(model: type[ModelT], data: str | bytes) -> ModelT:
    """
    Validate JSON text against a model, translating pydantic errors.

    Args:
        model: The pydantic model to decode into
        data: Raw JSON text or bytes

    Returns:
        The decoded model instance

    Raises:
        UnknownVariantError: If a type/difficulty field holds an unknown string
        DecodeError: For invalid JSON or any other shape mismatch
    """
    try:
        return model.model_validate_json(data)
    except ValidationError as exc:
        for error in exc.errors():
            field = error["loc"][-1] if error["loc"] else None
            if (
                error["type"] == "enum"
                and field in VARIANT_FIELDS
                and isinstance(error["input"], str)
            ):
                allowed = [member.value for member in VARIANT_FIELDS[field]]
                raise UnknownVariantError(field, error["input"], allowed) from exc

        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise DecodeError(
            f"Invalid {model.__name__} payload at {location}: {first['msg']}"
        ) from exc
