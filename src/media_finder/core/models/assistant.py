"""Assistant (LLM feature) data models."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ChatMessage(BaseModel):
    """One turn of a conversation about a title."""

    role: str = Field(..., description="Speaker, e.g. 'user' or 'assistant'")
    text: str = Field(..., description="Message text")


class QuizQuestion(BaseModel):
    """Multiple-choice trivia question."""

    question: str = Field(..., description="Question text")
    options: List[str] = Field(..., min_length=2, description="Answer options")
    correct_answer: int = Field(
        ..., ge=0, alias="correctAnswer", description="Index of the correct option"
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("correct_answer")
    @classmethod
    def validate_answer_index(cls, v: int, info: ValidationInfo) -> int:
        """Validate that the answer points at an option."""
        options = info.data.get("options")
        if options is not None and v >= len(options):
            raise ValueError(f"correct_answer {v} out of range for {len(options)} options")
        return v
