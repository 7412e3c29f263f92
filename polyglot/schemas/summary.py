from typing import Optional

from pydantic import Field, field_validator

from polyglot.constant import MAX_LANGUAGE_LENGTH, MAX_TEXT_LENGTH

from .base import RequestModel, ResultModel


class SummaryRequest(RequestModel):
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH, description="The text content to summarize.")
    language: Optional[str] = Field(
        None, min_length=1, max_length=MAX_LANGUAGE_LENGTH, description="The language of the text content."
    )

    @field_validator("text", "language")
    @classmethod
    def not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("must not be blank")
        return value


class SummaryResult(ResultModel):
    summary: str = Field(..., description="A concise summary of the text content.")
