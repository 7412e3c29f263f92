from pydantic import Field, field_validator

from polyglot.constant import MAX_LANGUAGE_LENGTH, MAX_TEXT_LENGTH

from .base import RequestModel, ResultModel


class TranslationRequest(RequestModel):
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH, description="The text to translate.")
    target_language: str = Field(
        ...,
        min_length=1,
        max_length=MAX_LANGUAGE_LENGTH,
        description="The language to translate into, as a name or a language tag such as 'es-ES'.",
    )

    @field_validator("text", "target_language")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class TranslationResult(ResultModel):
    """
    Defines the expected output structure for the translation flow.
    """

    translated_text: str = Field(..., description="The translated text.")
