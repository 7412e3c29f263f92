from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from polyglot.constant import MAX_LANGUAGE_LENGTH, MAX_TEXT_LENGTH

from .base import RequestModel, ResultModel


class CorrectionLevel(str, Enum):
    """
    纠错强度。
    """

    GENTLE = "gentle"  # 只修正影响理解的错误
    STANDARD = "standard"  # 平衡
    STRICT = "strict"  # 全面、正式


class CorrectionRequest(RequestModel):
    """
    一次写作纠错请求。所有开关都会原样写进提示词，由模型自行遵守。
    """

    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH, description="The text to be corrected.")
    language: str = Field(..., min_length=1, max_length=MAX_LANGUAGE_LENGTH, description="The language of the text.")
    correction_level: CorrectionLevel = Field(CorrectionLevel.STANDARD, description="Correction intensity.")
    flag_grammar: bool = Field(True, description="Whether to correct grammar errors.")
    flag_spelling: bool = Field(True, description="Whether to correct spelling errors.")
    flag_punctuation: bool = Field(True, description="Whether to correct punctuation errors.")
    flag_style: bool = Field(False, description="Whether to suggest style improvements.")
    analyze_tone: bool = Field(False, description="Whether to analyze the tone and formality of the text.")
    explain_idioms: bool = Field(False, description="Whether to explain idioms and common phrases in the text.")
    suggest_structure_variations: bool = Field(False, description="Whether to suggest sentence structure variations.")

    @field_validator("text", "language")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class CorrectionSettings(RequestModel):
    """
    用户在设置面板中保存的偏好。

    默认值与界面一致：高级分析默认开启。每次纠错都显式地把它合并进请求。
    """

    correction_level: CorrectionLevel = CorrectionLevel.STANDARD
    flag_grammar: bool = True
    flag_spelling: bool = True
    flag_punctuation: bool = True
    flag_style: bool = False
    analyze_tone: bool = True
    explain_idioms: bool = True
    suggest_structure_variations: bool = True

    def as_payload(self, text: str, language: str) -> dict:
        payload = self.model_dump(mode="json", by_alias=True)
        payload.update(text=text, language=language)
        return payload


class VocabularyItem(ResultModel):
    term: str = Field(..., description="The key vocabulary word or phrase.")
    explanation: str = Field(..., description="A brief definition or example of usage for the term.")


class ToneAnalysis(ResultModel):
    detected_tone: str = Field(
        ...,
        description="The detected tone and formality of the original text, e.g. 'informal and conversational'.",
    )
    suggestions: Optional[str] = Field(None, description="Suggestions to improve or alter the tone and formality.")


class IdiomExplanation(ResultModel):
    idiom: str = Field(..., description="The identified idiom or common phrase.")
    meaning: str = Field(..., description="The meaning of the idiom or phrase.")
    example: Optional[str] = Field(None, description="An example sentence using the idiom correctly.")


class CorrectionResult(ResultModel):
    """
    纠错结果。除 corrected_text 外都是可选的，模型认为无内容时可以省略。
    """

    corrected_text: str = Field(..., description="The corrected text.")
    explanation: Optional[str] = Field(
        None, description="Explanation of the changes made, with short illustrative examples."
    )
    key_vocabulary: Optional[List[VocabularyItem]] = Field(
        None, description="3-5 key vocabulary words or phrases from the corrected text, with definitions or examples."
    )
    tone_analysis: Optional[ToneAnalysis] = Field(None, description="Analysis of the text's tone and formality.")
    idiom_explanations: Optional[List[IdiomExplanation]] = Field(
        None, description="Explanations for idioms or common phrases found in the text."
    )
    structure_suggestions: Optional[str] = Field(
        None, description="Suggestions for improving sentence structure, variety and flow."
    )
