import pytest
from pydantic import ValidationError

from polyglot.constant import MAX_TEXT_LENGTH
from polyglot.schemas import (
    CorrectionLevel,
    CorrectionRequest,
    CorrectionResult,
    CorrectionSettings,
    ErrorKind,
    FieldError,
    FlowResult,
    PipelineError,
    SummaryRequest,
    TranslationRequest,
)


class TestCorrectionRequest:
    def test_defaults(self):
        request = CorrectionRequest.model_validate({"text": "Hi", "language": "English"})
        assert request.correction_level == CorrectionLevel.STANDARD
        assert request.flag_grammar is True
        assert request.flag_spelling is True
        assert request.flag_punctuation is True
        assert request.flag_style is False
        assert request.analyze_tone is False
        assert request.explain_idioms is False
        assert request.suggest_structure_variations is False

    def test_wire_and_python_names_are_accepted(self):
        wire = CorrectionRequest.model_validate({"text": "Hi", "language": "English", "flagStyle": True})
        python = CorrectionRequest.model_validate({"text": "Hi", "language": "English", "flag_style": True})
        assert wire == python

    def test_text_is_bounded(self):
        with pytest.raises(ValidationError) as exc_info:
            CorrectionRequest(text="a" * (MAX_TEXT_LENGTH + 1), language="English")
        assert exc_info.value.errors()[0]["type"] == "string_too_long"

    def test_blank_language_is_rejected(self):
        with pytest.raises(ValidationError):
            CorrectionRequest(text="Hi", language="  ")


class TestCorrectionSettings:
    def test_payload_carries_every_setting(self):
        payload = CorrectionSettings(flag_style=True).as_payload("Hola amigo", "Spanish")
        assert payload == {
            "text": "Hola amigo",
            "language": "Spanish",
            "correctionLevel": "standard",
            "flagGrammar": True,
            "flagSpelling": True,
            "flagPunctuation": True,
            "flagStyle": True,
            "analyzeTone": True,
            "explainIdioms": True,
            "suggestStructureVariations": True,
        }
        request = CorrectionRequest.model_validate(payload)
        assert request.flag_style is True
        assert request.analyze_tone is True


class TestOtherRequests:
    def test_translation_request_accepts_language_tag(self):
        request = TranslationRequest.model_validate({"text": "Hello", "targetLanguage": "es-ES"})
        assert request.target_language == "es-ES"

    def test_translation_request_requires_target(self):
        with pytest.raises(ValidationError):
            TranslationRequest.model_validate({"text": "Hello"})

    def test_summary_language_is_optional(self):
        assert SummaryRequest.model_validate({"text": "Hello"}).language is None

    @pytest.mark.parametrize("language", ["", "   "])
    def test_summary_blank_language_is_rejected(self, language):
        with pytest.raises(ValidationError) as exc_info:
            SummaryRequest.model_validate({"text": "Hello", "language": language})
        assert exc_info.value.errors()[0]["loc"] == ("language",)


class TestCorrectionResult:
    def test_extra_keys_are_ignored(self):
        result = CorrectionResult.model_validate({"correctedText": "Hi.", "confidence": 0.9})
        assert result.corrected_text == "Hi."
        assert "confidence" not in result.model_dump(by_alias=True)

    def test_result_is_immutable(self):
        result = CorrectionResult(corrected_text="Hi.")
        with pytest.raises(ValidationError):
            result.corrected_text = "Bye."

    def test_nested_items_are_validated(self):
        with pytest.raises(ValidationError):
            CorrectionResult.model_validate({"correctedText": "Hi.", "idiomExplanations": [{"idiom": "break a leg"}]})


class TestFlowResult:
    def test_retryable_kinds(self):
        assert ErrorKind.UPSTREAM_FAILURE.retryable is True
        assert ErrorKind.EMPTY_RESPONSE.retryable is True
        assert ErrorKind.INVALID_INPUT.retryable is False
        assert ErrorKind.INVALID_OUTPUT.retryable is False

    def test_ok_and_fail(self):
        ok = FlowResult.ok(CorrectionResult(corrected_text="Hi."))
        assert ok.success is True
        assert ok.error is None
        assert ok.model_dump(mode="json")["content"]["corrected_text"] == "Hi."

        failed = FlowResult.fail(ErrorKind.EMPTY_RESPONSE, "nothing")
        assert failed.success is False
        assert failed.content is None
        assert failed.error.message == "nothing"
        assert failed.error.field_errors == []

    @pytest.mark.parametrize(
        "fields",
        [
            {"success": True},
            {"success": False},
            {
                "success": True,
                "content": CorrectionResult(corrected_text="Hi."),
                "error": PipelineError(kind=ErrorKind.EMPTY_RESPONSE, message="nothing"),
            },
            {"success": False, "content": CorrectionResult(corrected_text="Hi.")},
        ],
    )
    def test_exactly_one_of_content_and_error(self, fields):
        with pytest.raises(ValidationError):
            FlowResult(**fields)

    def test_field_errors_from_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            TranslationRequest.model_validate({"text": "", "targetLanguage": "French", "extra": 1})
        errors = FieldError.from_validation_error(exc_info.value)
        assert {(item.field, item.type) for item in errors} == {("text", "string_too_short"), ("extra", "extra_forbidden")}
