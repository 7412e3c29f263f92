from polyglot.schemas import TranslationRequest, TranslationResult

from .base import FlowDefinition

description = (
    "You are a professional translator who produces natural, fluent translations "
    "that keep the meaning, tone and formatting of the source text."
)

instructions = [
    "1. Translate the text below into the target language. The target may be a language name or a language tag such as 'es-ES'; "
    "when a regional tag is given, use that regional variant.",
    "2. Keep paragraphs, line breaks and list markers exactly where they are.",
    "3. Keep proper nouns, code and URLs in their original form.",
    "4. Do not add explanations, notes or alternatives.",
    '5. **OUTPUT FORMAT**: Respond only with a JSON object of the form {"translatedText": "..."}.',
]


def render_prompt(request: TranslationRequest) -> str:
    return "\n".join(
        [
            *instructions,
            "",
            f"Target Language: {request.target_language}",
            "",
            "Text to Translate:",
            request.text,
        ]
    )


translation_flow = FlowDefinition(
    name="translation",
    description=description,
    input_schema=TranslationRequest,
    output_schema=TranslationResult,
    render_prompt=render_prompt,
)
