from polyglot.schemas import CorrectionRequest, CorrectionResult

from .base import FlowDefinition, flag

description = (
    "You are a highly configurable writing assistant and language learning helper. "
    "You correct the user's text and give linguistic feedback that follows the user's settings exactly."
)

instructions = [
    "1. **Corrected Text**: Always return the corrected text in 'correctedText'.",
    "2. **Explanation of Corrections**: In 'explanation', briefly explain each significant change (grammar, spelling, punctuation, style). "
    "For each one give a short example sentence that shows the correct usage or contrasts it with the incorrect one, based on the user's text.",
    "3. **Key Vocabulary**: In 'keyVocabulary', list 3-5 key words or phrases from the corrected text. "
    "Prefer terms that were corrected, show proper usage, or are useful for a language learner. Give each a brief definition or example sentence.",
    "4. **Tone and Formality (only if 'Analyze Tone' is true)**: In 'toneAnalysis', describe the detectedTone of the original text "
    "(e.g. 'informal and conversational', 'formal and academic', 'neutral'). If 'Improve Style' is true or the correction level is "
    "'standard' or 'strict', add suggestions for improving or adjusting the tone.",
    "5. **Idioms and Common Phrases (only if 'Explain Idioms' is true)**: In 'idiomExplanations', list idioms or colloquial phrases from the "
    "original text, used correctly or not, each with its meaning and a new example sentence.",
    "6. **Sentence Structure (only if 'Suggest Structure Variations' is true)**: In 'structureSuggestions', give general advice on sentence "
    "variety, flow and readability, pointing out repetitive or awkward structures even if they are grammatically correct.",
]

correction_levels = [
    "  - 'gentle': Essential corrections only. Fix errors that impede understanding and be lenient with minor style issues.",
    "  - 'standard': Balanced corrections for grammar, spelling, punctuation and clarity. Improve readability and flow.",
    "  - 'strict': Comprehensive corrections for all errors in grammar, spelling, punctuation, style and flow. Aim for formal, precise language.",
]

output_rules = (
    "Respond strictly with a JSON object matching the output schema. Include the optional fields whose settings are enabled "
    "when relevant content exists. If a feature is enabled but nothing relevant is found (e.g. no idioms in the text), omit that field."
)


def render_prompt(request: CorrectionRequest) -> str:
    settings_block = [
        f"- Correction Level: {request.correction_level.value}",
        *correction_levels,
        "",
        "Focus Areas (true means correct/analyze this aspect, false means ignore it unless critical for understanding):",
        f"- Correct Grammar: {flag(request.flag_grammar)}",
        f"- Correct Spelling: {flag(request.flag_spelling)}",
        f"- Correct Punctuation: {flag(request.flag_punctuation)}",
        f"- Improve Style: {flag(request.flag_style)} (if true, suggest improvements to style, tone and word choice; "
        "if false, focus on correctness)",
        f"- Analyze Tone: {flag(request.analyze_tone)}",
        f"- Explain Idioms: {flag(request.explain_idioms)}",
        f"- Suggest Structure Variations: {flag(request.suggest_structure_variations)}",
    ]
    return "\n".join(
        [
            "Correct the text below and provide feedback according to these rules:",
            *instructions,
            "",
            f"The user's text is in {request.language}.",
            "",
            "Correction Settings:",
            *settings_block,
            "",
            "Original Text:",
            request.text,
            "",
            output_rules,
        ]
    )


correction_flow = FlowDefinition(
    name="correction",
    description=description,
    input_schema=CorrectionRequest,
    output_schema=CorrectionResult,
    render_prompt=render_prompt,
)
