from polyglot.schemas import SummaryRequest, SummaryResult

from .base import FlowDefinition

description = (
    "You are an expert summarizer who writes concise and accurate summaries of text content in any language."
)


def render_prompt(request: SummaryRequest) -> str:
    if request.language:
        language_line = f"Language: {request.language} (the text is written in {request.language}; write the summary in it)"
    else:
        language_line = "Language: not specified (detect the language of the text and write the summary in it)"
    return "\n".join(
        [
            "Summarize the following text in the language it is written in.",
            language_line,
            'Respond only with a JSON object of the form {"summary": "..."}.',
            "",
            "Text:",
            request.text,
        ]
    )


summarization_flow = FlowDefinition(
    name="summarization",
    description=description,
    input_schema=SummaryRequest,
    output_schema=SummaryResult,
    render_prompt=render_prompt,
)
