from .base import FlowDefinition
from .correction import correction_flow
from .registry import FlowRegistry
from .summarization import summarization_flow
from .translation import translation_flow

CORRECTION = correction_flow.name
TRANSLATION = translation_flow.name
SUMMARIZATION = summarization_flow.name


def build_default_registry() -> FlowRegistry:
    """Registry with the built-in correction, translation and summarization flows."""
    return FlowRegistry([correction_flow, translation_flow, summarization_flow])


__all__ = [
    "CORRECTION",
    "SUMMARIZATION",
    "TRANSLATION",
    "FlowDefinition",
    "FlowRegistry",
    "build_default_registry",
    "correction_flow",
    "summarization_flow",
    "translation_flow",
]
