from agno.models.base import Model

from ..core.config import Settings, settings


def get_model(config: Settings = settings) -> Model:
    """
    按配置创建模型实例。只导入被选中供应商的 SDK。
    """
    if config.LLM_PROVIDER == "gemini":
        from agno.models.google import Gemini

        return Gemini(id=config.GEMINI_MODEL, api_key=config.GEMINI_API_KEY)
    if config.LLM_PROVIDER == "openai_like":
        from agno.models.openai.like import OpenAILike

        return OpenAILike(
            id=config.OPENAI_LIKE_MODEL, api_key=config.OPENAI_LIKE_API_KEY, base_url=config.OPENAI_LIKE_BASE_URL
        )

    from agno.models.mistral import MistralChat

    return MistralChat(id=config.MISTRAL_MODEL, api_key=config.MISTRAL_API_KEY)
