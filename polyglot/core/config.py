from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置，从环境变量或 .env 文件读取。
    """

    # 模型供应商
    LLM_PROVIDER: Literal["mistral", "gemini", "openai_like"] = "mistral"

    MISTRAL_MODEL: str = "mistral-medium-latest"
    MISTRAL_API_KEY: Optional[str] = None

    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_API_KEY: Optional[str] = None

    OPENAI_LIKE_MODEL: str = "gpt-4o-mini"
    OPENAI_LIKE_API_KEY: Optional[str] = None
    OPENAI_LIKE_BASE_URL: Optional[str] = None

    # 单次上游调用的超时时间（秒）
    REQUEST_TIMEOUT: float = Field(30.0, gt=0)

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["text", "json"] = "text"
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


settings = Settings()
