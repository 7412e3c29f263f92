MAX_TEXT_LENGTH = 10000
MAX_LANGUAGE_LENGTH = 64

# 支持的语言：名称 -> 显示标签
SUPPORTED_LANGUAGES = {
    "English": "English",
    "Spanish": "Español (Spanish)",
    "French": "Français (French)",
    "German": "Deutsch (German)",
    "Japanese": "日本語 (Japanese)",
    "Chinese": "中文 (Chinese)",
    "Korean": "한국어 (Korean)",
    "Italian": "Italiano (Italian)",
    "Portuguese": "Português (Portuguese)",
    "Russian": "Русский (Russian)",
    "Arabic": "العربية (Arabic)",
    "Hindi": "हिन्दी (Hindi)",
}

DEFAULT_SOURCE_LANGUAGE = "English"
DEFAULT_TARGET_LANGUAGE = "Spanish"
