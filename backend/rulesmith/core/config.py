from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    GEMINI_API_KEY: str = ""
    # Key for any other OpenAI-compatible provider; used only when GEMINI_API_KEY is empty.
    LLM_API_KEY: str = ""
    LLM_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    MODEL_DEFAULT: str = "gemini-2.0-flash"
    LLM_TEMPERATURE: float = 0.7

    LOG_LEVEL: str = "INFO"


settings = Settings()
