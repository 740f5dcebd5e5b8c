from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="NOTESAFE_", extra="ignore")

    # Sanitized text is clamped to this many characters
    MAX_INPUT_LENGTH: int = Field(5000, ge=0)

    # Status returned by the FastAPI handler for rejected input
    UNSAFE_INPUT_STATUS_CODE: int = 400


settings = Settings()
