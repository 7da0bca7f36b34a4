from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Term loading
    seed_terms_path: str | None = None  # one term per line, optional "\t<priority>"
    default_priority: int = 0

    # Request limits
    max_term_length: int = 255

    # App
    app_name: str = "TextFill API"
    app_version: str = "1.0.0"
    debug: bool = False


settings = Settings()
