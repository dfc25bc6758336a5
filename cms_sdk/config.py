from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "CMS SDK"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Composition pipeline
    default_locale: str = "en"
    ab_salt: str = "cms-ab"
    ab_buckets: list[str] = ["A", "B"]

    # Collaborator backends: "memory" | "sql" for pages, "none" | "file" | "sql" for plugins
    pages_backend: str = "memory"
    plugins_backend: str = "none"
    plugins_config_file: str = "data/plugins_config.json"

    # Database settings (only used by the sql backends)
    database_url: str = "sqlite+aiosqlite:///./cms.db"

    # Logging
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="CMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
