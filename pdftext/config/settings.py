from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from PDFTEXT_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="PDFTEXT_", env_file=".env", extra="ignore")

    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
