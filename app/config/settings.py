from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000

    upload_dir: Path = Path("uploads")
    max_upload_bytes: int = 25 * 1024 * 1024
    min_text_chars: int = 100
    max_input_chars: int = 3_500_000

    pdf_engine: str = "pdfplumber"

    dataset_path: Path = Path("All_Descriptions_Completed.xlsx")

    llm_provider: str = "openai"
    llm_api_key: str = ""
    llm_model_name: str = ""
    llm_base_url: str = ""
    llm_timeout_seconds: int = 120
    llm_temperature: float = 0.2
    llm_max_output_tokens: int = 16384
