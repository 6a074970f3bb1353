from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    supabase_url: str = ""
    supabase_key: str = ""
    storage_bucket: str = "vector"
    storage_prefix: str = "uploaded"
    storage_list_limit: int = 100000

    target_ids_path: str = "exact_match_ids_simple.json"
    catalog_path: str = "documentos_iadb_completo.json"
    report_path: str = "vectorization_report.json"

    vectorize_api_url: str = "http://localhost:3000/process-text"
    vectorize_timeout_seconds: int = 120
    vectorize_namespace: str = "*"
    vectorize_flow: str = "@"

    pdf_engine: str = "pdftotext"
    pdftotext_binary: str = "pdftotext"
    pdftotext_timeout_seconds: int = 120
    min_text_length: int = 50

    inter_job_delay_ms: int = 100
    progress_every: int = 10

    @property
    def public_url_base(self) -> str:
        """Public object URL prefix for the configured bucket and folder."""
        return (
            f"{self.supabase_url.rstrip('/')}/storage/v1/object/public/"
            f"{self.storage_bucket}/{self.storage_prefix.strip('/')}"
        )
