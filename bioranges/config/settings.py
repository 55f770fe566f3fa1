from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    sheet_csv_url: str = (
        "https://docs.google.com/spreadsheets/d/"
        "1zjJQokNREZWuQftsGlMLJ8F9esi1Ti979mWl3aHLBR4/export?format=csv"
    )
    local_csv_path: str = "biomarkers.csv"
    http_timeout_seconds: int = 15
    http_max_redirects: int = 5

    default_demographic: str = "Male_18-39"
    demographic_candidates: list[str] = ["Male_18-39", "Male_18_39"]
