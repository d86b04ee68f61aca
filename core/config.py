from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings."""

    app_title: str = "Gulf of Maine Buoy Monitor"

    # NDBC settings
    ndbc_base_url: str = "https://www.ndbc.noaa.gov/data/realtime2/"
    ndbc_report_suffix: str = "txt"  # Standard meteorological data
    ndbc_user_agent: str = "GulfOfMaineBuoyMonitor/1.0 (educational)"

    # Whole-request deadline in seconds (connect, headers and body)
    request_timeout: float = 12

    # Companion front-end
    static_dir: str = "public"

    model_config = SettingsConfigDict(
        env_prefix="buoy_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
