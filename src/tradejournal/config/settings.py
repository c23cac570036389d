"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory based on platform."""
    return Path.home() / ".tradejournal"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRADEJOURNAL_",
        extra="ignore",
    )

    app_name: str = "Trade Journal"
    app_version: str = "0.1.0"

    # Data directory (local database lives here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Remote store (Supabase / PostgREST)
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    supabase_access_token: Optional[str] = None
    remote_timeout_seconds: float = 30.0

    # Identity scoping push/pull; sync is refused while unset
    account_id: Optional[str] = None

    # Profit-sharing ratio used until the user stores a preference
    default_dividend_numerator: int = 1
    default_dividend_denominator: int = 3

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "tradejournal.db"
        return f"sqlite+aiosqlite:///{db_path}"

    @property
    def remote_configured(self) -> bool:
        """True when enough settings exist to reach the remote store."""
        return bool(self.supabase_url and self.supabase_anon_key)


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
