import os


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip().lower() for item in value.split(",") if item.strip()]


class Settings:
    def __init__(self):
        self.app_name = "Berry"
        self.api_version = "1.0.0"
        self.environment = os.getenv("BERRY_ENV", "development")
        self.secret_key = os.getenv("BERRY_SECRET_KEY", "CHANGE_ME")
        self.access_token_expire_minutes = int(os.getenv("BERRY_TOKEN_MINUTES", "60"))
        self.database_url = os.getenv("BERRY_DATABASE_URL", "sqlite:///./berry.db")
        self.log_level = os.getenv("BERRY_LOG_LEVEL", "INFO").upper()
        # Empty list means any domain may request a verification code
        self.allowed_email_domains = _split_csv(os.getenv("BERRY_ALLOWED_EMAIL_DOMAINS"))
        self.verification_code_ttl_minutes = 10
        self.cors_origins = _split_csv(os.getenv("BERRY_CORS_ORIGINS")) or [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
