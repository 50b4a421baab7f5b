from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BUSINESS_NAME: str = "Nyansa Tech Hub"
    BUSINESS_TIMEZONE: str = "Africa/Accra"

    STORE_PROVIDER: str = "memory"  # "memory" | "json"
    BOOKINGS_FILE: str = "./data/bookings.json"

    CONTACT_RATE_LIMIT_ATTEMPTS: int = 3
    CONTACT_RATE_LIMIT_WINDOW_MS: int = 60000
    RATE_LIMIT_MAX_KEYS: int = 10000

    RESEND_API_KEY: str | None = None
    RESEND_API_URL: str = "https://api.resend.com/emails"
    FORMSPREE_ENDPOINT: str | None = None
    EMAIL_FROM: str = "noreply@nyansatechhub.com"
    CONTACT_INBOX: str = "info@nyansatechhub.com"
    STAFF_NOTIFICATION_EMAILS: list[str] = [
        "info@nyansatechhub.com",
        "admissions@nyansatechhub.com",
    ]
    EMAIL_TIMEOUT_SECONDS: float = 10.0

    JWT_SECRET: str = "dev-only-change-me"
    JWT_ALGORITHM: str = "HS256"
    ADMIN_TOKEN_TTL_MINUTES: int = 480
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str | None = None
    STAFF_USERNAME: str = "staff"
    STAFF_PASSWORD: str | None = None


settings = Settings()
