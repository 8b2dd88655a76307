from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "AppointBook"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    BUSINESS_TIMEZONE: str = "America/Los_Angeles"

    LOGIN_ROUTE: str = "/login"
    APPOINTMENTS_ROUTE: str = "/appointments"

    PAYMENT_PROVIDER: str = "mock"
    MOCK_PAYMENT_DELAY_SECONDS: float = 2.0
    MOCK_PAYMENT_FAIL: bool = False

    BOOKING_SESSION_IDLE_SECONDS: float = 1800.0
    BOOKING_SESSION_MAX: int = 1000

    MOCK_CONTACT_DELAY_SECONDS: float = 1.0


settings = Settings()
