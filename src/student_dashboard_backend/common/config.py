'''
Holds all the configurations
'''
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """
    Manages application configuration using environment variables.
    """
    # Application Metadata
    APP_NAME: str = "Student Dashboard Backend"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Academic calendar, daily schedule and semester progress API for the student dashboard."
    TEST_MODE: bool = False
    LOG_LEVEL: str = "INFO"

    # Database URL
    DATABASE_URL_PROD: str = "postgresql+asyncpg://localhost:5432/student_dashboard"
    DATABASE_URL_TEST: str = "sqlite+aiosqlite:///:memory:"
    AUTO_CREATE_TABLES: bool = False
    @property
    def database_url(self) -> str:
        """
        Dynamically returns the correct database URL based on the test_mode flag.
        """
        if self.TEST_MODE:
            return self.DATABASE_URL_TEST
        return self.DATABASE_URL_PROD

    # JWT Settings
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # User ids allowed to edit the institute-wide calendar configuration
    ADMIN_USER_IDS: list[str] = []

    # Extra CORS origins for the deployed frontends
    BACKEND_CORS_ORIGINS: list[str] = []

    # Fallback semester window, used when neither the events nor the admin
    # configuration yield one. Months are 1-12.
    SEMESTER_DEFAULT_START_MONTH: int = 7
    SEMESTER_DEFAULT_START_DAY: int = 21
    SEMESTER_DEFAULT_END_MONTH: int = 11
    SEMESTER_DEFAULT_END_DAY: int = 30

    # Calendar widgets
    UPCOMING_EVENTS_WINDOW_DAYS: int = 7
    SEMESTER_LOOKAHEAD_DAYS: int = 7
    MAX_REMINDER_WIDGET_EVENTS: int = 3

    class Config:
        env_file = ".env" # automatically loads the .env

# Create a single, importable instance of the settings
settings = Settings()
