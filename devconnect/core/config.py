# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/London")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "devconnector")

        # Collection Names
        self.profiles_collection: Final[str] = os.getenv("PROFILES_COLLECTION", "profiles")
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        self.posts_collection: Final[str] = os.getenv("POSTS_COLLECTION", "posts")

        # Auth Configuration
        self.jwt_secret: Final[str] = os.getenv("JWT_SECRET", "change-me")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_expire_minutes: Final[int] = int(
            os.getenv("JWT_EXPIRE_MINUTES", "360000")
        )

        # GitHub API Configuration
        self.github_token: Final[str] = os.getenv("GITHUB_TOKEN", "")
        self.github_api_url: Final[str] = os.getenv(
            "GITHUB_API_URL",
            "https://api.github.com"
        ).rstrip("/")
        self.github_timeout_seconds: Final[float] = float(
            os.getenv("GITHUB_TIMEOUT_SECONDS", "10")
        )
        self.github_repos_limit: Final[int] = int(
            os.getenv("GITHUB_REPOS_LIMIT", "5")
        )

        # Gravatar Configuration
        self.gravatar_size: Final[str] = os.getenv("GRAVATAR_SIZE", "200")
        self.gravatar_rating: Final[str] = os.getenv("GRAVATAR_RATING", "pg")
        self.gravatar_default: Final[str] = os.getenv("GRAVATAR_DEFAULT", "mm")

        # CORS
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
