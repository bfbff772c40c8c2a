"""
Client settings and configuration.

Values come from the environment; a local .env file is loaded first.
"""

import os
from typing import Optional, Dict, Any
from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = 'https://api.eversend.co/v1'


class Settings:
    """
    Client settings.

    Centralizes all configuration values.
    """

    def __init__(self):
        """Initialize settings from environment and defaults."""
        # API Settings
        self.base_url = os.getenv('EVERSEND_BASE_URL', DEFAULT_BASE_URL)
        self.client_id = os.getenv('EVERSEND_CLIENT_ID')
        self.client_secret = os.getenv('EVERSEND_CLIENT_SECRET')
        self.api_token = os.getenv('EVERSEND_API_TOKEN')

        # Logging Settings
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        self.log_file = os.getenv('LOG_FILE')

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Attribute name
            default: Default value if not found or unset

        Returns:
            Configuration value
        """
        value = getattr(self, key, None)
        return value if value is not None else default

    def validate(self) -> bool:
        """
        Validate that the client credentials are present.

        Returns:
            True if valid, False otherwise
        """
        return all([self.client_id, self.client_secret])

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary (excluding sensitive data)."""
        return {
            'base_url': self.base_url,
            'has_client_id': self.client_id is not None,
            'has_api_token': self.api_token is not None,
            'log_level': self.log_level,
            'log_file': self.log_file,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
