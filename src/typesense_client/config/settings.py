import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from typesense_client.config.models import ClientConfig, Node
from typesense_client.errors import ConfigurationError


class Settings(BaseModel):
    """Client settings read from the environment"""

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Node
    TYPESENSE_HOST: str = Field(default="localhost", description="Typesense host")
    TYPESENSE_PORT: int = Field(default=8108, description="Typesense port")
    TYPESENSE_PROTOCOL: str = Field(default="http", description="http or https")

    # Auth
    TYPESENSE_API_KEY: Optional[str] = Field(default=None, description="Typesense API key")

    # Requests
    TYPESENSE_TIMEOUT: float = Field(default=10.0, description="Request timeout in seconds")

    model_config = {
        "frozen": True,
    }

    def to_client_config(self) -> ClientConfig:
        """Build a ClientConfig, failing if no API key is configured."""
        if not self.TYPESENSE_API_KEY:
            raise ConfigurationError(
                "TYPESENSE_API_KEY is not set",
                details={"variable": "TYPESENSE_API_KEY"},
            )
        try:
            return ClientConfig(
                nodes=[Node(host=self.TYPESENSE_HOST, port=str(self.TYPESENSE_PORT), protocol=self.TYPESENSE_PROTOCOL)],
                api_key=self.TYPESENSE_API_KEY,
                connection_timeout_seconds=self.TYPESENSE_TIMEOUT,
            )
        except ValidationError as e:
            raise ConfigurationError("Invalid client configuration", original_error=e) from e


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from environment variables.

    Values from ``env_file`` (or a ``.env`` found from the working directory)
    are loaded first without overriding variables that are already set.
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    try:
        return Settings(
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
            TYPESENSE_HOST=os.getenv("TYPESENSE_HOST", "localhost"),
            TYPESENSE_PORT=os.getenv("TYPESENSE_PORT", "8108"),
            TYPESENSE_PROTOCOL=os.getenv("TYPESENSE_PROTOCOL", "http"),
            TYPESENSE_API_KEY=os.getenv("TYPESENSE_API_KEY"),
            TYPESENSE_TIMEOUT=os.getenv("TYPESENSE_TIMEOUT", "10.0"),
        )
    except ValidationError as e:
        raise ConfigurationError("Invalid settings in environment", original_error=e) from e
