"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
The settings object is built once at startup and passed to
create_app(); nothing reads it from a module global.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        listen_type: "port" to bind a TCP socket, "sock" for a unix socket.
        listen_address: Bind address used when listen_type is "port".
        listen_port: Bind port used when listen_type is "port".
        listen_socket_path: Socket path used when listen_type is "sock".
        mongo_uri: MongoDB connection URI. Required.
        mongo_database: Database holding the account collections. Required.
        mongo_users_collection: Collection name for users.
        mongo_admins_collection: Collection name for admins.
        mongo_timeout_ms: Server selection and connect timeout.
        rate_limit_enabled: Toggle per-client rate limiting.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Account Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    listen_type: Literal["port", "sock"] = "port"
    listen_address: str = "127.0.0.1"
    listen_port: int = Field(default=8080, ge=1, le=65535)
    listen_socket_path: str = "app.sock"

    mongo_uri: str = Field(..., min_length=1)
    mongo_database: str = Field(..., min_length=1)
    mongo_users_collection: str = "users"
    mongo_admins_collection: str = "admins"
    mongo_timeout_ms: int = Field(default=10_000, gt=0)

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"
