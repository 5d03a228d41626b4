"""
Configuration settings for the header inspector.
Centralized configuration management with environment variable support.
"""

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass(frozen=True)
class ServerConfig:
    """HTTP inspection service configuration."""
    host: str = "127.0.0.1"
    port: int = 8000
    max_body_size: int = 16 * 1024 * 1024  # Largest upload accepted by /inspect


@dataclass(frozen=True)
class CliConfig:
    """Command-line configuration."""
    log_level: str = "WARNING"  # Keep stderr quiet unless asked


@dataclass
class AppConfig:
    """Main application configuration."""
    log_level: str = "INFO"
    server: ServerConfig = field(default_factory=ServerConfig)
    cli: CliConfig = field(default_factory=CliConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            server=ServerConfig(
                host=os.getenv("SERVER_HOST", "127.0.0.1"),
                port=_env_int("SERVER_PORT", 8000),
                max_body_size=_env_int("MAX_BODY_SIZE", 16 * 1024 * 1024),
            ),
            cli=CliConfig(
                log_level=os.getenv("WAVHEADER_CLI_LOG_LEVEL", "WARNING").upper(),
            ),
        )


# Global configuration instance
config = AppConfig.from_env()
