"""Configuration management for bank-terminal."""

import os
from dataclasses import dataclass, field

from bank_terminal.exceptions import ConfigurationError

DEFAULT_API_URL = "http://localhost:8080/api/v1"


@dataclass
class ApiConfig:
    """Backend API connection configuration."""

    base_url: str = DEFAULT_API_URL
    timeout: float = 10.0
    verify_tls: bool = True

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")
        if self.timeout <= 0:
            raise ConfigurationError(f"API timeout must be positive, got {self.timeout}")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "standard"  # standard | json
    redact_tax_ids: bool = True


@dataclass
class TerminalConfig:
    """Main configuration for bank-terminal."""

    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "TerminalConfig":
        """Create config from environment variables."""
        timeout_str = os.getenv("BANK_API_TIMEOUT", "10")
        try:
            timeout = float(timeout_str)
        except ValueError:
            raise ConfigurationError(f"BANK_API_TIMEOUT is not a number: {timeout_str!r}") from None

        api = ApiConfig(
            base_url=os.getenv("BANK_API_URL", DEFAULT_API_URL),
            timeout=timeout,
            verify_tls=os.getenv("BANK_API_VERIFY_TLS", "true").lower() != "false",
        )

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=os.getenv("LOG_FORMAT", "standard"),
            redact_tax_ids=os.getenv("LOG_REDACT_TAX_IDS", "true").lower() != "false",
        )

        return cls(api=api, logging=logging_config)
