"""
=============================================================================
CLIENT CONFIGURATION
=============================================================================

Settings for the sample client (core/connection.py and the CLI). The
framing engine in httpwire.http takes no configuration at all.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Command-line arguments                                         │
    │      └── python -m httpwire --timeout 5 URL                         │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── HTTPWIRE_TIMEOUT=5 python -m httpwire URL                  │
    │                                                                      │
    │   3. Default values (in this dataclass)                             │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
from dataclasses import dataclass
from typing import Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ClientConfig:
    """
    Configuration for a single request/response exchange.

    =========================================================================
    SETTINGS
    =========================================================================

    timeout          Socket timeout in seconds (None = block forever)
    accept_encoding  Value sent in the Accept-Encoding request header
    log_level        Logging level for the CLI
    version          HTTP version written in the request line

    =========================================================================
    """

    timeout: Optional[float] = 30.0
    """
    Socket timeout in seconds, applied to connect and every read.
    None = blocking (a silent server hangs the client forever).
    """

    accept_encoding: str = "gzip, deflate, br"
    """
    Content codings we advertise. Every coding listed here must have a
    decoder in httpwire.http.DEFAULT_DECODERS.
    """

    log_level: str = "INFO"
    """Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""

    version: str = "1.1"
    """HTTP version for the request line, without the "HTTP/" prefix."""

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        HTTPWIRE_TIMEOUT          Socket timeout in seconds (default: 30)
        HTTPWIRE_LOG_LEVEL        Logging level (default: INFO)
        HTTPWIRE_ACCEPT_ENCODING  Accept-Encoding value
                                  (default: "gzip, deflate, br")

        =====================================================================
        """
        return cls(
            timeout=float(os.getenv("HTTPWIRE_TIMEOUT", "30")),
            log_level=os.getenv("HTTPWIRE_LOG_LEVEL", "INFO"),
            accept_encoding=os.getenv("HTTPWIRE_ACCEPT_ENCODING", "gzip, deflate, br"),
        )

    def validate(self) -> None:
        """Validate configuration values, failing fast with ValueError."""
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be > 0")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

        if not self.accept_encoding.strip():
            raise ValueError("accept_encoding must not be empty")
