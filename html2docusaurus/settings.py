"""Process settings loaded from the environment.

Settings are read from environment variables, optionally populated from a
.env file by python-dotenv. They configure the fetch collaborator and the
HTTP server; conversion options live in ConversionConfig instead.

Environment variables:
    HTML2DOCUSAURUS_FETCH_TIMEOUT: Fetch timeout in seconds (default 10)
    HTML2DOCUSAURUS_USER_AGENT: User-Agent header sent when fetching pages
    HTML2DOCUSAURUS_HOST: Address the HTTP server binds to (default 127.0.0.1)
    HTML2DOCUSAURUS_PORT: Port the HTTP server listens on (default 5000)
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from html2docusaurus.errors import ConfigError

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


class Settings(NamedTuple):
    """Runtime settings for the fetcher and server."""
    fetch_timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    host: str = '127.0.0.1'
    port: int = 5000

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from the environment after reading .env.

        Raises:
            ConfigError: If a numeric setting is not a valid positive number
        """
        load_dotenv()

        defaults = cls()
        timeout = cls._read_number(
            'HTML2DOCUSAURUS_FETCH_TIMEOUT', defaults.fetch_timeout, float
        )
        port = cls._read_number('HTML2DOCUSAURUS_PORT', defaults.port, int)
        if port > 65535:
            raise ConfigError(
                f"must be a port number, got {port}",
                config_field='HTML2DOCUSAURUS_PORT'
            )

        return cls(
            fetch_timeout=timeout,
            user_agent=os.getenv('HTML2DOCUSAURUS_USER_AGENT') or defaults.user_agent,
            host=os.getenv('HTML2DOCUSAURUS_HOST') or defaults.host,
            port=port,
        )

    @staticmethod
    def _read_number(name: str, default, kind):
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = kind(raw.strip())
        except ValueError:
            raise ConfigError(f"must be a number, got {raw!r}", config_field=name)
        if value <= 0:
            raise ConfigError(f"must be positive, got {raw!r}", config_field=name)
        return value
