"""
Client configuration from environment variables and .env files.

Reads ``REQUEST_CLIENT_*`` variables and turns them into the same option
functions callers pass to ``Client``.

Example .env file:
    REQUEST_CLIENT_BASE_URL=https://api.example.com
    REQUEST_CLIENT_USER_AGENT=billing-sync/2.0
    REQUEST_CLIENT_TIMEOUT_CONNECT=3
    REQUEST_CLIENT_TIMEOUT_READ=30
    REQUEST_CLIENT_BEARER_TOKEN=secret-token
    REQUEST_CLIENT_LOG_LEVEL=DEBUG
"""

from typing import Any, List, Literal, Optional, Tuple

from pydantic import Field, SecretStr, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .logging import LoggingConfig
from .options import (
    Option,
    with_basic_auth,
    with_bearer_token,
    with_content_type,
    with_logging,
    with_timeout,
    with_token,
    with_user_agent,
)


class ClientSettings(BaseSettings):
    """
    Environment settings for a request client.

    Priority (highest to lowest): explicit init kwargs, environment
    variables, .env file, defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix='REQUEST_CLIENT_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    base_url: str = Field(description="Base URL for all requests")
    user_agent: Optional[str] = None
    content_type: Optional[str] = None

    timeout_connect: Optional[float] = Field(default=None, gt=0)
    timeout_read: Optional[float] = Field(default=None, gt=0)

    # Auth: at most one mode
    basic_username: Optional[str] = None
    basic_password: Optional[SecretStr] = None
    bearer_token: Optional[SecretStr] = None
    token: Optional[SecretStr] = None

    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    log_format: Literal["json", "text"] = "text"

    @model_validator(mode='after')
    def check_single_auth_mode(self) -> "ClientSettings":
        """Reject settings that configure more than one auth mode."""
        modes = [
            name for name, enabled in (
                ("basic", self.basic_username is not None),
                ("bearer_token", self.bearer_token is not None),
                ("token", self.token is not None),
            ) if enabled
        ]
        if len(modes) > 1:
            raise ValueError(f"only one auth mode may be configured, got: {', '.join(modes)}")
        if self.basic_password is not None and self.basic_username is None:
            raise ValueError("basic_password requires basic_username")
        return self

    def to_options(self) -> List[Option]:
        """Convert settings into option functions."""
        options: List[Option] = []

        if self.user_agent is not None:
            options.append(with_user_agent(self.user_agent))
        if self.content_type is not None:
            options.append(with_content_type(self.content_type))

        if self.timeout_connect is not None or self.timeout_read is not None:
            connect = self.timeout_connect or self.timeout_read
            read = self.timeout_read or self.timeout_connect
            options.append(with_timeout((connect, read)))

        if self.basic_username is not None:
            password = self.basic_password.get_secret_value() if self.basic_password else ""
            options.append(with_basic_auth(self.basic_username, password))
        elif self.bearer_token is not None:
            options.append(with_bearer_token(self.bearer_token.get_secret_value()))
        elif self.token is not None:
            options.append(with_token(self.token.get_secret_value()))

        if self.log_level is not None:
            options.append(with_logging(LoggingConfig.create(level=self.log_level, format=self.log_format)))

        return options


def load_options_from_env(
    env_file: Optional[str] = None,
    **overrides: Any
) -> Tuple[str, List[Option]]:
    """
    Load base URL and options from the environment.

    Args:
        env_file: Custom .env file path (default: ``.env`` if present)
        **overrides: Explicit values, e.g. ``base_url="https://..."``

    Returns:
        ``(base_url, options)`` ready for ``Client(base_url, *options)``

    Raises:
        ConfigurationError: Missing base URL or invalid values
    """
    kwargs = dict(overrides)
    if env_file is not None:
        kwargs['_env_file'] = env_file

    try:
        settings = ClientSettings(**kwargs)
    except ValidationError as e:
        raise ConfigurationError(f"invalid client settings: {e}") from e

    return settings.base_url, settings.to_options()
