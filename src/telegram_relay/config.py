"""Configuration handling for the Telegram relay."""

from dataclasses import dataclass
from pathlib import Path
import yaml

from .errors import ConfigError


@dataclass
class Config:
    """Configuration settings for the relay.

    Attributes:
        auth_token: Bot token issued by BotFather.
        chat_id: Destination chat, group or channel id.
        long_message: "split" to segment oversized content, anything
            else truncates it.
        api_url: Base URL of the bot API.
        request_timeout_seconds: Timeout for bot API calls.
        download_timeout_seconds: Timeout for fetching binary content.
    """

    auth_token: str | None = None
    chat_id: str | None = None
    long_message: str | None = None
    api_url: str = "https://api.telegram.org"
    request_timeout_seconds: float = 30.0
    download_timeout_seconds: float = 60.0

    def validate(self) -> None:
        """
        Check required settings are present.

        Raises:
            ConfigError: If auth_token or chat_id is missing.
        """
        if not (self.auth_token or "").strip():
            raise ConfigError("auth_token is required")
        if not str(self.chat_id or "").strip():
            raise ConfigError("chat_id is required")


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    telegram = data.get("telegram", {})
    relay = data.get("relay", {})

    chat_id = telegram.get("chat_id", Config.chat_id)

    return Config(
        auth_token=telegram.get("auth_token", Config.auth_token),
        chat_id=str(chat_id) if chat_id is not None else None,
        long_message=relay.get("long_message", Config.long_message),
        api_url=telegram.get("api_url", Config.api_url),
        request_timeout_seconds=telegram.get("timeout_seconds", Config.request_timeout_seconds),
        download_timeout_seconds=relay.get("download_timeout_seconds", Config.download_timeout_seconds),
    )
