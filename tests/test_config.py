"""Tests for the configuration module."""

import pytest
import tempfile
from telegram_relay.config import Config, load_config
from telegram_relay.errors import ConfigError


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self):
        """Config has sensible defaults."""
        config = Config()
        assert config.auth_token is None
        assert config.chat_id is None
        assert config.long_message is None
        assert config.api_url == "https://api.telegram.org"
        assert config.request_timeout_seconds == 30.0
        assert config.download_timeout_seconds == 60.0

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(auth_token="123:abc", chat_id="-100", long_message="split")
        assert config.auth_token == "123:abc"
        assert config.chat_id == "-100"
        assert config.long_message == "split"

    def test_validate_ok(self):
        Config(auth_token="123:abc", chat_id="42").validate()

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_validate_requires_token(self, token):
        with pytest.raises(ConfigError, match="auth_token is required"):
            Config(auth_token=token, chat_id="42").validate()

    def test_validate_requires_chat_id(self):
        with pytest.raises(ConfigError, match="chat_id is required"):
            Config(auth_token="123:abc").validate()


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_from_yaml_file(self):
        """Load config from YAML file."""
        yaml_content = """
telegram:
  auth_token: "123456:ABC-DEF"
  chat_id: -1001234567890
  api_url: http://localhost:8081
  timeout_seconds: 10

relay:
  long_message: split
  download_timeout_seconds: 15
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.auth_token == "123456:ABC-DEF"
            assert config.chat_id == "-1001234567890"
            assert config.api_url == "http://localhost:8081"
            assert config.request_timeout_seconds == 10
            assert config.long_message == "split"
            assert config.download_timeout_seconds == 15

    def test_load_partial_config(self):
        """Load config with partial values (rest use defaults)."""
        yaml_content = """
telegram:
  auth_token: "123:abc"
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.auth_token == "123:abc"
            assert config.chat_id is None
            assert config.long_message is None
            assert config.api_url == "https://api.telegram.org"

    def test_load_empty_file(self):
        """Load config from empty file uses defaults."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = load_config(f.name)

            assert config == Config()

    def test_load_nonexistent_file_raises(self):
        """Loading nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_unknown_relay_keys_ignored(self):
        """Keys the relay does not use are ignored, not loaded."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("""
telegram:
  auth_token: "123:abc"
  chat_id: 42
relay:
  long_message: split
  event_topic: alerts.incoming
""")
            f.flush()

            config = load_config(f.name)

            assert config == Config(auth_token="123:abc", chat_id="42", long_message="split")
            assert not hasattr(config, "event_topic")
            assert not hasattr(config, "split_long_messages")
