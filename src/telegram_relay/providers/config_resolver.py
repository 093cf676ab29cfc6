"""Value resolver backed by static configuration."""

from string import Template

from ..config import Config
from ..interfaces import ValueResolver


class ConfigValueResolver(ValueResolver):
    """Resolves configuration values, substituting $name placeholders.

    Placeholders are filled from the event payload; unknown names are
    left as-is.
    """

    KEYS = ("auth_token", "chat_id", "long_message")

    def __init__(self, config: Config):
        self.config = config

    def resolve(self, event, key: str) -> str | None:
        """
        Resolve a configuration value for an event.

        Args:
            event: The event supplying placeholder values.
            key: Name of the configuration value.

        Returns:
            The substituted value, or None if unset.

        Raises:
            KeyError: If key is not a known configuration value.
        """
        if key not in self.KEYS:
            raise KeyError(f"Unknown configuration value: {key}")

        value = getattr(self.config, key)
        if value is None:
            return None

        payload = {k: str(v) for k, v in event.payload.items()}
        return Template(str(value)).safe_substitute(payload)
