"""Configuration for Pushover SDK."""

from dataclasses import dataclass

MESSAGES_URL = "https://api.pushover.net/1/messages.json"
VALIDATE_URL = "https://api.pushover.net/1/users/validate.json"


@dataclass
class PushoverConfig:
    """
    Configuration for Pushover SDK client.

    Attributes:
        messages_url: URL of the Pushover message API
        validate_url: URL of the Pushover user validation API
        timeout: Request timeout in seconds (default: 10.0)
        verify_ssl: Whether to verify SSL certificates (default: True)

    A request's own ``pushover_url`` takes precedence over these URLs.

    Example:
        ```python
        config = PushoverConfig(
            messages_url="http://localhost:8080/1/messages.json",
            timeout=5.0,
        )
        ```
    """

    messages_url: str = MESSAGES_URL
    validate_url: str = VALIDATE_URL
    timeout: float = 10.0
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.messages_url:
            raise ValueError("messages_url is required")

        if not self.validate_url:
            raise ValueError("validate_url is required")

        self.messages_url = self.messages_url.rstrip("/")
        self.validate_url = self.validate_url.rstrip("/")

        if self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")
