"""Bot-wide exception hierarchy."""

class BotError(Exception):
    """Base exception for all bot errors."""
    pass

class ConfigurationError(BotError):
    """A required setting is missing or invalid at startup."""
    pass

class ModelProviderError(BotError):
    """Error communicating with an LLM provider."""
    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"[{provider}] {message}")
