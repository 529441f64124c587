"""Custom exceptions for credential validation and knowledge retrieval."""


class LLMContextError(Exception):
    """Base exception for llm-context errors."""

    def __init__(self, message: str, provider: str = "unknown") -> None:
        """Initialize error.

        Args:
            message: Error message
            provider: Provider id the error relates to
        """
        self.provider = provider
        self.detail = message
        super().__init__(f"[{provider}] {message}")


class ConfigurationError(LLMContextError):
    """Raised when stored configuration makes an operation impossible.

    Configuration errors are reported before any network attempt.
    """

    pass


class ProviderNotFoundError(ConfigurationError):
    """Raised when a provider, or the provider owning a model, cannot be found."""

    def __init__(self, provider: str = "unknown", model_id: str | None = None) -> None:
        """Initialize error.

        Args:
            provider: Provider id that was looked up
            model_id: Model whose owning provider is missing, if any
        """
        self.model_id = model_id
        if model_id:
            message = f"No provider owns model '{model_id}'"
        else:
            message = "Provider not found"
        super().__init__(message, provider=provider)


class NoModelSelectedError(ConfigurationError):
    """Raised when a credential check is requested without a model."""

    def __init__(self, provider: str = "unknown") -> None:
        super().__init__("No model selected for check", provider=provider)


class APIKeyError(ConfigurationError):
    """Raised when API key is missing."""

    pass


class APIHostError(ConfigurationError):
    """Raised when API host is missing."""

    pass


class ConnectivityError(LLMContextError):
    """Raised when a remote endpoint is unreachable or rejects a request."""

    def __init__(
        self,
        message: str,
        provider: str = "unknown",
        status_code: int | None = None,
    ) -> None:
        """Initialize error.

        Args:
            message: Error message
            provider: Provider id
            status_code: HTTP status returned by the endpoint, if any
        """
        self.status_code = status_code
        super().__init__(message, provider=provider)


class RateLimitError(ConnectivityError):
    """Raised when rate limit is exceeded."""

    def __init__(
        self,
        message: str,
        provider: str = "unknown",
        retry_after: int | None = None,
    ) -> None:
        """Initialize error.

        Args:
            message: Error message
            provider: Provider id
            retry_after: Seconds to wait before retrying
        """
        self.retry_after = retry_after
        super().__init__(message, provider=provider, status_code=429)


class TimeoutError(ConnectivityError):
    """Raised when request times out."""

    pass


class SearchError(ConnectivityError):
    """Raised when the knowledge-base search itself fails."""

    pass
