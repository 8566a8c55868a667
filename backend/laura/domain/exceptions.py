"""Domain-specific exceptions: framework-independent."""


class UpstreamError(Exception):
    """Raised when an upstream AI provider call fails or returns a malformed payload.

    Provider-agnostic. Carries the upstream HTTP status when one was received,
    otherwise a gateway error code (502).
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class ConfigError(UpstreamError):
    """Raised when a provider call is attempted without the required configuration.

    Not retryable; the server must be reconfigured (e.g. MISTRAL_API_KEY).
    """

    def __init__(self, provider: str, message: str):
        super().__init__(provider=provider, status_code=500, message=message)


class ValidationError(Exception):
    """Raised when input is rejected before any upstream call is made."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
