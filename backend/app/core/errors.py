"""Error taxonomy for the correction gateway.

Errors that reach the client (validation, service unavailable) carry an HTTP
status and a message that is safe to show to a student. Provider-level errors
(call, format, configuration) are caught by the gateway and only logged.
"""

EMPTY_TEXT_MESSAGE = "Please provide some text to check."
INVALID_REQUEST_MESSAGE = "The request body is not valid."
SECONDARY_MISCONFIGURED_MESSAGE = (
    "The backup grammar checking service is not properly configured."
)
ALL_PROVIDERS_DOWN_MESSAGE = "Both grammar checking services are currently unavailable."


class GatewayError(Exception):
    """Base class for errors raised while checking a text."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(GatewayError):
    """The submitted text is empty or whitespace-only."""

    status_code = 400
    default_message = EMPTY_TEXT_MESSAGE


class ProviderCallError(GatewayError):
    """Network, authentication, timeout or non-2xx failure from a provider."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class ResponseFormatError(GatewayError):
    """A provider answered, but the payload could not be decoded."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class ConfigurationError(GatewayError):
    """A provider is missing the credentials it needs."""

    def __init__(self, provider: str, message: str | None = None) -> None:
        self.provider = provider
        super().__init__(f"{provider}: {message or 'API key is not configured'}")


class ServiceUnavailableError(GatewayError):
    """Every provider in the fallback chain failed."""

    status_code = 503
    default_message = ALL_PROVIDERS_DOWN_MESSAGE

    def __init__(self, message: str | None = None, *, misconfigured: bool = False) -> None:
        self.misconfigured = misconfigured
        super().__init__(message)
