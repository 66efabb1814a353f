"""
Exception types.

Defines categorized exception types for proper error handling.
"""


class GatewayError(Exception):
    """Base class for gateway errors."""
    pass


class ConfigError(GatewayError):
    """Raised when the config file cannot be loaded."""
    pass


class AuthServiceError(GatewayError):
    """Raised when a call to the authorization service fails."""
    pass


class AuthSerializationError(AuthServiceError):
    """Raised when an outbound payload cannot be serialized."""
    pass


class AuthRequestError(AuthServiceError):
    """Raised on transport failures and non-success responses."""
    pass


class AuthResponseError(AuthServiceError):
    """Raised when a response body cannot be deserialized.

    The raw body text is kept on ``body`` and quoted in the message.
    """

    def __init__(self, message: str, body: str) -> None:
        super().__init__(message)
        self.body = body
