"""Exception hierarchy for the Helix Hub API."""


class HelixHubError(Exception):
    """Base exception for Helix Hub failures."""


class ConfigurationError(HelixHubError):
    """Raised when settings or a connection string are unusable."""


class SecretRetrievalError(HelixHubError):
    """Raised when a secret cannot be read from Key Vault."""


class DatabaseError(HelixHubError):
    """Raised when a SQL query fails after retries."""


class ExternalServiceError(HelixHubError):
    """Raised when a third-party HTTP service fails."""


class NotFoundError(HelixHubError):
    """Raised when a record targeted by an update does not exist."""


class InvalidRequestError(HelixHubError):
    """Raised when an HTTP request fails validation."""


class InvalidRequestBodyError(InvalidRequestError):
    """Raised when the request body is not a JSON object."""


class MissingFieldError(InvalidRequestError):
    """Raised when a required field is absent from the request body."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing '{field_name}' in request body.")
