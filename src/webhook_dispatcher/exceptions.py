"""Exception hierarchy for the webhook dispatcher.

Every error carries the HTTP status it maps to and a short public detail.
The detail is the only text that reaches the caller; the exception message
itself may contain paths or parser output and is only logged.
"""


class DispatcherError(Exception):
    """Base class for all dispatcher errors."""

    status_code: int = 500
    detail: str = "Internal Server Error"


class AuthenticationError(DispatcherError):
    """The request could not be authenticated."""

    status_code = 401
    detail = "Unauthorized"


class MissingSignatureError(AuthenticationError):
    """A secret is configured but the request carries no signature header."""


class SignatureFormatError(AuthenticationError):
    """The signature header does not use the sha256= scheme."""


class PayloadValidationError(DispatcherError):
    """A required header or payload field is missing or malformed."""

    status_code = 400
    detail = "Bad Request"


class ConfigurationError(DispatcherError):
    """The routing table could not be loaded."""


class RouteFileReadError(ConfigurationError):
    """The route file exists but could not be read."""


class RouteFileNotFoundError(RouteFileReadError):
    """The route file does not exist."""


class RouteFileParseError(ConfigurationError):
    """The route file content is invalid for its declared format."""


class UnsupportedFormatError(ConfigurationError):
    """The route file suffix is not one of toml, json, yaml or yml."""
