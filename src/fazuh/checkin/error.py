"""Custom exception hierarchy for the Checkin application.

This module defines the base exception class and specific error types
used throughout the application for error handling.
"""


class CheckinError(Exception): ...


class InternalError(CheckinError):
    """Error caused by failure in app logic."""


class ConfigError(CheckinError):
    """Error caused by invalid user configuration."""


class TransportError(CheckinError):
    """The service answered with a non-success HTTP status."""


class LoginRejected(CheckinError):
    """The service refused the submitted credentials."""


class MissingCredential(CheckinError):
    """Login succeeded but no session cookie was returned."""


class ResponseDecodeError(CheckinError):
    """The response body is not the JSON document the service should return."""
