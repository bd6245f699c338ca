"""Custom exception hierarchy for bank-terminal."""


class BankTerminalError(Exception):
    """Base exception for all bank-terminal errors."""


class ConfigurationError(BankTerminalError):
    """Raised when configuration is invalid or missing."""


class RequestFailedError(BankTerminalError):
    """Raised when a backend request fails.

    Carries the backend's raw message. ``status_code`` is ``None`` when the
    request never got a response (connection refused, timeout, ...).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationError(RequestFailedError):
    """Raised when a login response does not identify a manager."""


class InvalidIdentifierError(BankTerminalError, ValueError):
    """Raised when an identifier is rejected before a request is sent."""

    def __init__(self, kind: str, value: str) -> None:
        super().__init__(f"Invalid {kind}: {value!r}")
        self.kind = kind
        self.value = value


class InvalidTaxIdError(InvalidIdentifierError):
    """Raised when a CPF fails the checksum before a request is sent."""

    def __init__(self, value: str) -> None:
        super().__init__("CPF", value)


class UnknownAccountKindError(BankTerminalError):
    """Raised when an account payload matches no known account kind."""
