"""Exceptions raised while relaying a prompt upstream."""


class RelayError(Exception):
    """Base class for relay failures."""

    pass


class CredentialNotConfiguredError(RelayError):
    """Raised when no upstream API credential is configured."""

    def __init__(self) -> None:
        super().__init__("API credential not configured")


class UpstreamError(RelayError):
    """Raised when the generation API fails or returns an unexpected body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
