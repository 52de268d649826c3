"""Errors raised while talking to LPSN or reading its pages."""


class LPSNError(Exception):
    """Base class for every failure of an LPSN lookup."""


class ParseError(LPSNError):
    """Raised when an LPSN page cannot be parsed into a document."""


class NetworkError(LPSNError):
    """Raised when an LPSN request fails or returns a non-success status."""

    def __init__(self, message: str, url: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human readable description of the failure
            url: URL of the request that failed, when known
        """
        super().__init__(message)
        self.url = url


class UpstreamTimeoutError(NetworkError):
    """Raised when an LPSN request exceeds the configured timeout."""
