"""
INWX Client Exceptions

Exception hierarchy for local, transport and remote failures.
"""


class INWXError(Exception):
    """Base class for all client errors."""


class INWXValidationError(INWXError, ValueError):
    """Request rejected locally before anything was sent."""


class INWXConnectionError(INWXError):
    """HTTP transport failure (connect, TLS, timeout, bad HTTP status)."""


class INWXXMLError(INWXError):
    """Malformed XML-RPC document or argument that cannot be encoded."""


class INWXDecodeError(INWXError):
    """Response data does not have the shape the typed result expects."""


class INWXCommandError(INWXError):
    """
    Remote service rejected the command.

    Attributes:
        code: Response code (outside 1000-1500)
        message: Response message
        reason_code: Optional reason code
        reason: Optional reason text
    """

    def __init__(self, message: str, code: int, reason_code: str = "", reason: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code
        self.reason_code = reason_code
        self.reason = reason

    def __str__(self) -> str:
        if self.reason:
            return f"({self.code}) {self.message}. Reason: ({self.reason_code}) {self.reason}"
        return f"({self.code}) {self.message}"


class INWXAuthenticationError(INWXCommandError):
    """Login failed or session is no longer authenticated."""


class INWXObjectNotFound(INWXCommandError):
    """Object does not exist (2303)."""


class INWXObjectExists(INWXCommandError):
    """Object already exists (2302)."""
