from typing import Optional


class CheckError(Exception):
    """Base class for every failure that aborts a check run."""


class ConfigError(CheckError):
    """Bad local configuration: malformed CA material, missing credentials, unreadable files."""


class TransportError(CheckError):
    """Connection, TLS or protocol failure talking to the appliance."""


class AuthenticationError(CheckError):
    """Login reached the appliance but no session was handed out."""


class HttpError(CheckError):
    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class ParseError(CheckError):
    """Response body does not match the expected schema."""


class InvariantError(CheckError):
    """The appliance returned something outside its documented contract."""
