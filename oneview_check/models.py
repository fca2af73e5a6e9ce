from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from enum import Enum

from .errors import InvariantError

class Status(str, Enum):
    OK = "OK"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    UNKNOWN = "UNKNOWN"

class AlertSeverity(str, Enum):
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"

    @classmethod
    def parse(cls, value: str) -> "AlertSeverity":
        """Maps a wire severity string (any case) onto the closed set of known severities."""
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvariantError(f"unknown alert severity: {value}") from None

@dataclass
class ClientConfig:
    target_host: str
    ca_certificate: Optional[bytes] = None
    insecure_mode: bool = False

@dataclass(frozen=True)
class Session:
    token: str

    def __repr__(self):
        # never leak the token into logs or tracebacks
        return "Session(token=<redacted>)"

@dataclass
class Alert:
    severity: str
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

@dataclass
class AlertCollection:
    """
    Uncleared alerts as reported by the appliance.
    `count` is whatever the server claimed; `members` is the source of truth.
    """
    count: int
    members: List[Alert] = field(default_factory=list)

    def is_empty(self) -> bool:
        return len(self.members) == 0

@dataclass(frozen=True)
class Verdict:
    status: Status
    message: str
