from dataclasses import dataclass

from .models import Status, Verdict

OK = 0
WARNING = 1
CRITICAL = 2
UNKNOWN = 3

EXIT_CODES = {
    Status.OK: OK,
    Status.WARNING: WARNING,
    Status.CRITICAL: CRITICAL,
    Status.UNKNOWN: UNKNOWN,
}

@dataclass
class NagiosState:
    status: Status
    message: str

    @classmethod
    def from_verdict(cls, verdict: Verdict) -> "NagiosState":
        return cls(verdict.status, verdict.message)

    @classmethod
    def unknown(cls, message: str) -> "NagiosState":
        return cls(Status.UNKNOWN, message)

    @property
    def exit_code(self) -> int:
        return exit_code(self.status)

    def line(self) -> str:
        return f"{self.status.value} - {self.message}"

def exit_code(status: Status) -> int:
    return EXIT_CODES[status]